"""Rule interface shared by all validation checks."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from ..exceptions import ConfigValidationError

if TYPE_CHECKING:
    from ..config import TunnelConfig


@runtime_checkable
class Rule(Protocol):
    """A single check over a tunnel configuration."""

    @property
    def name(self) -> str:
        """Rule identifier used in logs."""
        ...

    def check(self, config: TunnelConfig) -> ConfigValidationError | None:
        """Return the failure for ``config``, or None if it passes."""
        ...


@dataclass(frozen=True)
class FunctionRule:
    """Adapts a raising check function to the Rule protocol.

    The wrapped function raises a ConfigValidationError subclass to reject a
    configuration. Any other exception is a bug in the check and propagates.
    """

    name: str
    func: Callable[[TunnelConfig], None]

    def check(self, config: TunnelConfig) -> ConfigValidationError | None:
        try:
            self.func(config)
        except ConfigValidationError as e:
            return e
        return None
