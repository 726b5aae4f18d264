"""Fail-fast validation pipeline over tunnel configurations."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from .config import DEFAULT_RULE_ORDER, PipelineConfig, RuleName, TunnelConfig
from .exceptions import ConfigValidationError
from .logging import get_logger
from .rules import (
    Rule,
    ca_certificate_rule,
    ip_format_rule,
    port_rule,
    preshared_key_rule,
    protocol_rule,
)

logger = get_logger(__name__)

BUILTIN_RULES: Mapping[RuleName, Rule] = MappingProxyType({
    RuleName.PROTOCOL: protocol_rule,
    RuleName.PORT: port_rule,
    RuleName.IP_FORMAT: ip_format_rule,
    RuleName.PRESHARED_KEY: preshared_key_rule,
    RuleName.CA_CERTIFICATE: ca_certificate_rule,
})


class ConfigValidator:
    """Runs an ordered list of rules and reports the first failure.

    The validator holds no state besides its rules, so one instance can be
    shared between threads.
    """

    def __init__(self, rules: Iterable[Rule], log_failures: bool = True):
        """Initialize validator with rules in evaluation order.

        Args:
            rules: Rules to run, first to last
            log_failures: Log an event for each rejected configuration
        """
        self._rules: tuple[Rule, ...] = tuple(rules)
        self._log_failures = log_failures

    @classmethod
    def default(cls) -> ConfigValidator:
        """Create validator with the canonical rule order.

        Protocol, port and IP checks run before the key and certificate
        decoding.
        """
        return cls(BUILTIN_RULES[name] for name in DEFAULT_RULE_ORDER)

    @classmethod
    def from_config(cls, config: PipelineConfig) -> ConfigValidator:
        """Create validator running the named built-in rules in order.

        Args:
            config: Pipeline configuration

        Returns:
            Validator for the configured rules
        """
        return cls(
            (BUILTIN_RULES[name] for name in config.rules),
            log_failures=config.log_failures,
        )

    @property
    def rules(self) -> tuple[Rule, ...]:
        """Rules in evaluation order"""
        return self._rules

    def check(self, config: TunnelConfig) -> ConfigValidationError | None:
        """Check configuration against every rule, stopping at the first failure.

        Args:
            config: Tunnel configuration to check

        Returns:
            The failing rule's error unchanged, or None if all rules pass
        """
        for rule in self._rules:
            error = rule.check(config)
            if error is not None:
                if self._log_failures:
                    logger.info(
                        "Tunnel configuration rejected",
                        rule=rule.name,
                        kind=error.kind.value,
                        error=error.message,
                    )
                return error

        logger.debug(
            "Tunnel configuration valid",
            rules=[rule.name for rule in self._rules],
        )
        return None

    def validate(self, config: TunnelConfig) -> None:
        """Check configuration and raise the first failure.

        Raises:
            ConfigValidationError: Subclass matching the failing rule
        """
        error = self.check(config)
        if error is not None:
            raise error

    def is_valid(self, config: TunnelConfig) -> bool:
        """Return True if configuration passes every rule"""
        return self.check(config) is None

    def __repr__(self) -> str:
        names = ", ".join(rule.name for rule in self._rules)
        return f"ConfigValidator([{names}])"


def default_validator() -> ConfigValidator:
    """Create validator with the canonical rule order."""
    return ConfigValidator.default()
