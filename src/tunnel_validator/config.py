"""Configuration models for tunnel validation."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator

from .utils import sanitize_log_data


class RuleName(str, Enum):
    """Names of the built-in validation rules."""

    PROTOCOL = "protocol"
    PORT = "port"
    IP_FORMAT = "ip_format"
    PRESHARED_KEY = "preshared_key"
    CA_CERTIFICATE = "ca_certificate"


# Cheap syntactic checks run before cryptographic decoding
DEFAULT_RULE_ORDER: tuple[RuleName, ...] = (
    RuleName.PROTOCOL,
    RuleName.PORT,
    RuleName.IP_FORMAT,
    RuleName.PRESHARED_KEY,
    RuleName.CA_CERTIFICATE,
)


class TunnelConfig(BaseModel):
    """Connection descriptor handed to the VPN client process.

    Only types are enforced here. Value checks belong to the validation
    pipeline so an invalid descriptor can still be represented and rejected
    with a rule-specific error.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    remote_protocol: StrictStr = Field(description="Transport protocol (udp or tcp)")
    remote_port: StrictInt = Field(description="Remote endpoint port")
    remote_ip: StrictStr = Field(description="Remote endpoint IPv4 address")
    preshared_key: StrictStr = Field(
        repr=False, description="OpenVPN static key file contents"
    )
    ca_certificate: StrictStr = Field(
        repr=False, description="PEM encoded CA certificate"
    )

    def safe_dump(self) -> dict[str, Any]:
        """Dump configuration for logging with secret material hidden."""
        return sanitize_log_data(self.model_dump())


class PipelineConfig(BaseModel):
    """Pydantic configuration for building a custom validation pipeline"""

    model_config = ConfigDict(frozen=True, extra="forbid")

    rules: list[RuleName] = Field(
        default_factory=lambda: list(DEFAULT_RULE_ORDER),
        description="Rules to run, in evaluation order",
    )
    log_failures: bool = Field(default=True, description="Log rejected configurations")

    @field_validator("rules")
    @classmethod
    def validate_unique_rules(cls, v: list[RuleName]) -> list[RuleName]:
        """Reject rule lists naming the same rule twice"""
        seen: set[RuleName] = set()
        for name in v:
            if name in seen:
                raise ValueError(f"Duplicate rule: {name.value}")
            seen.add(name)
        return v
