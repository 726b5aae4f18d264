"""Tunnel Validator - Pre-flight checks for VPN tunnel configurations."""

from .config import DEFAULT_RULE_ORDER, PipelineConfig, RuleName, TunnelConfig
from .exceptions import (
    AddressNotIPv4Error,
    CertificateParseError,
    ConfigValidationError,
    ErrorKind,
    InvalidAddressError,
    KeyEncodingInvalidError,
    KeyHeaderInvalidError,
    KeyLengthInvalidError,
    KeyScanError,
    PemBlockMissingError,
    PemTypeMismatchError,
    PortOutOfRangeError,
    TunnelValidatorError,
    UnsupportedProtocolError,
)
from .logging import get_logger, setup_logging
from .pipeline import BUILTIN_RULES, ConfigValidator, default_validator
from .rules import (
    FunctionRule,
    PemBlock,
    Rule,
    StaticKey,
    decode_pem,
    parse_ca_certificate,
    parse_ipv4,
    parse_static_key,
)

__version__ = "0.1.0"


__all__ = [
    # Pipeline
    "ConfigValidator",
    "default_validator",
    "BUILTIN_RULES",
    "Rule",
    "FunctionRule",
    # Configuration
    "TunnelConfig",
    "PipelineConfig",
    "RuleName",
    "DEFAULT_RULE_ORDER",
    # Parsers
    "parse_ipv4",
    "parse_static_key",
    "parse_ca_certificate",
    "decode_pem",
    "StaticKey",
    "PemBlock",
    # Exceptions
    "TunnelValidatorError",
    "ConfigValidationError",
    "ErrorKind",
    "UnsupportedProtocolError",
    "PortOutOfRangeError",
    "InvalidAddressError",
    "AddressNotIPv4Error",
    "KeyHeaderInvalidError",
    "KeyLengthInvalidError",
    "KeyEncodingInvalidError",
    "KeyScanError",
    "PemBlockMissingError",
    "PemTypeMismatchError",
    "CertificateParseError",
    # Logging
    "get_logger",
    "setup_logging",
]
