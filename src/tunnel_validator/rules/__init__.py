"""Built-in validation rules."""

from .base import FunctionRule, Rule
from .certificate import (
    CERTIFICATE_BLOCK_TYPE,
    PemBlock,
    ca_certificate_rule,
    decode_pem,
    parse_ca_certificate,
)
from .network import ip_format_rule, parse_ipv4, port_rule, protocol_rule
from .static_key import (
    STATIC_KEY_FOOTER,
    STATIC_KEY_HEADER,
    StaticKey,
    parse_static_key,
    preshared_key_rule,
)

__all__ = [
    # Interface
    "Rule",
    "FunctionRule",
    # Rules
    "protocol_rule",
    "port_rule",
    "ip_format_rule",
    "preshared_key_rule",
    "ca_certificate_rule",
    # Parsers
    "parse_ipv4",
    "parse_static_key",
    "parse_ca_certificate",
    "decode_pem",
    "StaticKey",
    "PemBlock",
    "STATIC_KEY_HEADER",
    "STATIC_KEY_FOOTER",
    "CERTIFICATE_BLOCK_TYPE",
]
