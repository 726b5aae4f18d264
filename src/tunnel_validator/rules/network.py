"""Endpoint checks: transport protocol, port range and IPv4 address."""

from __future__ import annotations

import ipaddress
from typing import TYPE_CHECKING

from ..config import RuleName
from ..exceptions import (
    AddressNotIPv4Error,
    InvalidAddressError,
    PortOutOfRangeError,
    UnsupportedProtocolError,
)
from ..utils import MAX_PORT, MIN_PORT, SUPPORTED_PROTOCOLS
from .base import FunctionRule

if TYPE_CHECKING:
    from ..config import TunnelConfig


def check_protocol(config: TunnelConfig) -> None:
    """Require the remote protocol to be exactly udp or tcp.

    Raises:
        UnsupportedProtocolError: For any other value, including empty string
    """
    if config.remote_protocol not in SUPPORTED_PROTOCOLS:
        raise UnsupportedProtocolError(
            f"Unsupported protocol: {config.remote_protocol!r}"
        )


def check_port(config: TunnelConfig) -> None:
    """Require the remote port to be an unprivileged port number.

    Raises:
        PortOutOfRangeError: If port is not in range 1024-65535
    """
    if not (MIN_PORT <= config.remote_port <= MAX_PORT):
        raise PortOutOfRangeError(
            f"Port {config.remote_port} out of range, "
            f"must be between {MIN_PORT} and {MAX_PORT}"
        )


def parse_ipv4(value: str) -> ipaddress.IPv4Address:
    """Parse an IP literal that must denote an IPv4 address.

    IPv4-mapped IPv6 literals (``::ffff:a.b.c.d``) are unwrapped to the IPv4
    address they carry. Every other IPv6 address is rejected.

    Args:
        value: IP address literal

    Returns:
        Parsed IPv4 address

    Raises:
        InvalidAddressError: If value is not an IP literal
        AddressNotIPv4Error: If value is an IPv6 address
    """
    try:
        address = ipaddress.ip_address(value)
    except ValueError as e:
        raise InvalidAddressError(f"Invalid address: {value!r}", cause=e) from e

    if isinstance(address, ipaddress.IPv4Address):
        return address

    if address.ipv4_mapped is not None:
        return address.ipv4_mapped

    raise AddressNotIPv4Error(f"IPv4 address required, got {value!r}")


def check_ip_format(config: TunnelConfig) -> None:
    parse_ipv4(config.remote_ip)


protocol_rule = FunctionRule(RuleName.PROTOCOL.value, check_protocol)
port_rule = FunctionRule(RuleName.PORT.value, check_port)
ip_format_rule = FunctionRule(RuleName.IP_FORMAT.value, check_ip_format)
