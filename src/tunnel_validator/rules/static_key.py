"""OpenVPN static key parsing.

The static key file is produced by ``openvpn --genkey secret static.key``::

    #
    # 2048 bit OpenVPN static key
    #
    -----BEGIN OpenVPN Static key V1-----
    <16 lines of 32 hex characters>
    -----END OpenVPN Static key V1-----
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..config import RuleName
from ..exceptions import (
    KeyEncodingInvalidError,
    KeyHeaderInvalidError,
    KeyLengthInvalidError,
    KeyScanError,
)
from .base import FunctionRule

if TYPE_CHECKING:
    from ..config import TunnelConfig

STATIC_KEY_HEADER = "-----BEGIN OpenVPN Static key V1-----"
STATIC_KEY_FOOTER = "-----END OpenVPN Static key V1-----"

STATIC_KEY_SIZE = 256
STATIC_KEY_HEX_LENGTH = STATIC_KEY_SIZE * 2

# Line scanner buffer size, a line and its newline must fit in it
MAX_LINE_LENGTH = 64 * 1024

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


@dataclass(frozen=True)
class StaticKey:
    """Decoded OpenVPN static key material."""

    data: bytes = field(repr=False)

    def __len__(self) -> int:
        return len(self.data)


def _scan_lines(text: str) -> Iterator[str]:
    """Yield lines split on newlines, dropping a trailing carriage return.

    Raises:
        KeyScanError: If a line does not fit the MAX_LINE_LENGTH scan buffer
    """
    if not text:
        return

    lines = text.split("\n")
    # A terminating newline does not start another line
    if lines[-1] == "":
        lines.pop()

    for number, line in enumerate(lines, start=1):
        if line.endswith("\r"):
            line = line[:-1]
        if len(line) >= MAX_LINE_LENGTH:
            raise KeyScanError(
                f"Unable to read static key: line {number} does not fit the "
                f"{MAX_LINE_LENGTH} character scan buffer"
            )
        yield line


def _is_skippable(line: str) -> bool:
    return not line.strip() or line.startswith("#")


def parse_static_key(text: str) -> StaticKey:
    """Parse OpenVPN static key file contents.

    Blank and ``#`` comment lines before the header are skipped. The payload
    lines between header and footer are joined as-is and must form exactly
    512 hexadecimal characters. Anything after the footer is ignored.

    Args:
        text: Static key file contents

    Returns:
        Decoded 256-byte key

    Raises:
        KeyHeaderInvalidError: If the first content line is not the header
        KeyLengthInvalidError: If the payload is not 512 characters long
        KeyEncodingInvalidError: If the payload is not hexadecimal
        KeyScanError: If the text cannot be read line by line
    """
    lines = _scan_lines(text)

    header = ""
    for line in lines:
        if not _is_skippable(line):
            header = line
            break

    if header != STATIC_KEY_HEADER:
        raise KeyHeaderInvalidError(f"Invalid key header: {header!r}")

    chunks: list[str] = []
    for line in lines:
        if line == STATIC_KEY_FOOTER:
            break
        chunks.append(line)
    payload = "".join(chunks)

    if len(payload) != STATIC_KEY_HEX_LENGTH:
        raise KeyLengthInvalidError(
            f"Invalid key length: expected {STATIC_KEY_HEX_LENGTH} hex characters, "
            f"got {len(payload)}"
        )

    # bytes.fromhex tolerates whitespace, which is not part of the format
    if not _HEX_DIGITS.issuperset(payload):
        raise KeyEncodingInvalidError("Invalid key encoding: payload is not hexadecimal")

    return StaticKey(bytes.fromhex(payload))


def check_preshared_key(config: TunnelConfig) -> None:
    parse_static_key(config.preshared_key)


preshared_key_rule = FunctionRule(RuleName.PRESHARED_KEY.value, check_preshared_key)
