"""CA certificate checks: PEM envelope decoding and X.509 structure parsing."""

from __future__ import annotations

import base64
import binascii
import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from cryptography import x509

from ..config import RuleName
from ..exceptions import (
    CertificateParseError,
    PemBlockMissingError,
    PemTypeMismatchError,
)
from .base import FunctionRule

if TYPE_CHECKING:
    from ..config import TunnelConfig

CERTIFICATE_BLOCK_TYPE = "CERTIFICATE"

_PEM_BLOCK_RE = re.compile(
    r"^-----BEGIN (?P<type>[^\r\n]*?)-----[ \t]*\r?\n"
    r"(?P<body>.*?)"
    r"^-----END (?P=type)-----[ \t]*$",
    re.MULTILINE | re.DOTALL,
)


@dataclass(frozen=True)
class PemBlock:
    """A decoded PEM block."""

    type: str
    headers: dict[str, str] = field(default_factory=dict)
    data: bytes = field(default=b"", repr=False)


def _split_headers(body: str) -> tuple[dict[str, str], str]:
    """Separate RFC 1421 style ``Key: Value`` headers from the base64 body."""
    lines = body.splitlines()
    if not lines or ":" not in lines[0]:
        return {}, body

    headers: dict[str, str] = {}
    for index, line in enumerate(lines):
        if not line.strip():
            return headers, "\n".join(lines[index + 1 :])
        key, sep, value = line.partition(":")
        if not sep:
            # Header section without a terminating blank line
            return headers, "\n".join(lines[index:])
        headers[key.strip()] = value.strip()
    return headers, ""


def decode_pem(text: str) -> PemBlock | None:
    """Find and decode the first well-formed PEM block in ``text``.

    Blocks whose body is not valid base64 are skipped and the search
    continues after them.

    Args:
        text: Text that may contain PEM blocks

    Returns:
        First decodable block, or None if there is none
    """
    for match in _PEM_BLOCK_RE.finditer(text):
        headers, encoded = _split_headers(match.group("body"))
        try:
            data = base64.b64decode("".join(encoded.split()), validate=True)
        except binascii.Error:
            continue
        return PemBlock(type=match.group("type"), headers=headers, data=data)
    return None


def parse_ca_certificate(text: str) -> x509.Certificate:
    """Decode a PEM encoded X.509 certificate.

    Only the structure is verified. Trust chain, validity period and key
    usage are not checked.

    Args:
        text: PEM text whose first block is the certificate

    Returns:
        Parsed certificate

    Raises:
        PemBlockMissingError: If no PEM block is present
        PemTypeMismatchError: If the first block is not a CERTIFICATE
        CertificateParseError: If the block payload is not a valid certificate
    """
    block = decode_pem(text)
    if block is None:
        raise PemBlockMissingError("Invalid CA certificate: no PEM block found")

    if block.type != CERTIFICATE_BLOCK_TYPE:
        raise PemTypeMismatchError(
            f"Invalid CA certificate: {CERTIFICATE_BLOCK_TYPE} block expected, "
            f"got {block.type!r}"
        )

    try:
        return x509.load_der_x509_certificate(block.data)
    except (ValueError, x509.InvalidVersion) as e:
        raise CertificateParseError(
            f"Invalid CA certificate: unable to parse certificate: {e}", cause=e
        ) from e


def check_ca_certificate(config: TunnelConfig) -> None:
    parse_ca_certificate(config.ca_certificate)


ca_certificate_rule = FunctionRule(RuleName.CA_CERTIFICATE.value, check_ca_certificate)
