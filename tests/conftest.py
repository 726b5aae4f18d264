"""Shared pytest fixtures for tunnel validator tests."""

import datetime
import logging

import pytest
import structlog
from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.x509.oid import NameOID

from tunnel_validator import TunnelConfig

STATIC_KEY_HEADER = "-----BEGIN OpenVPN Static key V1-----"
STATIC_KEY_FOOTER = "-----END OpenVPN Static key V1-----"


def make_static_key(payload: str | None = None, preamble: str = "") -> str:
    """Build static key file text around a hex payload.

    Args:
        payload: Hex payload, 512 characters of key material by default
        preamble: Text placed before the header (comments, blank lines)

    Returns:
        Static key file contents split in 32 character lines
    """
    if payload is None:
        payload = bytes(range(256)).hex()
    lines = [payload[i : i + 32] for i in range(0, len(payload), 32)]
    return preamble + "\n".join([STATIC_KEY_HEADER, *lines, STATIC_KEY_FOOTER]) + "\n"


@pytest.fixture(scope="session")
def ca_certificate_pem() -> str:
    """Generate a self-signed CA certificate.

    Returns:
        str: PEM encoded certificate
    """
    key = ec.generate_private_key(ec.SECP256R1())
    name = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, "Test VPN CA")])
    now = datetime.datetime.now(datetime.timezone.utc)
    certificate = (
        x509.CertificateBuilder()
        .subject_name(name)
        .issuer_name(name)
        .public_key(key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now)
        .not_valid_after(now + datetime.timedelta(days=1))
        .add_extension(x509.BasicConstraints(ca=True, path_length=None), critical=True)
        .sign(key, hashes.SHA256())
    )
    return certificate.public_bytes(serialization.Encoding.PEM).decode("ascii")


@pytest.fixture
def make_key():
    """Factory building static key file text from a hex payload."""
    return make_static_key


@pytest.fixture
def static_key_text() -> str:
    """Valid OpenVPN static key file contents with a comment preamble."""
    return make_static_key(preamble="#\n# 2048 bit OpenVPN static key\n#\n")


@pytest.fixture
def tunnel_config(static_key_text, ca_certificate_pem) -> TunnelConfig:
    """Create a configuration that passes every rule.

    Returns:
        TunnelConfig: Valid configuration
    """
    return TunnelConfig(
        remote_protocol="udp",
        remote_port=11194,
        remote_ip="192.168.1.10",
        preshared_key=static_key_text,
        ca_certificate=ca_certificate_pem,
    )


@pytest.fixture(autouse=True)
def reset_logging():
    """Reset logging configuration after each test.

    This prevents tests from interfering with each other's logging setup.
    """
    yield
    structlog.reset_defaults()
    package_logger = logging.getLogger("tunnel_validator")
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
