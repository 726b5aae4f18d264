"""Custom exceptions for tunnel configuration validation."""

from enum import Enum


class ErrorKind(str, Enum):
    """Stable tag identifying which rule rejected a configuration."""

    UNSUPPORTED_PROTOCOL = "unsupported_protocol"
    PORT_OUT_OF_RANGE = "port_out_of_range"
    INVALID_ADDRESS = "invalid_address"
    ADDRESS_NOT_IPV4 = "address_not_ipv4"
    KEY_HEADER_INVALID = "key_header_invalid"
    KEY_LENGTH_INVALID = "key_length_invalid"
    KEY_ENCODING_INVALID = "key_encoding_invalid"
    KEY_SCAN_FAILED = "key_scan_failed"
    PEM_BLOCK_MISSING = "pem_block_missing"
    PEM_TYPE_MISMATCH = "pem_type_mismatch"
    CERTIFICATE_PARSE_FAILED = "certificate_parse_failed"


class TunnelValidatorError(Exception):
    """Base exception for all tunnel validator errors."""
    pass


class ConfigValidationError(TunnelValidatorError):
    """Raised or returned when a tunnel configuration fails a rule.

    Attributes:
        kind: Which rule failed
        message: Human readable description including the offending value
        cause: Underlying exception, if the failure wraps one
    """

    kind: ErrorKind

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.message = message
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value!r}, message={self.message!r})"


class UnsupportedProtocolError(ConfigValidationError):
    """Raised when the remote protocol is neither udp nor tcp."""

    kind = ErrorKind.UNSUPPORTED_PROTOCOL


class PortOutOfRangeError(ConfigValidationError):
    """Raised when the remote port is outside the unprivileged port range."""

    kind = ErrorKind.PORT_OUT_OF_RANGE


class InvalidAddressError(ConfigValidationError):
    """Raised when the remote address is not an IP literal."""

    kind = ErrorKind.INVALID_ADDRESS


class AddressNotIPv4Error(ConfigValidationError):
    """Raised when the remote address parses only as IPv6."""

    kind = ErrorKind.ADDRESS_NOT_IPV4


class KeyHeaderInvalidError(ConfigValidationError):
    """Raised when the static key does not start with the expected header."""

    kind = ErrorKind.KEY_HEADER_INVALID


class KeyLengthInvalidError(ConfigValidationError):
    """Raised when the static key payload is not 512 hex characters long."""

    kind = ErrorKind.KEY_LENGTH_INVALID


class KeyEncodingInvalidError(ConfigValidationError):
    """Raised when the static key payload is not hexadecimal."""

    kind = ErrorKind.KEY_ENCODING_INVALID


class KeyScanError(ConfigValidationError):
    """Raised when the static key text cannot be read line by line."""

    kind = ErrorKind.KEY_SCAN_FAILED


class PemBlockMissingError(ConfigValidationError):
    """Raised when the CA certificate text holds no PEM block."""

    kind = ErrorKind.PEM_BLOCK_MISSING


class PemTypeMismatchError(ConfigValidationError):
    """Raised when the first PEM block is not a CERTIFICATE."""

    kind = ErrorKind.PEM_TYPE_MISMATCH


class CertificateParseError(ConfigValidationError):
    """Raised when the PEM payload is not a valid X.509 structure."""

    kind = ErrorKind.CERTIFICATE_PARSE_FAILED
