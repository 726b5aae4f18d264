"""Utility helpers shared by the validation rules."""

from typing import Any

# Unprivileged port range accepted for remote endpoints
MIN_PORT = 1024
MAX_PORT = 65535

SUPPORTED_PROTOCOLS = frozenset({"udp", "tcp"})

SENSITIVE_FIELDS = frozenset({"preshared_key", "ca_certificate", "key", "secret"})


def summarize_secret(value: str | None) -> str:
    """Describe a secret by its size only.

    Args:
        value: Secret text such as static key or certificate contents

    Returns:
        Placeholder string safe for logging
    """
    if not value:
        return "<None>"
    return f"<{len(value)} chars>"


def sanitize_log_data(data: dict[str, Any]) -> dict[str, Any]:
    """Sanitize dictionary data for safe logging by hiding secret material.

    Args:
        data: Dictionary potentially containing sensitive data

    Returns:
        Sanitized dictionary safe for logging
    """
    sanitized = {}
    for key, value in data.items():
        if any(field in key.lower() for field in SENSITIVE_FIELDS):
            sanitized[key] = summarize_secret(str(value) if value else None)
        else:
            sanitized[key] = value

    return sanitized
