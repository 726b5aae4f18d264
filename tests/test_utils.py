"""Tests for utility functions."""

from tunnel_validator.utils import (
    MAX_PORT,
    MIN_PORT,
    SUPPORTED_PROTOCOLS,
    sanitize_log_data,
    summarize_secret,
)


class TestConstants:
    """Test shared constants."""

    def test_port_range(self):
        """Port range excludes privileged ports"""
        assert MIN_PORT == 1024
        assert MAX_PORT == 65535

    def test_supported_protocols(self):
        """Only udp and tcp are supported"""
        assert SUPPORTED_PROTOCOLS == {"udp", "tcp"}


class TestSummarizeSecret:
    """Test secret summarizing."""

    def test_summarize(self):
        """Secret is replaced by its length"""
        assert summarize_secret("abcdef") == "<6 chars>"

    def test_empty(self):
        """Empty and None values get a placeholder"""
        assert summarize_secret("") == "<None>"
        assert summarize_secret(None) == "<None>"


class TestSanitizeLogData:
    """Test log data sanitizing."""

    def test_sensitive_fields_hidden(self):
        """Key and certificate fields are summarized"""
        data = {
            "remote_ip": "10.0.0.1",
            "preshared_key": "-----BEGIN OpenVPN Static key V1-----",
            "ca_certificate": "-----BEGIN CERTIFICATE-----",
            "api_secret": "s3cr3t",
        }
        sanitized = sanitize_log_data(data)

        assert sanitized["remote_ip"] == "10.0.0.1"
        assert sanitized["preshared_key"] == "<37 chars>"
        assert sanitized["ca_certificate"] == "<27 chars>"
        assert sanitized["api_secret"] == "<6 chars>"

    def test_original_untouched(self):
        """Input dictionary is not modified"""
        data = {"preshared_key": "secret"}
        sanitize_log_data(data)
        assert data == {"preshared_key": "secret"}
