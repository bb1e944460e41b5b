"""
Unit tests for scan URL validation.
"""

import pytest

from entity_scanner.domain.validation import is_blocked_host, validate_scan_url
from entity_scanner.errors import BlockedHostError, InvalidScanUrl, UrlValidationError


class TestIsBlockedHost:
    """Tests for is_blocked_host function."""

    @pytest.mark.parametrize(
        "host",
        [
            "localhost",
            "LOCALHOST",
            "127.0.0.1",
            "192.168.1.1",
            "10.0.0.5",
            "172.16.4.2",
            "app.localhost",
        ],
    )
    def test_blocked(self, host):
        """Loopback and private prefixes are blocked."""
        assert is_blocked_host(host) is True

    @pytest.mark.parametrize(
        "host",
        ["acme.com", "example10.com", "my192.168.example.com", "172.17.0.1", "8.8.8.8"],
    )
    def test_allowed(self, host):
        """Prefixes only match the start of the hostname."""
        assert is_blocked_host(host) is False

    def test_trailing_dot(self):
        """A fully-qualified "localhost." is still blocked."""
        assert is_blocked_host("localhost.") is True


class TestValidateScanUrl:
    """Tests for validate_scan_url function."""

    def test_valid_urls(self):
        """http and https URLs pass and are stripped."""
        assert validate_scan_url("https://acme.com") == "https://acme.com"
        assert validate_scan_url("  http://acme.com/pricing ") == "http://acme.com/pricing"

    @pytest.mark.parametrize(
        "url",
        ["ftp://x.com", "acme.com", "", "   ", "https://", "mailto:sales@acme.com", "http://[::1"],
    )
    def test_invalid_shape(self, url):
        """Non-http(s) or malformed URLs are rejected."""
        with pytest.raises(UrlValidationError) as exc_info:
            validate_scan_url(url)
        assert "Must start with http:// or https://" in exc_info.value.user_message

    def test_non_string_rejected(self):
        """Non-string input is a validation error, not a crash."""
        with pytest.raises(UrlValidationError):
            validate_scan_url(None)  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        "url",
        [
            "http://192.168.1.1",
            "http://localhost:3000/admin",
            "https://10.1.2.3",
            "http://127.0.0.1",
            "http://app.localhost:8080/",
        ],
    )
    def test_blocked_hosts(self, url):
        """Private hosts raise BlockedHostError."""
        with pytest.raises(BlockedHostError) as exc_info:
            validate_scan_url(url)
        assert exc_info.value.user_message == "Cannot scan internal or private network addresses"

    def test_common_base_class(self):
        """Both failure kinds share InvalidScanUrl."""
        assert issubclass(BlockedHostError, InvalidScanUrl)
        assert issubclass(UrlValidationError, InvalidScanUrl)
