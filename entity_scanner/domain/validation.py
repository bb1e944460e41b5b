"""
Scan URL validation.

Every URL is checked here before any network call is made. Only absolute
http(s) URLs are accepted, and hosts on the loopback/private blocklist are
rejected so the scanner cannot be pointed at internal services.
"""

import logging
from urllib.parse import urlparse

from entity_scanner.constants import (
    ALLOWED_URL_SCHEMES,
    BLOCKED_HOST_PREFIXES,
    BLOCKED_HOST_SUFFIXES,
    BLOCKED_HOSTS,
)
from entity_scanner.errors import BlockedHostError, UrlValidationError

logger = logging.getLogger(__name__)


def is_blocked_host(hostname: str) -> bool:
    """
    Check if hostname is a loopback or private network address.

    Exact entries (localhost, 127.0.0.1) must match the whole hostname;
    names under .localhost (e.g. "app.localhost") are loopback too;
    prefix entries (192.168., 10., 172.16.) must match its start, so
    "example10.com" is allowed while "10.0.0.5" is not.

    Args:
        hostname: Hostname from a parsed URL

    Returns:
        True if the host must not be scanned
    """
    host = hostname.lower().rstrip(".")
    if host in BLOCKED_HOSTS or host.endswith(BLOCKED_HOST_SUFFIXES):
        return True
    return any(host.startswith(prefix) for prefix in BLOCKED_HOST_PREFIXES)


def validate_scan_url(url: str) -> str:
    """
    Validate a URL submitted for scanning.

    Examples:
        "https://acme.com" -> "https://acme.com"
        "  https://acme.com/pricing " -> "https://acme.com/pricing"
        "ftp://acme.com" -> UrlValidationError
        "http://192.168.1.1" -> BlockedHostError

    Args:
        url: Raw URL string

    Returns:
        The stripped URL

    Raises:
        UrlValidationError: URL is not an absolute http(s) URL
        BlockedHostError: URL points at a blocklisted host
    """
    if not isinstance(url, str) or not url.strip():
        raise UrlValidationError()

    url = url.strip()
    try:
        parsed = urlparse(url)
        hostname = parsed.hostname
    except ValueError:
        # Malformed netloc, e.g. unbalanced IPv6 brackets
        raise UrlValidationError() from None

    if parsed.scheme.lower() not in ALLOWED_URL_SCHEMES or not hostname:
        raise UrlValidationError()

    if is_blocked_host(hostname):
        logger.warning(f"Rejected scan of private host: {hostname}")
        raise BlockedHostError(hostname)

    return url
