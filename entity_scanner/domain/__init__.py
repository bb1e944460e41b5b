"""URL validation for scan requests."""

from entity_scanner.domain.validation import is_blocked_host, validate_scan_url

__all__ = ["is_blocked_host", "validate_scan_url"]
