"""
Exception hierarchy for entity scans.

Every failure a scan can surface derives from ScanError and carries the flat,
human-readable message that is returned to the caller. Raw provider error text
is never used as the message for rate-limit or authentication failures.
"""

GENERIC_SCAN_FAILURE = "Failed to complete scan. Please check the URL and try again."


class ScanError(Exception):
    """Base class for all scan failures."""

    def __init__(self, user_message: str):
        super().__init__(user_message)
        self.user_message = user_message


# === Input validation ===


class InvalidScanUrl(ScanError):
    """The URL was rejected before any network call."""


class UrlValidationError(InvalidScanUrl):
    """URL is not an absolute http(s) URL."""

    def __init__(self):
        super().__init__("Invalid URL format. Must start with http:// or https://")


class BlockedHostError(InvalidScanUrl):
    """URL points at a loopback or private network host."""

    def __init__(self, hostname: str):
        super().__init__("Cannot scan internal or private network addresses")
        self.hostname = hostname


# === Website extraction ===


class ExtractionError(ScanError):
    """Fetching or parsing the website failed."""


class HttpStatusError(ExtractionError):
    """Website answered with a non-2xx status."""

    def __init__(self, status_code: int):
        super().__init__(f"HTTP {status_code}: Failed to fetch website")
        self.status_code = status_code


class ExtractionTimeoutError(ExtractionError):
    """Website did not answer within the fetch timeout."""

    def __init__(self, timeout_seconds: float):
        super().__init__(
            f"Website took too long to respond (timeout after {timeout_seconds:g}s)"
        )
        self.timeout_seconds = timeout_seconds


# === Model queries ===


class ModelQueryError(ScanError):
    """The language model query failed."""


class ModelRateLimitError(ModelQueryError):
    """Provider rejected the query because of rate limiting."""

    def __init__(self):
        super().__init__("API rate limit exceeded. Please try again in a few minutes.")


class ModelAuthenticationError(ModelQueryError):
    """Provider rejected the credential."""

    def __init__(self):
        super().__init__("API authentication failed. Please check configuration.")
