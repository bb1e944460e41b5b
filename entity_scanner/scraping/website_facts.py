"""
Web fact extraction from a company's public website.

This module fetches a single page and pulls out the facts the comparison
engine needs: company name, page title, description and a pricing phrase.
Open Graph metadata is preferred over plain meta tags when present.
"""

import logging
import re
import time

import requests
from bs4 import BeautifulSoup

from entity_scanner.config import get_fetch_timeout, get_user_agent
from entity_scanner.constants import (
    MAX_COMPANY_NAME_LENGTH,
    MAX_DESCRIPTION_LENGTH,
    MAX_TITLE_LENGTH,
    NO_DESCRIPTION_FOUND,
    PRICING_PATTERNS,
    UNKNOWN_COMPANY_NAME,
)
from entity_scanner.errors import (
    ExtractionError,
    ExtractionTimeoutError,
    HttpStatusError,
)
from entity_scanner.models import OpenGraphData, WebFacts

logger = logging.getLogger(__name__)

# Body is read in chunks so the overall fetch deadline can be checked
READ_CHUNK_SIZE = 16 * 1024

_PRICING_RES = [re.compile(pattern) for pattern in PRICING_PATTERNS]


def _parse_html(html: str) -> BeautifulSoup:
    # lxml is faster; html.parser is always available
    try:
        return BeautifulSoup(html, "lxml")
    except Exception:
        return BeautifulSoup(html, "html.parser")


def _meta_content(soup: BeautifulSoup, **attrs) -> str | None:
    """Return the stripped content of the first matching <meta>, or None if empty."""
    tag = soup.find("meta", attrs=attrs)
    if tag is None:
        return None
    content = tag.get("content")
    if isinstance(content, list):
        content = " ".join(content)
    if content and content.strip():
        return content.strip()
    return None


def choose_company_name(og_data: OpenGraphData, page_title: str) -> str:
    """
    Choose the company name using fallback precedence.

    Priority:
    1. og:site_name
    2. og:title
    3. Page title before the first "|"
    4. Page title before the first "-"
    5. "Unknown Company"
    """
    return (
        og_data.site_name
        or og_data.title
        or page_title.split("|")[0].strip()
        or page_title.split("-")[0].strip()
        or UNKNOWN_COMPANY_NAME
    )


def extract_pricing(text: str) -> str | None:
    """
    Find the first pricing phrase in page text.

    Patterns are tried in order and the first one that matches anywhere wins,
    so "$29/mo" is preferred over "from $10" even if it appears later.

    Args:
        text: Visible page text (lower-cased by this function)

    Returns:
        Matched pricing phrase (e.g. "$29/mo") or None
    """
    lowered = text.lower()
    for pattern in _PRICING_RES:
        match = pattern.search(lowered)
        if match:
            return match.group(0)
    return None


def parse_web_facts(html: str) -> WebFacts:
    """
    Extract WebFacts from page HTML.

    Args:
        html: Raw HTML of the page

    Returns:
        WebFacts with length-capped fields
    """
    soup = _parse_html(html)

    og_data = OpenGraphData(
        title=_meta_content(soup, property="og:title"),
        description=_meta_content(soup, property="og:description"),
        site_name=_meta_content(soup, property="og:site_name"),
    )

    page_title = soup.title.get_text() if soup.title else ""
    company_name = choose_company_name(og_data, page_title)

    description = (
        og_data.description
        or _meta_content(soup, name="description")
        or _meta_content(soup, name="twitter:description")
        or NO_DESCRIPTION_FOUND
    )

    body = soup.body if soup.body is not None else soup
    # No separator: a price split across inline tags ("<b>$29</b>/mo") stays contiguous
    pricing = extract_pricing(body.get_text())

    return WebFacts(
        company_name=company_name[:MAX_COMPANY_NAME_LENGTH],
        title=page_title[:MAX_TITLE_LENGTH],
        description=description[:MAX_DESCRIPTION_LENGTH],
        pricing=pricing,
        og_data=og_data,
    )


def _read_body(response: requests.Response, deadline: float, timeout: float) -> str:
    """
    Read the response body in chunks, enforcing an overall deadline.

    requests applies its timeout to the connect and to each socket read
    separately, so a server trickling bytes could otherwise run far past it.
    """
    chunks = []
    for chunk in response.iter_content(chunk_size=READ_CHUNK_SIZE):
        if chunk:
            chunks.append(chunk)
        if time.monotonic() > deadline:
            raise ExtractionTimeoutError(timeout)
    encoding = response.encoding or response.apparent_encoding or "utf-8"
    try:
        return b"".join(chunks).decode(encoding, errors="replace")
    except LookupError:
        # Unknown charset label in Content-Type
        return b"".join(chunks).decode("utf-8", errors="replace")


def fetch_web_facts(
    url: str,
    session: requests.Session | None = None,
    timeout: float | None = None,
) -> WebFacts:
    """
    Fetch a page and extract WebFacts from it.

    The timeout bounds the whole fetch (connect, headers and body), not just
    each individual socket read.

    Args:
        url: Absolute, already validated URL
        session: Optional HTTP session (a plain requests.get is used otherwise)
        timeout: Timeout in seconds (defaults to configured fetch timeout)

    Returns:
        WebFacts for the page

    Raises:
        HttpStatusError: Non-2xx response
        ExtractionTimeoutError: No complete response within the timeout
        ExtractionError: Any other network or parse failure
    """
    if timeout is None:
        timeout = get_fetch_timeout()
    http = session if session is not None else requests
    deadline = time.monotonic() + timeout

    try:
        response = http.get(
            url, headers={"User-Agent": get_user_agent()}, timeout=timeout, stream=True
        )
        try:
            if not 200 <= response.status_code < 300:
                logger.warning(f"HTTP {response.status_code} fetching {url}")
                raise HttpStatusError(response.status_code)
            html = _read_body(response, deadline, timeout)
        finally:
            response.close()
    except ExtractionTimeoutError:
        logger.warning(f"Timed out after {timeout}s reading {url}")
        raise
    except requests.Timeout:
        logger.warning(f"Timed out after {timeout}s fetching {url}")
        raise ExtractionTimeoutError(timeout) from None
    except requests.RequestException as e:
        # Mid-body read timeouts surface from iter_content as ConnectionError
        if time.monotonic() > deadline:
            logger.warning(f"Timed out after {timeout}s reading {url}")
            raise ExtractionTimeoutError(timeout) from None
        logger.warning(f"Network error fetching {url}: {e}")
        raise ExtractionError(f"Scraping failed: {e}") from e

    try:
        facts = parse_web_facts(html)
    except Exception as e:
        raise ExtractionError(f"Scraping failed: {e}") from e

    logger.debug(
        f"Extracted facts for {url}: name={facts.company_name!r}, pricing={facts.pricing!r}"
    )
    return facts
