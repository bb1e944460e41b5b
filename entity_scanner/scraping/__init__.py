"""Website fact extraction."""

from entity_scanner.scraping.website_facts import (
    extract_pricing,
    fetch_web_facts,
    parse_web_facts,
)

__all__ = ["extract_pricing", "fetch_web_facts", "parse_web_facts"]
