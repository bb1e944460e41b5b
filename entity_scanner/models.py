"""
Data models for entity scans.

WebFacts is what the website says, ModelAnswers is what the language model
says, and Verdict is the comparison of the two. All are immutable.
"""

from dataclasses import dataclass, field
from enum import Enum

from entity_scanner.constants import NO_DESCRIPTION_FOUND, UNKNOWN_COMPANY_NAME


class VerdictStatus(Enum):
    """Classification of how well the model knows the company."""

    ACCURATE = "ACCURATE"
    UNCERTAIN = "UNCERTAIN"
    HALLUCINATING = "HALLUCINATING"


@dataclass(frozen=True)
class OpenGraphData:
    """Best-effort Open Graph fields (informational only)."""

    title: str | None = None
    description: str | None = None
    site_name: str | None = None


@dataclass(frozen=True)
class WebFacts:
    """Ground truth extracted from the company's website."""

    company_name: str = UNKNOWN_COMPANY_NAME  # <= 100 chars
    title: str = ""  # <= 100 chars, raw page title
    description: str = NO_DESCRIPTION_FOUND  # <= 300 chars
    pricing: str | None = None  # Single matched pricing phrase, e.g. "$29/mo"
    og_data: OpenGraphData = field(default_factory=OpenGraphData)


@dataclass(frozen=True)
class ModelAnswers:
    """Free-text answers from the language model."""

    general: str
    pricing: str | None = None  # Only asked when the website showed pricing


@dataclass(frozen=True)
class Verdict:
    """Result of comparing WebFacts against ModelAnswers."""

    status: VerdictStatus
    issues: tuple[str, ...]  # Never empty
    confidence: int  # 0-100


@dataclass(frozen=True)
class ScanReport:
    """Successful scan: facts, raw answers and verdict."""

    url: str
    facts: WebFacts
    answers: ModelAnswers
    verdict: Verdict
    scraped_at: str  # ISO-8601 timestamp

    def to_dict(self) -> dict:
        """Flat payload returned to callers."""
        return {
            "companyName": self.facts.company_name,
            "groundTruth": {
                "tagline": self.facts.description,
                "pricing": self.facts.pricing,
                "title": self.facts.title,
            },
            "aiResponse": self.answers.general,
            "aiPricingResponse": self.answers.pricing,
            "status": self.verdict.status.value,
            "issues": list(self.verdict.issues),
            "confidence": self.verdict.confidence,
            "scrapedAt": self.scraped_at,
        }


@dataclass(frozen=True)
class ScanFailure:
    """Failed scan: a single human-readable message, no partial results."""

    url: str
    error: str
    stage: str  # Pipeline step that failed

    def to_dict(self) -> dict:
        """Flat payload returned to callers."""
        return {"error": self.error}
