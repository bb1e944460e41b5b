"""
Scan pipeline.

Sequences one entity scan as a linear chain of steps:

    validate -> extract -> query_general -> query_pricing (only when the
    website showed a price) -> score -> assemble

Each step runs to completion before the next starts. A failing step stops the
chain and the scan returns a ScanFailure carrying a single human-readable
message; no partial results are returned. Scans share no state, so separate
pipelines (or separate calls on one pipeline) can run concurrently.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Protocol

from entity_scanner.comparison.engine import evaluate
from entity_scanner.comparison.matchers import TextMatcher
from entity_scanner.domain.validation import validate_scan_url
from entity_scanner.errors import GENERIC_SCAN_FAILURE, ScanError
from entity_scanner.models import ModelAnswers, ScanFailure, ScanReport, Verdict, WebFacts
from entity_scanner.scraping.website_facts import fetch_web_facts

logger = logging.getLogger(__name__)

# Step names, in execution order
STEP_VALIDATE = "validate"
STEP_EXTRACT = "extract"
STEP_QUERY_GENERAL = "query_general"
STEP_QUERY_PRICING = "query_pricing"
STEP_SCORE = "score"
STEP_ASSEMBLE = "assemble"

PIPELINE_STEPS = (
    STEP_VALIDATE,
    STEP_EXTRACT,
    STEP_QUERY_GENERAL,
    STEP_QUERY_PRICING,
    STEP_SCORE,
    STEP_ASSEMBLE,
)


class ModelClient(Protocol):
    """What the pipeline needs from a model query client."""

    def query_general(self, company_name: str, url: str) -> str: ...

    def query_pricing(self, company_name: str, pricing_hint_present: bool) -> str: ...


Extractor = Callable[[str], WebFacts]


def _utc_timestamp() -> str:
    return datetime.now(UTC).isoformat()


class ScanPipeline:
    """
    Runs entity scans.

    Collaborators are injected so the pipeline can be exercised without
    network access; by default the website extractor is fetch_web_facts and
    the model client is built from settings (which fails fast if the API key
    is missing).
    """

    def __init__(
        self,
        extractor: Extractor | None = None,
        model_client: ModelClient | None = None,
        matcher: TextMatcher | None = None,
        clock: Callable[[], str] = _utc_timestamp,
    ):
        """
        Initialize the pipeline.

        Args:
            extractor: Callable returning WebFacts for a URL
            model_client: Client answering general and pricing questions
            matcher: Evidence matcher passed to the comparison engine
            clock: Returns the ISO-8601 timestamp stamped on reports

        Raises:
            ValueError: If no model_client is given and OPENAI_API_KEY is not set
        """
        if model_client is None:
            from entity_scanner.llm.client import ModelQueryClient

            model_client = ModelQueryClient()

        self.extractor = extractor or fetch_web_facts
        self.model_client = model_client
        self.matcher = matcher
        self.clock = clock

    # === Steps ===

    def validate(self, url: str) -> str:
        return validate_scan_url(url)

    def extract(self, url: str) -> WebFacts:
        return self.extractor(url)

    def query_general(self, facts: WebFacts, url: str) -> str:
        return self.model_client.query_general(facts.company_name, url)

    def query_pricing(self, facts: WebFacts) -> str | None:
        if facts.pricing is None:
            return None
        return self.model_client.query_pricing(facts.company_name, True)

    def assemble(
        self, url: str, facts: WebFacts, answers: ModelAnswers, verdict: Verdict
    ) -> ScanReport:
        return ScanReport(
            url=url,
            facts=facts,
            answers=answers,
            verdict=verdict,
            scraped_at=self.clock(),
        )

    # === Driver ===

    def run(self, url: str) -> ScanReport | ScanFailure:
        """
        Scan one URL.

        Args:
            url: URL submitted by the caller

        Returns:
            ScanReport on success, ScanFailure (with the failing step) otherwise
        """
        stage = STEP_VALIDATE
        try:
            clean_url = self.validate(url)

            stage = STEP_EXTRACT
            logger.debug(f"Extracting facts from {clean_url}")
            facts = self.extract(clean_url)

            stage = STEP_QUERY_GENERAL
            general = self.query_general(facts, clean_url)

            stage = STEP_QUERY_PRICING
            pricing = self.query_pricing(facts)

            stage = STEP_SCORE
            answers = ModelAnswers(general=general, pricing=pricing)
            verdict = evaluate(facts, answers, matcher=self.matcher)

            stage = STEP_ASSEMBLE
            report = self.assemble(clean_url, facts, answers, verdict)
        except ScanError as e:
            logger.warning(f"Scan of {url!r} failed at {stage}: {e.user_message}")
            return ScanFailure(url=url, error=e.user_message, stage=stage)
        except Exception:
            logger.exception(f"Unexpected error scanning {url!r} at {stage}")
            return ScanFailure(url=url, error=GENERIC_SCAN_FAILURE, stage=stage)

        logger.info(
            f"{facts.company_name}: {verdict.status.value} "
            f"(confidence {verdict.confidence}, {len(verdict.issues)} issue(s))"
        )
        return report


def scan_entity(url: str, pipeline: ScanPipeline | None = None) -> dict:
    """
    Scan a company website and return the flat result payload.

    Args:
        url: Website URL
        pipeline: Pipeline to use (a default one is built if not provided)

    Returns:
        Result payload dict, or {"error": message} on failure
    """
    if pipeline is None:
        pipeline = ScanPipeline()
    return pipeline.run(url).to_dict()
