"""
Heuristic checks for the comparison engine.

Each check looks at one aspect of the model's answers, and when it fails it
contributes one issue message and a fixed deduction. Checks are independent
of each other and hold no state.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass

from entity_scanner.comparison.matchers import TextMatcher
from entity_scanner.constants import (
    COMPANY_NAME_DELIMITER,
    CONTENT_OVERLAP_DEDUCTION,
    ISSUE_CONTENT_MISMATCH,
    ISSUE_EXPRESSES_UNCERTAINTY,
    ISSUE_NAME_NOT_RECOGNIZED,
    ISSUE_PRICING_MISMATCH,
    KEYWORD_MIN_LENGTH,
    MAX_DESCRIPTION_KEYWORDS,
    MIN_KEYWORD_MATCH_RATE,
    NAME_RECOGNITION_DEDUCTION,
    PRICING_MISMATCH_DEDUCTION,
    UNCERTAINTY_DEDUCTION,
    UNCERTAINTY_PHRASES,
)
from entity_scanner.models import ModelAnswers, WebFacts

_NON_DIGITS = re.compile(r"[^0-9]")


@dataclass(frozen=True)
class CheckOutcome:
    """Result of running one heuristic check."""

    check_name: str
    passed: bool
    issue: str | None = None  # Set only when the check failed
    deduction: int = 0
    skipped: bool = False  # Check did not apply to these inputs

    @classmethod
    def ok(cls, check_name: str) -> CheckOutcome:
        return cls(check_name=check_name, passed=True)

    @classmethod
    def not_applicable(cls, check_name: str) -> CheckOutcome:
        return cls(check_name=check_name, passed=True, skipped=True)

    @classmethod
    def failed(cls, check_name: str, issue: str, deduction: int) -> CheckOutcome:
        return cls(check_name=check_name, passed=False, issue=issue, deduction=deduction)


class HeuristicCheck(ABC):
    """Abstract base class for heuristic checks."""

    issue: str
    deduction: int

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of this check for debugging."""
        ...

    @abstractmethod
    def run(self, facts: WebFacts, answers: ModelAnswers, matcher: TextMatcher) -> CheckOutcome:
        """
        Run the check.

        Args:
            facts: Ground truth from the website
            answers: Model answers
            matcher: Evidence matcher used for text comparisons

        Returns:
            CheckOutcome (failed outcomes carry the issue and deduction)
        """
        ...

    def _fail(self) -> CheckOutcome:
        return CheckOutcome.failed(self.name, self.issue, self.deduction)


def company_name_key(company_name: str) -> str:
    """
    Reduce a company name to the part the model is expected to mention.

    "Acme Corp | Home" -> "acme corp"
    """
    return company_name.split(COMPANY_NAME_DELIMITER)[0].strip().lower()


def description_keywords(
    description: str,
    min_length: int = KEYWORD_MIN_LENGTH,
    limit: int = MAX_DESCRIPTION_KEYWORDS,
) -> list[str]:
    """
    Pick the meaningful keywords from a website description.

    Tokens longer than min_length characters are kept in original order,
    which filters out articles and prepositions.

    Args:
        description: Website description
        min_length: Tokens must be strictly longer than this
        limit: Maximum number of keywords returned

    Returns:
        Lower-cased keywords (at most `limit`)
    """
    tokens = description.lower().split()
    return [token for token in tokens if len(token) > min_length][:limit]


def price_digits(pricing: str) -> str:
    """
    Strip everything but digits from a pricing phrase.

    "$29/mo" -> "29"
    """
    return _NON_DIGITS.sub("", pricing)


class NameRecognitionCheck(HeuristicCheck):
    """Does the general answer mention the company name at all?"""

    issue = ISSUE_NAME_NOT_RECOGNIZED
    deduction = NAME_RECOGNITION_DEDUCTION

    @property
    def name(self) -> str:
        return "name_recognition"

    def run(self, facts: WebFacts, answers: ModelAnswers, matcher: TextMatcher) -> CheckOutcome:
        key = company_name_key(facts.company_name)
        # An empty name cannot be recognized
        if key and matcher.contains(answers.general, key):
            return CheckOutcome.ok(self.name)
        return self._fail()


class ContentOverlapCheck(HeuristicCheck):
    """Does the general answer share keywords with the website description?"""

    issue = ISSUE_CONTENT_MISMATCH
    deduction = CONTENT_OVERLAP_DEDUCTION

    def __init__(self, min_match_rate: float = MIN_KEYWORD_MATCH_RATE):
        self.min_match_rate = min_match_rate

    @property
    def name(self) -> str:
        return "content_overlap"

    def run(self, facts: WebFacts, answers: ModelAnswers, matcher: TextMatcher) -> CheckOutcome:
        keywords = description_keywords(facts.description)
        # No keywords means nothing to corroborate
        if not keywords:
            return self._fail()

        matched = sum(1 for keyword in keywords if matcher.contains(answers.general, keyword))
        if matched / len(keywords) < self.min_match_rate:
            return self._fail()
        return CheckOutcome.ok(self.name)


class UncertaintyCheck(HeuristicCheck):
    """Does the general answer hedge about knowing the company?"""

    issue = ISSUE_EXPRESSES_UNCERTAINTY
    deduction = UNCERTAINTY_DEDUCTION

    def __init__(self, phrases: tuple[str, ...] = UNCERTAINTY_PHRASES):
        self.phrases = phrases

    @property
    def name(self) -> str:
        return "uncertainty"

    def run(self, facts: WebFacts, answers: ModelAnswers, matcher: TextMatcher) -> CheckOutcome:
        if any(matcher.contains(answers.general, phrase) for phrase in self.phrases):
            return self._fail()
        return CheckOutcome.ok(self.name)


class PricingAccuracyCheck(HeuristicCheck):
    """Does the pricing answer contain the website's price?"""

    issue = ISSUE_PRICING_MISMATCH
    deduction = PRICING_MISMATCH_DEDUCTION

    @property
    def name(self) -> str:
        return "pricing_accuracy"

    def run(self, facts: WebFacts, answers: ModelAnswers, matcher: TextMatcher) -> CheckOutcome:
        if not facts.pricing or not answers.pricing:
            return CheckOutcome.not_applicable(self.name)

        digits = price_digits(facts.pricing)
        # An empty needle would match anything
        if digits and matcher.contains(answers.pricing, digits):
            return CheckOutcome.ok(self.name)
        return self._fail()


# Fixed order: issues are reported in this order
DEFAULT_CHECKS: tuple[HeuristicCheck, ...] = (
    NameRecognitionCheck(),
    ContentOverlapCheck(),
    UncertaintyCheck(),
    PricingAccuracyCheck(),
)
