"""
Comparison engine.

Scores how well a language model's answers match a company's website.
Every scan starts at full confidence; each failed heuristic check records an
issue and deducts a fixed number of points. The final confidence maps to a
status through fixed cutoffs.

The engine is a pure function of its inputs: no I/O, no state across calls,
and it never raises for well-formed inputs.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from entity_scanner.comparison.checks import DEFAULT_CHECKS, CheckOutcome, HeuristicCheck
from entity_scanner.comparison.matchers import SubstringMatcher, TextMatcher
from entity_scanner.constants import (
    ACCURATE_MIN_CONFIDENCE,
    MIN_CONFIDENCE,
    NO_ISSUES_SENTINEL,
    STARTING_CONFIDENCE,
    UNCERTAIN_MIN_CONFIDENCE,
)
from entity_scanner.models import ModelAnswers, Verdict, VerdictStatus, WebFacts

logger = logging.getLogger(__name__)

_DEFAULT_MATCHER = SubstringMatcher()


def classify_confidence(confidence: int) -> VerdictStatus:
    """
    Map a confidence score to a verdict status.

    >= 70 is ACCURATE, 40-69 is UNCERTAIN, below 40 is HALLUCINATING.
    """
    if confidence >= ACCURATE_MIN_CONFIDENCE:
        return VerdictStatus.ACCURATE
    if confidence >= UNCERTAIN_MIN_CONFIDENCE:
        return VerdictStatus.UNCERTAIN
    return VerdictStatus.HALLUCINATING


def run_checks(
    facts: WebFacts,
    answers: ModelAnswers,
    matcher: TextMatcher | None = None,
    checks: Sequence[HeuristicCheck] | None = None,
) -> list[CheckOutcome]:
    """Run the check battery in order and return every outcome."""
    matcher = matcher or _DEFAULT_MATCHER
    checks = DEFAULT_CHECKS if checks is None else checks
    return [check.run(facts, answers, matcher) for check in checks]


def evaluate(
    facts: WebFacts,
    answers: ModelAnswers,
    matcher: TextMatcher | None = None,
    checks: Sequence[HeuristicCheck] | None = None,
) -> Verdict:
    """
    Compare website facts with model answers.

    Args:
        facts: Ground truth extracted from the website
        answers: Model answers (general, and pricing when it was asked)
        matcher: Evidence matcher (default: case-insensitive substring)
        checks: Check battery (default: name, overlap, uncertainty, pricing)

    Returns:
        Verdict with status, ordered issues (never empty) and confidence 0-100
    """
    outcomes = run_checks(facts, answers, matcher=matcher, checks=checks)

    issues = tuple(outcome.issue for outcome in outcomes if outcome.issue)
    total_deduction = sum(outcome.deduction for outcome in outcomes)
    confidence = STARTING_CONFIDENCE - total_deduction
    confidence = max(MIN_CONFIDENCE, min(STARTING_CONFIDENCE, confidence))
    status = classify_confidence(confidence)

    for outcome in outcomes:
        if not outcome.passed:
            logger.debug(f"Check {outcome.check_name} failed (-{outcome.deduction})")

    return Verdict(
        status=status,
        issues=issues or (NO_ISSUES_SENTINEL,),
        confidence=confidence,
    )
