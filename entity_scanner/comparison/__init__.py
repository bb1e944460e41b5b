"""
Comparison engine: scores model answers against website facts.
"""

from entity_scanner.comparison.checks import (
    DEFAULT_CHECKS,
    CheckOutcome,
    ContentOverlapCheck,
    HeuristicCheck,
    NameRecognitionCheck,
    PricingAccuracyCheck,
    UncertaintyCheck,
)
from entity_scanner.comparison.engine import classify_confidence, evaluate, run_checks
from entity_scanner.comparison.matchers import SubstringMatcher, TextMatcher

__all__ = [
    "DEFAULT_CHECKS",
    "CheckOutcome",
    "ContentOverlapCheck",
    "HeuristicCheck",
    "NameRecognitionCheck",
    "PricingAccuracyCheck",
    "SubstringMatcher",
    "TextMatcher",
    "UncertaintyCheck",
    "classify_confidence",
    "evaluate",
    "run_checks",
]
