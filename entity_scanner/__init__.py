"""
Entity Scanner - detects when language models hallucinate about a company.

This package provides utilities for:
- Extracting ground-truth facts from a company's website
- Asking a language model what it knows about the company
- Scoring the model's answers against the website
- Running the whole scan as a single pipeline
"""

import logging

# Set up NullHandler to prevent "No handler found" warnings
# when used as a library. Applications should configure their own handlers.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

# Re-export commonly used items
from entity_scanner.comparison.engine import classify_confidence, evaluate
from entity_scanner.models import (
    ModelAnswers,
    OpenGraphData,
    ScanFailure,
    ScanReport,
    Verdict,
    VerdictStatus,
    WebFacts,
)
from entity_scanner.pipeline import ScanPipeline, scan_entity

__all__ = [
    "__version__",
    # Models
    "WebFacts",
    "OpenGraphData",
    "ModelAnswers",
    "Verdict",
    "VerdictStatus",
    "ScanReport",
    "ScanFailure",
    # Engine
    "evaluate",
    "classify_confidence",
    # Pipeline
    "ScanPipeline",
    "scan_entity",
]
