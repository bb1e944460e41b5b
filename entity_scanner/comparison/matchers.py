"""
Text evidence matchers.

A matcher answers one question: does a piece of model output evidence a
given concept (a company name, a keyword, a price)? The scoring logic only
talks to the TextMatcher interface, so a semantic matcher can replace the
substring matcher without touching the checks.
"""

from abc import ABC, abstractmethod


class TextMatcher(ABC):
    """Abstract base class for evidence matchers."""

    @abstractmethod
    def contains(self, text: str, concept: str) -> bool:
        """
        Check whether text evidences concept.

        Args:
            text: Model output to search
            concept: Name, keyword or value to look for

        Returns:
            True if the concept is evidenced in the text
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of this matcher for debugging."""
        ...


class SubstringMatcher(TextMatcher):
    """Case-insensitive substring matching."""

    @property
    def name(self) -> str:
        return "substring"

    def contains(self, text: str, concept: str) -> bool:
        return concept.lower() in text.lower()
