"""
Pytest configuration and shared fixtures for entity_scanner tests.
"""

import os
from unittest.mock import MagicMock

import pytest

# Set test environment variables if not already set
if not os.getenv("OPENAI_API_KEY"):
    os.environ["OPENAI_API_KEY"] = "sk-test-key"

from entity_scanner.models import ModelAnswers, WebFacts  # noqa: E402


@pytest.fixture
def acme_facts():
    """WebFacts for a small widget company with public pricing."""
    return WebFacts(
        company_name="Acme",
        title="Acme | Widgets",
        description="leading widget maker",
        pricing="$29/mo",
    )


@pytest.fixture
def accurate_answers():
    """Answers that agree with acme_facts."""
    return ModelAnswers(
        general="Acme is a leading maker of widget products for small businesses.",
        pricing="Acme plans start at $29 per month.",
    )


def make_chat_response(content: str | None, completion_tokens: int = 42):
    """Build a mock OpenAI chat completion response."""
    mock_response = MagicMock()
    mock_choice = MagicMock()
    mock_choice.message.content = content
    mock_response.choices = [mock_choice]
    mock_response.usage.completion_tokens = completion_tokens
    return mock_response


class FakeModelClient:
    """Model client returning canned answers and recording calls."""

    def __init__(self, general: str = "", pricing: str = "", error: Exception | None = None):
        self.general = general
        self.pricing = pricing
        self.error = error
        self.calls: list[tuple] = []

    def query_general(self, company_name: str, url: str) -> str:
        self.calls.append(("general", company_name, url))
        if self.error is not None:
            raise self.error
        return self.general

    def query_pricing(self, company_name: str, pricing_hint_present: bool) -> str:
        self.calls.append(("pricing", company_name, pricing_hint_present))
        if self.error is not None:
            raise self.error
        return self.pricing


@pytest.fixture
def fake_model_client():
    """Factory fixture for FakeModelClient."""
    return FakeModelClient


@pytest.fixture
def chat_response():
    """Factory fixture for mock chat completion responses."""
    return make_chat_response
