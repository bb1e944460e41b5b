"""
Unit tests for the model query client.

The OpenAI client is mocked; no network calls are made.
"""

from unittest.mock import MagicMock, patch

import httpx
import openai
import pytest

from entity_scanner.errors import (
    ModelAuthenticationError,
    ModelQueryError,
    ModelRateLimitError,
)
from entity_scanner.llm.client import (
    ModelQueryClient,
    get_openai_client,
    translate_model_error,
)
from entity_scanner.llm.prompts import build_general_prompt, build_pricing_prompt


def _status_error(cls, status_code: int, message: str):
    request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    response = httpx.Response(status_code, request=request)
    return cls(message, response=response, body=None)


class TestPrompts:
    """Tests for prompt builders."""

    def test_general_prompt(self):
        """General prompt names the company and caps the answer length."""
        prompt = build_general_prompt("Acme")
        assert "Tell me about Acme." in prompt
        assert "main products or services" in prompt
        assert "under 100 words" in prompt

    def test_pricing_prompt_variants(self):
        """Pricing prompt depends on whether the website showed a price."""
        with_price = build_pricing_prompt("Acme", True)
        without_price = build_pricing_prompt("Acme", False)

        assert "What is the pricing for Acme?" in with_price
        assert "Does Acme have public pricing information available?" in without_price


class TestTranslateModelError:
    """Tests for translate_model_error function."""

    def test_rate_limit(self):
        """RateLimitError gets the fixed rate-limit message, not provider text."""
        error = translate_model_error(
            _status_error(openai.RateLimitError, 429, "secret provider detail")
        )
        assert isinstance(error, ModelRateLimitError)
        assert "secret provider detail" not in error.user_message

    def test_authentication(self):
        """AuthenticationError gets the fixed auth message."""
        error = translate_model_error(
            _status_error(openai.AuthenticationError, 401, "Incorrect API key sk-xxx")
        )
        assert isinstance(error, ModelAuthenticationError)
        assert "sk-xxx" not in error.user_message

    def test_other_status_error_is_generic(self):
        """A 400 mentioning "invalid" is not mistaken for an auth failure."""
        error = translate_model_error(
            _status_error(openai.BadRequestError, 400, "Invalid value for max_tokens")
        )
        assert type(error) is ModelQueryError
        assert error.user_message.startswith("AI query failed: ")

    def test_untyped_errors_sniffed(self):
        """Plain exceptions mentioning 429/401 still map to the fixed kinds."""
        assert isinstance(translate_model_error(Exception("HTTP 429")), ModelRateLimitError)
        assert isinstance(translate_model_error(Exception("401 denied")), ModelAuthenticationError)

    def test_untyped_invalid_api_key_is_authentication(self):
        """An invalid API key message maps to the authentication kind."""
        error = translate_model_error(Exception("Invalid API key provided"))
        assert isinstance(error, ModelAuthenticationError)

    def test_bare_invalid_is_generic(self):
        """Other "invalid" errors are not credential failures."""
        error = translate_model_error(ValueError("invalid value for temperature"))
        assert type(error) is ModelQueryError
        assert error.user_message == "AI query failed: invalid value for temperature"

    def test_generic(self):
        """Anything else keeps its message."""
        error = translate_model_error(RuntimeError("connection reset"))
        assert error.user_message == "AI query failed: connection reset"


class TestModelQueryClient:
    """Tests for ModelQueryClient."""

    @pytest.fixture
    def mock_openai(self, chat_response):
        client = MagicMock()
        client.chat.completions.create.return_value = chat_response("Acme makes widgets.")
        return client

    def test_query_sends_configured_parameters(self, mock_openai):
        """Model, temperature and max tokens are passed through."""
        client = ModelQueryClient(client=mock_openai, model="gpt-test", temperature=0.3)

        reply = client.query("Hello")

        assert reply.text == "Acme makes widgets."
        assert reply.tokens_used == 42
        call_kwargs = mock_openai.chat.completions.create.call_args[1]
        assert call_kwargs["model"] == "gpt-test"
        assert call_kwargs["temperature"] == 0.3
        assert call_kwargs["max_tokens"] == 1024
        assert call_kwargs["messages"] == [{"role": "user", "content": "Hello"}]

    def test_query_general(self, mock_openai):
        """query_general uses the general prompt."""
        client = ModelQueryClient(client=mock_openai)

        assert client.query_general("Acme", "https://acme.com") == "Acme makes widgets."
        prompt = mock_openai.chat.completions.create.call_args[1]["messages"][0]["content"]
        assert prompt == build_general_prompt("Acme")

    def test_query_pricing(self, mock_openai):
        """query_pricing picks the prompt variant."""
        client = ModelQueryClient(client=mock_openai)

        client.query_pricing("Acme", True)
        prompt = mock_openai.chat.completions.create.call_args[1]["messages"][0]["content"]
        assert prompt == build_pricing_prompt("Acme", True)

    def test_empty_completion(self, chat_response):
        """A None completion becomes an empty string."""
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = chat_response(None)

        assert ModelQueryClient(client=mock_client).query("Hi").text == ""

    def test_provider_errors_translated(self):
        """Provider failures surface as ModelQueryError kinds."""
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = _status_error(
            openai.RateLimitError, 429, "slow down"
        )

        with pytest.raises(ModelRateLimitError):
            ModelQueryClient(client=mock_client).query_general("Acme", "https://acme.com")

    def test_unexpected_errors_translated(self):
        """Non-provider failures become generic ModelQueryError."""
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = RuntimeError("boom")

        with pytest.raises(ModelQueryError) as exc_info:
            ModelQueryClient(client=mock_client).query("Hi")

        assert exc_info.value.user_message == "AI query failed: boom"


class TestGetOpenaiClient:
    """Tests for get_openai_client function."""

    @patch("entity_scanner.llm.client.OpenAI")
    def test_retry_free_with_timeout(self, mock_openai_cls):
        """Client is built without retries and with the configured timeout."""
        get_openai_client(timeout=12.5)

        call_kwargs = mock_openai_cls.call_args[1]
        assert call_kwargs["max_retries"] == 0
        assert call_kwargs["timeout"] == 12.5
        assert call_kwargs["api_key"]

    @patch("entity_scanner.llm.client.get_openai_api_key")
    def test_missing_key_is_fatal(self, mock_get_key):
        """A missing API key raises ValueError."""
        mock_get_key.side_effect = ValueError("OPENAI_API_KEY not set")

        with pytest.raises(ValueError):
            get_openai_client()
