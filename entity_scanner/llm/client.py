"""
OpenAI chat client for asking the model about a company.

Queries are retry-free: a provider failure is translated into one of the
ModelQueryError kinds and surfaced to the caller immediately.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import openai
from openai import OpenAI

from entity_scanner.config import get_openai_api_key, get_settings
from entity_scanner.errors import (
    ModelAuthenticationError,
    ModelQueryError,
    ModelRateLimitError,
)
from entity_scanner.llm.prompts import build_general_prompt, build_pricing_prompt

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ModelReply:
    """Raw text answer plus token usage (when the provider reports it)."""

    text: str
    tokens_used: int | None = None


def get_openai_client(timeout: float | None = None) -> OpenAI:
    """
    Get OpenAI client instance.

    Raises:
        ValueError: If OPENAI_API_KEY is not configured
    """
    api_key = get_openai_api_key()  # Raises ValueError if not set
    if timeout is None:
        timeout = get_settings().llm_timeout_seconds
    return OpenAI(api_key=api_key, timeout=timeout, max_retries=0)


def translate_model_error(error: Exception) -> ModelQueryError:
    """
    Map a provider exception to a ModelQueryError.

    Rate-limit and authentication failures get fixed messages; the raw
    provider text is only used for generic failures.
    """
    if isinstance(error, ModelQueryError):
        return error
    if isinstance(error, openai.RateLimitError):
        return ModelRateLimitError()
    if isinstance(error, openai.AuthenticationError):
        return ModelAuthenticationError()

    message = str(error)
    # Status-coded provider errors are trusted as-is; only untyped errors are sniffed
    if not isinstance(error, openai.APIStatusError):
        lowered = message.lower()
        if "rate limit" in lowered or "429" in lowered:
            return ModelRateLimitError()
        if "invalid api key" in lowered or "401" in lowered:
            return ModelAuthenticationError()
    return ModelQueryError(f"AI query failed: {message}")


class ModelQueryClient:
    """
    Asks the language model what it knows about a company.

    Two kinds of question are asked per scan: a general description and,
    when the website showed a price, a pricing question.
    """

    def __init__(
        self,
        client: OpenAI | None = None,
        model: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ):
        """
        Initialize the query client.

        Args:
            client: OpenAI client (created from settings if not provided)
            model: Chat model name (defaults to configured model)
            temperature: Sampling temperature (defaults to configured value)
            max_tokens: Answer token cap (defaults to configured value)
        """
        settings = get_settings()
        self._client = client if client is not None else get_openai_client()
        self.model = model or settings.llm_model
        self.temperature = settings.llm_temperature if temperature is None else temperature
        self.max_tokens = max_tokens or settings.llm_max_tokens

    def query(self, prompt: str) -> ModelReply:
        """
        Send a single-message prompt and return the answer text.

        Raises:
            ModelRateLimitError: Provider rate limit hit
            ModelAuthenticationError: Credential rejected
            ModelQueryError: Any other failure
        """
        try:
            response = self._client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except Exception as e:
            translated = translate_model_error(e)
            logger.warning(f"Model query failed ({type(e).__name__}): {translated.user_message}")
            raise translated from e

        text = response.choices[0].message.content or ""
        tokens_used = None
        usage = getattr(response, "usage", None)
        if usage is not None and isinstance(getattr(usage, "completion_tokens", None), int):
            tokens_used = usage.completion_tokens
        logger.debug(f"Model answered with {len(text)} chars (tokens: {tokens_used})")
        return ModelReply(text=text, tokens_used=tokens_used)

    def query_general(self, company_name: str, url: str) -> str:
        """Ask what the company does and what its main products are."""
        logger.debug(f"Asking model about {company_name!r} ({url})")
        return self.query(build_general_prompt(company_name)).text

    def query_pricing(self, company_name: str, pricing_hint_present: bool) -> str:
        """Ask about the company's pricing."""
        logger.debug(f"Asking model about pricing for {company_name!r}")
        return self.query(build_pricing_prompt(company_name, pricing_hint_present)).text
