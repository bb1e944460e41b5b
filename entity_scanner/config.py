"""
Configuration management for entity_scanner.

Uses pydantic-settings for type-safe configuration with automatic
environment variable loading and validation.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from entity_scanner.constants import (
    DEFAULT_USER_AGENT,
    FETCH_TIMEOUT_SECONDS,
    LLM_MAX_TOKENS,
    LLM_MODEL,
    LLM_TEMPERATURE,
    LLM_TIMEOUT_SECONDS,
)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    The OpenAI API key is the only credential. It is checked when the model
    client is built, so a missing key fails at startup rather than per scan.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore extra env vars
    )

    # OpenAI Configuration
    openai_api_key: str = Field(
        default="",
        description="OpenAI API key for model queries (required)",
    )
    llm_model: str = Field(
        default=LLM_MODEL,
        description="Chat model asked about the company",
    )
    llm_temperature: float = Field(
        default=LLM_TEMPERATURE,
        ge=0.0,
        le=2.0,
        description="Sampling temperature for model queries",
    )
    llm_max_tokens: int = Field(
        default=LLM_MAX_TOKENS,
        gt=0,
        description="Maximum tokens in a model answer",
    )
    llm_timeout_seconds: float = Field(
        default=LLM_TIMEOUT_SECONDS,
        gt=0,
        description="Timeout for a single model query",
    )

    # Website fetching
    fetch_timeout_seconds: float = Field(
        default=FETCH_TIMEOUT_SECONDS,
        gt=0,
        description="Timeout for fetching the scanned website",
    )
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        description="User-Agent header sent when fetching websites",
    )

    @field_validator("openai_api_key", "llm_model", "user_agent", mode="before")
    @classmethod
    def strip_whitespace(cls, v: str) -> str:
        """Strip whitespace from string values."""
        if isinstance(v, str):
            return v.strip()
        return v


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


def get_openai_api_key() -> str:
    """Get OpenAI API key from settings."""
    key = get_settings().openai_api_key
    if not key:
        raise ValueError("OPENAI_API_KEY not set in environment or .env file")
    return key


def get_llm_model() -> str:
    """Get chat model name from settings."""
    return get_settings().llm_model


def get_llm_timeout() -> float:
    """Get model query timeout (seconds) from settings."""
    return get_settings().llm_timeout_seconds


def get_fetch_timeout() -> float:
    """Get website fetch timeout (seconds) from settings."""
    return get_settings().fetch_timeout_seconds


def get_user_agent() -> str:
    """Get User-Agent header for website fetches."""
    return get_settings().user_agent
