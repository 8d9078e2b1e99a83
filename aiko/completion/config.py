"""Completion client configuration with environment variable loading.

Pydantic-based configuration for the chat-completion endpoint.
Defaults target OpenRouter; any OpenAI-compatible API works via LLM_BASE_URL.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_BASE_URL = "https://openrouter.ai/api/v1"
DEFAULT_MODEL = "google/gemini-flash-1.5"
DEFAULT_TIMEOUT = 30.0


def _timeout_from_env() -> float | str:
    # pydantic coerces and range-checks the raw value
    return os.getenv("LLM_TIMEOUT") or DEFAULT_TIMEOUT


class CompletionConfig(BaseModel):
    """Configuration for the completion client.

    Attributes:
        api_key: API key sent as a bearer token.
        base_url: API base URL; /chat/completions is appended.
        model_name: Model identifier to use.
        timeout: Seconds before a request is abandoned.
        temperature: Optional sampling temperature (omitted when None).
        max_tokens: Optional cap on generated tokens (omitted when None).
        app_title: Application name sent in the X-Title header.
    """

    # Values read from the environment go through the same validators
    model_config = ConfigDict(validate_default=True)

    api_key: str = Field(
        default_factory=lambda: os.getenv("OPENROUTER_API_KEY") or os.getenv("LLM_API_KEY", ""),
        description="API key for the completion provider",
    )
    base_url: str = Field(
        default_factory=lambda: os.getenv("LLM_BASE_URL") or DEFAULT_BASE_URL,
        description="API base URL",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("LLM_MODEL", DEFAULT_MODEL),
        description="Model to use",
    )
    timeout: float = Field(
        default_factory=_timeout_from_env,
        gt=0.0,
        le=600.0,
        description="Request timeout in seconds",
    )
    temperature: float | None = Field(
        default=None,
        ge=0.0,
        le=2.0,
        description="Sampling temperature for response generation",
    )
    max_tokens: int | None = Field(
        default=None,
        ge=1,
        le=128000,
        description="Maximum tokens in generated response",
    )
    app_title: str = Field(default="Aiko", description="Sent as the X-Title header")

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Validate that API key is provided and non-empty."""
        if not v or not v.strip():
            raise ValueError(
                "API key required. Set OPENROUTER_API_KEY or LLM_API_KEY in .env"
            )
        return v.strip()

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


def get_completion_config() -> CompletionConfig:
    """Create completion configuration from environment.

    Returns:
        Configured CompletionConfig instance.

    Raises:
        ValueError: If no API key is set.
    """
    return CompletionConfig()
