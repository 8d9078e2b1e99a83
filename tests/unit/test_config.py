"""Unit tests for CompletionConfig."""

import pytest
from pydantic import ValidationError

from aiko.completion.config import (
    DEFAULT_BASE_URL,
    DEFAULT_MODEL,
    DEFAULT_TIMEOUT,
    CompletionConfig,
    get_completion_config,
)


class TestCompletionConfig:
    """Tests for CompletionConfig validation."""

    def test_valid_config_with_all_fields(self) -> None:
        """Config accepts valid values for all fields."""
        config = CompletionConfig(
            api_key="sk-test-key-12345",
            base_url="https://example.test/v1",
            model_name="openai/gpt-4o-mini",
            timeout=12.5,
            temperature=0.5,
            max_tokens=2048,
        )

        assert config.api_key == "sk-test-key-12345"
        assert config.base_url == "https://example.test/v1"
        assert config.model_name == "openai/gpt-4o-mini"
        assert config.timeout == 12.5
        assert config.temperature == 0.5
        assert config.max_tokens == 2048

    def test_config_with_default_values(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Config falls back to OpenRouter defaults when only the key is given."""
        for var in ("LLM_BASE_URL", "LLM_MODEL", "LLM_TIMEOUT"):
            monkeypatch.delenv(var, raising=False)

        config = CompletionConfig(api_key="sk-test-key")

        assert config.base_url == DEFAULT_BASE_URL
        assert config.model_name == DEFAULT_MODEL
        assert config.timeout == DEFAULT_TIMEOUT
        assert config.temperature is None
        assert config.max_tokens is None
        assert config.app_title == "Aiko"

    def test_config_fails_with_missing_api_key(self) -> None:
        """Config raises when API key is empty."""
        with pytest.raises(ValidationError) as exc_info:
            CompletionConfig(api_key="")

        assert "API key required" in str(exc_info.value)

    def test_config_fails_with_whitespace_api_key(self) -> None:
        """Config rejects whitespace-only API key."""
        with pytest.raises(ValidationError) as exc_info:
            CompletionConfig(api_key="   ")

        assert "API key required" in str(exc_info.value)

    def test_config_strips_api_key_whitespace(self) -> None:
        """Config strips leading/trailing whitespace from API key."""
        config = CompletionConfig(api_key="  sk-test-key  ")

        assert config.api_key == "sk-test-key"

    def test_config_strips_trailing_slash_from_base_url(self) -> None:
        config = CompletionConfig(api_key="sk-test", base_url="https://example.test/v1/")

        assert config.base_url == "https://example.test/v1"

    def test_config_fails_with_temperature_out_of_range(self) -> None:
        """Config rejects temperature outside 0.0-2.0."""
        with pytest.raises(ValidationError) as exc_info:
            CompletionConfig(api_key="sk-test", temperature=2.5)

        assert "temperature" in str(exc_info.value).lower()

    def test_config_fails_with_max_tokens_too_low(self) -> None:
        """Config rejects max_tokens below 1."""
        with pytest.raises(ValidationError) as exc_info:
            CompletionConfig(api_key="sk-test", max_tokens=0)

        assert "max_tokens" in str(exc_info.value).lower()

    @pytest.mark.parametrize("timeout", [0.0, -1.0, 601.0])
    def test_config_rejects_invalid_timeout(self, timeout: float) -> None:
        with pytest.raises(ValidationError) as exc_info:
            CompletionConfig(api_key="sk-test", timeout=timeout)

        assert "timeout" in str(exc_info.value).lower()


class TestGetCompletionConfig:
    """Tests for get_completion_config factory function."""

    def test_get_config_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """get_completion_config reads every setting from the environment."""
        monkeypatch.setenv("OPENROUTER_API_KEY", "sk-env-key")
        monkeypatch.setenv("LLM_BASE_URL", "https://proxy.test/v1")
        monkeypatch.setenv("LLM_MODEL", "meta/llama-3-8b")
        monkeypatch.setenv("LLM_TIMEOUT", "45")

        config = get_completion_config()

        assert config.api_key == "sk-env-key"
        assert config.base_url == "https://proxy.test/v1"
        assert config.model_name == "meta/llama-3-8b"
        assert config.timeout == 45.0

    def test_get_config_falls_back_to_llm_api_key(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("OPENROUTER_API_KEY", raising=False)
        monkeypatch.setenv("LLM_API_KEY", "sk-generic-key")

        assert get_completion_config().api_key == "sk-generic-key"

    def test_get_config_fails_without_env_var(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """get_completion_config raises when no API key is set."""
        monkeypatch.delenv("OPENROUTER_API_KEY", raising=False)
        monkeypatch.delenv("LLM_API_KEY", raising=False)

        with pytest.raises(ValidationError):
            get_completion_config()

    def test_get_config_falls_back_when_openrouter_key_blank(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """A blank OPENROUTER_API_KEY= line in .env does not hide LLM_API_KEY."""
        monkeypatch.setenv("OPENROUTER_API_KEY", "")
        monkeypatch.setenv("LLM_API_KEY", "sk-generic-key")

        assert get_completion_config().api_key == "sk-generic-key"

    def test_get_config_strips_env_api_key(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OPENROUTER_API_KEY", "  sk-env-key  ")

        assert get_completion_config().api_key == "sk-env-key"

    def test_get_config_rejects_blank_env_api_key(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("OPENROUTER_API_KEY", "   ")
        monkeypatch.delenv("LLM_API_KEY", raising=False)

        with pytest.raises(ValidationError) as exc_info:
            get_completion_config()

        assert "API key required" in str(exc_info.value)

    def test_get_config_strips_trailing_slash_from_env_base_url(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("OPENROUTER_API_KEY", "sk-env-key")
        monkeypatch.setenv("LLM_BASE_URL", "https://proxy.test/v1/")

        assert get_completion_config().base_url == "https://proxy.test/v1"

    @pytest.mark.parametrize("timeout", ["0", "-5", "601", "soon"])
    def test_get_config_rejects_invalid_env_timeout(
        self, monkeypatch: pytest.MonkeyPatch, timeout: str
    ) -> None:
        """Out-of-range or non-numeric LLM_TIMEOUT is a validation error."""
        monkeypatch.setenv("OPENROUTER_API_KEY", "sk-env-key")
        monkeypatch.setenv("LLM_TIMEOUT", timeout)

        with pytest.raises(ValidationError) as exc_info:
            get_completion_config()

        assert "timeout" in str(exc_info.value).lower()
