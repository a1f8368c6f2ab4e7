# SPDX-License-Identifier: Apache-2.0
"""Tests for client configuration."""

import dataclasses

import pytest

from translateplus import ClientConfig, ValidationError
from translateplus.config import DEFAULT_BASE_URL


class TestClientConfig:
    """Tests for ClientConfig."""

    def test_default_values(self) -> None:
        """Test default configuration values."""
        config = ClientConfig(api_key="test-key")

        assert config.api_key == "test-key"
        assert config.base_url == "https://api.translateplus.io"
        assert config.timeout == 30
        assert config.max_retries == 3
        assert config.max_concurrent == 5

    def test_requires_api_key(self) -> None:
        """Empty API key fails validation."""
        with pytest.raises(ValidationError) as exc_info:
            ClientConfig(api_key="")
        assert "API key is required" in str(exc_info.value)

    def test_strips_trailing_slash(self) -> None:
        """Trailing slash is stripped from base URL."""
        config = ClientConfig(api_key="test-key", base_url="https://x.test/")
        assert config.base_url == "https://x.test"

    def test_empty_base_url_uses_default(self) -> None:
        """Empty base URL falls back to the default."""
        config = ClientConfig(api_key="test-key", base_url="")
        assert config.base_url == DEFAULT_BASE_URL

    def test_url_for(self) -> None:
        """url_for joins paths with exactly one slash."""
        config = ClientConfig(api_key="test-key", base_url="https://x.test/")
        assert config.url_for("/v2/translate") == "https://x.test/v2/translate"
        assert config.url_for("v2/translate") == "https://x.test/v2/translate"

    def test_immutable(self) -> None:
        """Config cannot be modified after construction."""
        config = ClientConfig(api_key="test-key")
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.api_key = "other"  # type: ignore[misc]

    def test_zero_retries_allowed(self) -> None:
        """max_retries=0 means a single attempt."""
        config = ClientConfig(api_key="test-key", max_retries=0)
        assert config.max_retries == 0

    @pytest.mark.parametrize(
        "overrides",
        [
            {"timeout": 0},
            {"timeout": -1.5},
            {"max_retries": -1},
            {"max_concurrent": 0},
        ],
    )
    def test_invalid_values(self, overrides: dict) -> None:
        """Out-of-range settings fail validation."""
        with pytest.raises(ValidationError):
            ClientConfig(api_key="test-key", **overrides)


class TestClientConfigFromEnv:
    """Tests for ClientConfig.from_env."""

    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for env_var in ClientConfig.ENV_VARS.values():
            monkeypatch.delenv(env_var, raising=False)

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """All fields are read from TRANSLATEPLUS_* variables."""
        monkeypatch.setenv("TRANSLATEPLUS_API_KEY", "env-key")
        monkeypatch.setenv("TRANSLATEPLUS_BASE_URL", "https://env.test/")
        monkeypatch.setenv("TRANSLATEPLUS_TIMEOUT", "12.5")
        monkeypatch.setenv("TRANSLATEPLUS_MAX_RETRIES", "1")
        monkeypatch.setenv("TRANSLATEPLUS_MAX_CONCURRENT", "8")

        config = ClientConfig.from_env()

        assert config == ClientConfig(
            api_key="env-key",
            base_url="https://env.test",
            timeout=12.5,
            max_retries=1,
            max_concurrent=8,
        )

    def test_overrides_win(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Explicit overrides take precedence; None overrides are ignored."""
        monkeypatch.setenv("TRANSLATEPLUS_API_KEY", "env-key")
        monkeypatch.setenv("TRANSLATEPLUS_MAX_RETRIES", "1")

        config = ClientConfig.from_env(api_key="explicit", max_retries=None, timeout=5)

        assert config.api_key == "explicit"
        assert config.max_retries == 1
        assert config.timeout == 5

    def test_missing_api_key(self) -> None:
        """No API key anywhere fails validation."""
        with pytest.raises(ValidationError):
            ClientConfig.from_env()

    def test_invalid_number(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Non-numeric values fail validation naming the variable."""
        monkeypatch.setenv("TRANSLATEPLUS_API_KEY", "env-key")
        monkeypatch.setenv("TRANSLATEPLUS_MAX_CONCURRENT", "many")

        with pytest.raises(ValidationError) as exc_info:
            ClientConfig.from_env()
        assert "TRANSLATEPLUS_MAX_CONCURRENT" in str(exc_info.value)
