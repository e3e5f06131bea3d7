"""Tests for client configuration and env-backed settings."""

import pydantic
import pytest

from accountapi.core.config import (
    DEFAULT_ADDRESS,
    DEFAULT_REQUEST_TIMEOUT,
    Config,
    Settings,
    get_settings,
    new_config,
)


class TestNewConfig:
    """Defaulting rules of new_config."""

    def test_default_address(self) -> None:
        result = new_config(None, 10.0, False)

        assert result == Config(address=DEFAULT_ADDRESS, timeout=10.0, skip_verify=False)

    def test_empty_address_is_default(self) -> None:
        assert new_config("", 10.0).address == DEFAULT_ADDRESS

    def test_default_timeout(self) -> None:
        result = new_config("https://address:8080", 0, False)

        assert result == Config(address="https://address:8080", timeout=DEFAULT_REQUEST_TIMEOUT)

    def test_verifies_by_default(self) -> None:
        assert new_config().skip_verify is False
        assert new_config(skip_verify=True).skip_verify is True

    def test_malformed_address_is_accepted(self) -> None:
        assert new_config("not a url").address == "not a url"

    def test_config_is_immutable(self) -> None:
        config = new_config()

        with pytest.raises(pydantic.ValidationError):
            config.address = "http://elsewhere"


class TestSettings:
    """Environment loading."""

    def test_defaults_without_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("ACCOUNT_API_ADDRESS", "ACCOUNT_API_TIMEOUT", "ACCOUNT_API_SKIP_VERIFY"):
            monkeypatch.delenv(name, raising=False)

        config = Settings().to_config()

        assert config.address == DEFAULT_ADDRESS
        assert config.timeout == DEFAULT_REQUEST_TIMEOUT
        assert config.skip_verify is False

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ACCOUNT_API_ADDRESS", "  https://api.example.com  ")
        monkeypatch.setenv("ACCOUNT_API_TIMEOUT", "12")
        monkeypatch.setenv("ACCOUNT_API_SKIP_VERIFY", "true")
        monkeypatch.setenv("ACCOUNT_API_LOG_LEVEL", "DEBUG")

        settings = get_settings()

        assert settings.log_level == "DEBUG"
        assert settings.to_config() == Config(
            address="https://api.example.com", timeout=12.0, skip_verify=True
        )

    def test_blank_timeout_uses_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ACCOUNT_API_TIMEOUT", "")
        monkeypatch.setenv("ACCOUNT_API_SKIP_VERIFY", "")

        config = Settings().to_config()

        assert config.timeout == DEFAULT_REQUEST_TIMEOUT
        assert config.skip_verify is False

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()
