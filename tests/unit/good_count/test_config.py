"""Tests for good_count.config module."""

from unittest.mock import patch

import pytest

from good_count.config import (
    GoodCountConfig,
    get_config,
    load_config,
    reset_config,
    set_config,
)
from good_count.errors import ConfigurationError

ENV_VARS = (
    "GOOD_COUNT_PROVIDER",
    "GOOD_COUNT_PROPAGATE_PROVIDER_ERRORS",
    "GOOD_COUNT_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_config()
    with patch("good_count.config.load_dotenv"):
        yield
    reset_config()


class TestLoadConfig:
    def test_defaults(self) -> None:
        assert load_config() == GoodCountConfig()

    def test_reads_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("GOOD_COUNT_PROVIDER", "app.counts:lookup")
        monkeypatch.setenv("GOOD_COUNT_PROPAGATE_PROVIDER_ERRORS", "true")
        monkeypatch.setenv("GOOD_COUNT_LOG_LEVEL", "DEBUG")

        assert load_config() == GoodCountConfig(
            provider="app.counts:lookup",
            propagate_provider_errors=True,
            log_level="DEBUG",
        )

    def test_blank_values_fall_back_to_defaults(self, monkeypatch) -> None:
        monkeypatch.setenv("GOOD_COUNT_PROVIDER", "  ")
        monkeypatch.setenv("GOOD_COUNT_LOG_LEVEL", "")

        config = load_config()

        assert config.provider is None
        assert config.log_level == "INFO"

    def test_invalid_flag_is_configuration_error(self, monkeypatch) -> None:
        monkeypatch.setenv("GOOD_COUNT_PROPAGATE_PROVIDER_ERRORS", "maybe")

        with pytest.raises(ConfigurationError, match="GOOD_COUNT_PROPAGATE_PROVIDER_ERRORS"):
            load_config()


class TestConfigSingleton:
    def test_get_loads_once(self, monkeypatch) -> None:
        monkeypatch.setenv("GOOD_COUNT_PROVIDER", "first:provider")
        first = get_config()
        monkeypatch.setenv("GOOD_COUNT_PROVIDER", "second:provider")

        assert get_config() is first

    def test_set_and_reset(self, monkeypatch) -> None:
        override = GoodCountConfig(provider="test:provider")
        set_config(override)
        assert get_config() is override

        reset_config()
        assert get_config() == GoodCountConfig()
