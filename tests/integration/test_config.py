#!/usr/bin/env python3
"""
Integration tests for configuration module.

Tests configuration loading from the environment and validation.
"""

from pathlib import Path

import pytest

from pondo.core.config import (
    Config,
    Environment,
    get_config,
    get_data_dir,
    is_development,
    is_production,
    is_test,
    reload_config,
)


@pytest.mark.integration
class TestConfigLoading:
    """Test configuration loading and structure."""

    def test_config_loads_from_environment(self, tmp_path):
        config = get_config()

        assert config.environment == Environment.TEST
        assert config.data_dir == tmp_path / "pondo_data"
        assert config.storage.state_dir == config.data_dir / "state"
        assert config.ledger.base_url == "http://ledger.test/api"

    def test_get_config_is_cached(self):
        assert get_config() is get_config()

    def test_reload_config_picks_up_changes(self, monkeypatch):
        get_config()
        monkeypatch.setenv("PONDO_API_BASE_URL", "https://ledger.example.com/api/")

        config = reload_config()

        assert config.ledger.base_url == "https://ledger.example.com/api"

    def test_default_base_url(self, monkeypatch):
        monkeypatch.delenv("PONDO_API_BASE_URL")
        assert Config.from_environment().ledger.base_url == "http://localhost:5000/api"

    def test_environment_detection_functions(self):
        assert is_test() is True
        assert is_development() is False
        assert is_production() is False

    def test_get_data_dir_returns_path(self):
        assert isinstance(get_data_dir(), Path)

    def test_debug_and_log_level(self, monkeypatch):
        monkeypatch.setenv("DEBUG", "true")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        config = Config.from_environment()

        assert config.debug is True
        assert config.log_level == "DEBUG"

    def test_to_dict(self):
        data = Config.from_environment().to_dict()
        assert data["environment"] == "test"
        assert data["ledger"] == {"base_url": "http://ledger.test/api"}


@pytest.mark.integration
class TestConfigValidation:
    """Test configuration validation."""

    def test_valid_config_has_no_errors(self):
        assert Config.from_environment().validate() == []

    @pytest.mark.parametrize("url", ["ftp://ledger.test/api", "ledger.test/api", "http://"])
    def test_bad_base_url(self, monkeypatch, url):
        monkeypatch.setenv("PONDO_API_BASE_URL", url)
        errors = Config.from_environment().validate()
        assert any("PONDO_API_BASE_URL" in e for e in errors)

    def test_unknown_log_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "CHATTY")
        assert Config.from_environment().validate() == ["Unknown LOG_LEVEL: CHATTY"]

    def test_get_config_raises_on_invalid(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "CHATTY")
        with pytest.raises(ValueError, match="Configuration validation failed"):
            get_config()

    def test_unknown_environment(self, monkeypatch):
        monkeypatch.setenv("PONDO_ENV", "staging")
        with pytest.raises(ValueError):
            Config.from_environment()
