"""Tests for config module."""

from __future__ import annotations

import pytest

from enable_app_mcp.config import ServerConfig, get_config, update_config


class TestServerConfig:
    """Tests for ServerConfig model."""

    def test_defaults(self):
        cfg = ServerConfig()
        assert cfg.success_message == "Attributes cleared"
        assert cfg.confirmation == "Attributes cleared"
        assert cfg.results_limit == 50

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("ENABLE_APP_SUCCESS_MESSAGE", "Done")
        monkeypatch.setenv("ENABLE_APP_RESULTS_LIMIT", "5")
        cfg = ServerConfig.from_env()
        assert cfg.success_message == "Done"
        assert cfg.results_limit == 5

    def test_empty_message_disables_confirmation(self):
        cfg = ServerConfig(success_message="   ")
        assert cfg.confirmation is None

    def test_invalid_limit(self):
        with pytest.raises(ValueError, match="must be >= 1"):
            ServerConfig(results_limit=0)


class TestGetConfig:
    """Tests for the config singleton."""

    def test_get_config_creates_singleton(self):
        cfg = get_config()
        assert isinstance(cfg, ServerConfig)
        assert get_config() is cfg

    def test_dotenv_loaded_on_first_access(self, monkeypatch, tmp_path):
        """Values from the .env file are used when the env var is unset."""
        env_file = tmp_path / ".env"
        env_file.write_text("ENABLE_APP_SUCCESS_MESSAGE=Unquarantined\n")
        monkeypatch.setattr("enable_app_mcp.dotenv.DEFAULT_ENV_PATH", env_file)
        monkeypatch.setenv("ENABLE_APP_SUCCESS_MESSAGE", "")
        assert get_config().success_message == "Unquarantined"

    def test_update_config(self):
        updated = update_config(results_limit=10)
        assert updated.results_limit == 10
        assert get_config() is updated


class TestSettingsFile:
    """Tests for merging ~/.config/enable-app-mcp/.env into the config."""

    def test_file_fills_unset_var(self, monkeypatch):
        monkeypatch.delenv("ENABLE_APP_RESULTS_LIMIT", raising=False)
        cfg = ServerConfig.from_env({"ENABLE_APP_RESULTS_LIMIT": "7"})
        assert cfg.results_limit == 7

    def test_environment_wins(self, monkeypatch):
        monkeypatch.setenv("ENABLE_APP_RESULTS_LIMIT", "9")
        cfg = ServerConfig.from_env({"ENABLE_APP_RESULTS_LIMIT": "7"})
        assert cfg.results_limit == 9

    def test_placeholder_falls_back_to_file(self, monkeypatch):
        monkeypatch.setenv("ENABLE_APP_SUCCESS_MESSAGE", "${ENABLE_APP_SUCCESS_MESSAGE}")
        cfg = ServerConfig.from_env({"ENABLE_APP_SUCCESS_MESSAGE": "Fixed"})
        assert cfg.success_message == "Fixed"

    def test_empty_env_message_without_file_disables_confirmation(self, monkeypatch):
        monkeypatch.setenv("ENABLE_APP_SUCCESS_MESSAGE", "")
        assert ServerConfig.from_env().confirmation is None

    @pytest.mark.parametrize("value", ["0", "abc"])
    def test_invalid_limit_raises_and_is_not_cached(self, monkeypatch, value):
        """A bad setting raises every time instead of caching a broken config."""
        monkeypatch.setenv("ENABLE_APP_RESULTS_LIMIT", value)
        with pytest.raises(ValueError):
            get_config()
        with pytest.raises(ValueError):
            get_config()
