"""Tests for src/config/settings.py — Settings and logging setup."""

import logging

import pytest

from src.config.settings import Settings, configure_logging, get_settings


@pytest.fixture
def clean_env(monkeypatch):
    monkeypatch.delenv("DEBUG", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


@pytest.fixture
def restore_root_level():
    root = logging.getLogger()
    level = root.level
    yield root
    root.setLevel(level)


class TestSettings:
    def test_defaults(self, clean_env):
        settings = Settings(_env_file=None)
        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.effective_log_level == logging.INFO

    def test_reads_environment(self, clean_env):
        clean_env.setenv("LOG_LEVEL", "warning")
        assert Settings(_env_file=None).effective_log_level == logging.WARNING

    def test_debug_overrides_level(self, clean_env):
        clean_env.setenv("DEBUG", "true")
        clean_env.setenv("LOG_LEVEL", "ERROR")
        assert Settings(_env_file=None).effective_log_level == logging.DEBUG

    def test_unknown_level_raises(self, clean_env):
        with pytest.raises(ValueError, match="Unknown log level"):
            Settings(_env_file=None, log_level="chatty").effective_log_level

    def test_get_settings_is_cached(self, clean_env):
        assert get_settings() is get_settings()


class TestConfigureLogging:
    def test_applies_level_to_root_logger(self, clean_env, restore_root_level):
        configure_logging(Settings(_env_file=None, log_level="DEBUG"))
        assert restore_root_level.level == logging.DEBUG

    def test_uses_cached_settings_by_default(self, clean_env, restore_root_level):
        clean_env.setenv("LOG_LEVEL", "ERROR")
        configure_logging()
        assert restore_root_level.level == logging.ERROR
