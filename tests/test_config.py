import importlib

from config import get_settings_module


def test_defaults_to_development(monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)
    assert get_settings_module() == "config.development"


def test_selects_by_app_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "prod")
    assert get_settings_module() == "config.production"
    monkeypatch.setenv("APP_ENV", "TESTING")
    assert get_settings_module() == "config.testing"
    monkeypatch.setenv("APP_ENV", "staging")
    assert get_settings_module() == "config.development"


def test_testing_settings_disable_retry_waits():
    settings = importlib.import_module("config.testing")
    assert settings.TESTING is True
    assert settings.RETRY_BASE_DELAY == 0
    assert settings.AUTO_INIT_DB is False
