"""
Tests for environment-driven settings.
"""

from film_catalog.config import _env_flag, get_settings


def test_env_flag_accepts_common_truthy_values(monkeypatch):
    for value in ("1", "true", "TRUE", " yes "):
        monkeypatch.setenv("CATALOG_FLAG", value)
        assert _env_flag("CATALOG_FLAG") is True


def test_env_flag_falls_back_to_default(monkeypatch):
    monkeypatch.delenv("CATALOG_FLAG", raising=False)
    assert _env_flag("CATALOG_FLAG") is False
    assert _env_flag("CATALOG_FLAG", default="true") is True


def test_settings_are_cached():
    assert get_settings() is get_settings()


def test_log_level_is_normalised():
    assert get_settings().LOG_LEVEL == get_settings().LOG_LEVEL.upper()
