import pytest

from fixedpoint.domain.values import RoundingMode
from fixedpoint.shared.config import get_settings


def _reset_settings_cache():
    get_settings.cache_clear()


def test_settings_defaults_and_log_level(monkeypatch):
    # Given
    _reset_settings_cache()
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.delenv("ROUNDING_MODE", raising=False)
    monkeypatch.delenv("DEFAULT_SCALING", raising=False)

    # When
    s = get_settings()

    # Then
    assert s.LOG_LEVEL == "DEBUG"
    assert s.JSON_LOGS is False
    assert s.ROUNDING_MODE is RoundingMode.HALF_UP
    assert s.DEFAULT_SCALING == 2


def test_settings_rejects_unknown_log_level(monkeypatch):
    # Given
    _reset_settings_cache()
    monkeypatch.setenv("LOG_LEVEL", "CHATTY")

    # When & Then
    with pytest.raises(Exception):
        get_settings()


def test_settings_rejects_scaling_above_max(monkeypatch):
    # Given
    _reset_settings_cache()
    monkeypatch.setenv("DEFAULT_SCALING", "9")

    # When & Then
    with pytest.raises(Exception):
        get_settings()


def test_settings_rejects_unknown_rounding_mode(monkeypatch):
    # Given
    _reset_settings_cache()
    monkeypatch.setenv("ROUNDING_MODE", "HALF_EVEN")

    # When & Then
    with pytest.raises(Exception):
        get_settings()
