import pytest


@pytest.fixture(autouse=True)
def test_settings(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("JSON_LOGS", "false")
    monkeypatch.setenv("ROUNDING_MODE", "HALF_UP")
    monkeypatch.setenv("DEFAULT_SCALING", "2")

    from fixedpoint.shared.config import get_settings

    get_settings.cache_clear()
