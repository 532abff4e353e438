"""Tests for settings loading."""

import pytest
from pydantic import ValidationError

from booking_ledger.core.config import Settings, get_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("BOOKING_LEDGER_STRICT_NUMERIC_INPUT", raising=False)
    settings = Settings(_env_file=None)
    assert settings.log_level == "INFO"
    assert settings.log_format == "console"
    assert settings.strict_numeric_input is False
    assert settings.port == 8000


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("BOOKING_LEDGER_LOG_FORMAT", "json")
    monkeypatch.setenv("BOOKING_LEDGER_STRICT_NUMERIC_INPUT", "1")
    monkeypatch.setenv("BOOKING_LEDGER_PORT", "9000")

    settings = get_settings()
    assert settings.log_format == "json"
    assert settings.strict_numeric_input is True
    assert settings.port == 9000
    assert get_settings() is settings


def test_invalid_log_format(monkeypatch):
    monkeypatch.setenv("BOOKING_LEDGER_LOG_FORMAT", "xml")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
