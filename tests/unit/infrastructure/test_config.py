"""Unit tests for environment configuration and the clock."""

from datetime import date

from freezegun import freeze_time

from health_tools.application import run_calculator
from health_tools.infrastructure.clock import get_today
from health_tools.infrastructure.config import (
    get_app_version,
    get_log_format,
    get_log_level,
)


def test_log_level_default(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    assert get_log_level() == "INFO"


def test_log_level_upper_cased(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")

    assert get_log_level() == "DEBUG"


def test_log_format_fallback(monkeypatch):
    monkeypatch.setenv("LOG_FORMAT", "xml")

    assert get_log_format() == "console"


def test_log_format_json(monkeypatch):
    monkeypatch.setenv("LOG_FORMAT", "JSON")

    assert get_log_format() == "json"


def test_app_version(monkeypatch):
    monkeypatch.delenv("APP_VERSION", raising=False)
    assert get_app_version() == "0.0.0-dev"

    monkeypatch.setenv("APP_VERSION", "1.2.3")
    assert get_app_version() == "1.2.3"


@freeze_time("2024-03-01")
def test_today_follows_clock():
    assert get_today() == date(2024, 3, 1)


@freeze_time("2024-07-08")
def test_due_date_progress_with_frozen_clock():
    """Week 27 starts the third trimester."""
    result = run_calculator("due_date", {"last_period_date": "2024-01-01"}, get_today())

    assert result.gestational_age.weeks == 27
    assert result.trimester == 3
