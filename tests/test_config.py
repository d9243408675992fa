from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from leave_ledger.config import Settings, get_settings, reset_settings
from leave_ledger.logging_config import LOG_FORMAT, configure_logging
from leave_ledger.models.enums import PayPeriodType

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    reset_settings()
    yield
    reset_settings()


def test_defaults() -> None:
    settings = Settings()
    assert settings.app_name == "Leave Ledger"
    assert settings.default_timezone == "UTC"
    assert settings.default_pay_period_type == PayPeriodType.BIWEEKLY
    assert settings.max_upcoming_paydays == 52
    assert settings.log_level == "INFO"


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LEAVE_LEDGER_DEFAULT_TIMEZONE", "America/Chicago")
    monkeypatch.setenv("LEAVE_LEDGER_DEFAULT_PAY_PERIOD_TYPE", "WEEKLY")
    monkeypatch.setenv("LEAVE_LEDGER_MAX_UPCOMING_PAYDAYS", "10")

    settings = get_settings()
    assert settings.default_timezone == "America/Chicago"
    assert settings.default_pay_period_type == PayPeriodType.WEEKLY
    assert settings.default_pay_period_type.interval_days == 7
    assert settings.max_upcoming_paydays == 10


def test_configure_logging_uses_format(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict[str, object]] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    configure_logging()
    configure_logging("DEBUG")

    assert calls == [
        {"level": "INFO", "format": LOG_FORMAT},
        {"level": "DEBUG", "format": LOG_FORMAT},
    ]
