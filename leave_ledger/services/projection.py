"""Request-level wrappers: build an engine from API input and shape its output."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import status

from leave_ledger.config import get_settings
from leave_ledger.exceptions import AppError
from leave_ledger.models.anchor import AccrualSchedule, AnchorConfig
from leave_ledger.models.balance import BalanceSnapshot
from leave_ledger.schemas.balance import (
    BalanceResponse,
    BalanceSummaryResponse,
    CurrentOfficialBalanceResponse,
    EntryStatusListResponse,
    EntryStatusResponse,
)
from leave_ledger.schemas.pay_period import PaydayListResponse, PayPeriodResponse
from leave_ledger.services.balance import BalanceEngine
from leave_ledger.services.pay_period import PayPeriodCalculator

if TYPE_CHECKING:
    from datetime import date

    from leave_ledger.models.enums import PayPeriodType
    from leave_ledger.schemas.balance import (
        AnchorConfigInput,
        BalanceSummaryRequest,
        CurrentOfficialBalanceRequest,
        EntryStatusRequest,
        ForecastBalanceRequest,
        OfficialBalanceRequest,
    )
    from leave_ledger.schemas.pay_period import (
        PaydayRangeRequest,
        PayPeriodLookupRequest,
        PayScheduleInput,
        UpcomingPaydaysRequest,
    )


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _resolve_pay_period_type(pay_period_type: PayPeriodType | None) -> PayPeriodType:
    return pay_period_type or get_settings().default_pay_period_type


def build_anchor_config(payload: AnchorConfigInput) -> AnchorConfig:
    """Map API input to an AnchorConfig; raises ConfigurationError on bad values."""
    starting = payload.starting_balances
    rates = payload.accrual_rates
    return AnchorConfig(
        anchor_payday=payload.anchor_payday,
        starting_snapshot=BalanceSnapshot(comp=starting.comp, vacation=starting.vacation, sick=starting.sick),
        accrual_schedule=AccrualSchedule(comp=rates.comp, vacation=rates.vacation, sick=rates.sick),
        pay_period_type=_resolve_pay_period_type(payload.pay_period_type),
    )


def build_engine(payload: AnchorConfigInput) -> BalanceEngine:
    return BalanceEngine(build_anchor_config(payload), tz=get_settings().default_timezone)


def _build_calendar(payload: PayScheduleInput) -> PayPeriodCalculator:
    pay_period_type = _resolve_pay_period_type(payload.pay_period_type)
    return PayPeriodCalculator(payload.anchor_payday, pay_period_type.interval_days)


def _build_balance_response(as_of: date, snapshot: BalanceSnapshot) -> BalanceResponse:
    """Map a balance snapshot to its response schema."""
    return BalanceResponse(
        as_of=as_of,
        comp=snapshot.comp,
        vacation=snapshot.vacation,
        sick=snapshot.sick,
    )


# ---------------------------------------------------------------------------
# Balances
# ---------------------------------------------------------------------------


def get_official_balance(payload: OfficialBalanceRequest) -> BalanceResponse:
    engine = build_engine(payload.config)
    snapshot = engine.official_balance(payload.as_of_payday, payload.entries)
    return _build_balance_response(payload.as_of_payday, snapshot)


def get_current_official_balance(payload: CurrentOfficialBalanceRequest) -> CurrentOfficialBalanceResponse:
    engine = build_engine(payload.config)
    last_payday = engine.last_payday(payload.as_of)
    snapshot = engine.official_balance(last_payday, payload.entries)
    return CurrentOfficialBalanceResponse(
        as_of=payload.as_of,
        last_payday=last_payday,
        balance=_build_balance_response(last_payday, snapshot),
    )


def get_forecast_balance(payload: ForecastBalanceRequest) -> BalanceResponse:
    engine = build_engine(payload.config)
    snapshot = engine.forecast_balance(payload.as_of, payload.entries)
    return _build_balance_response(payload.as_of, snapshot)


def get_balance_summary(payload: BalanceSummaryRequest) -> BalanceSummaryResponse:
    engine = build_engine(payload.config)
    summary = engine.summary(
        payload.as_of,
        payload.entries,
        forecast_mode=payload.forecast_mode,
        selected_date=payload.selected_date,
    )
    return BalanceSummaryResponse(
        as_of=summary.as_of,
        last_payday=summary.last_payday,
        official=_build_balance_response(summary.last_payday, summary.official),
        forecast_mode=summary.forecast_mode,
        forecast=_build_balance_response(summary.forecast_as_of, summary.forecast),
    )


def get_entry_statuses(payload: EntryStatusRequest) -> EntryStatusListResponse:
    engine = build_engine(payload.config)
    statuses = engine.entry_statuses(payload.entries, payload.as_of)
    return EntryStatusListResponse(
        items=[
            EntryStatusResponse(
                entry_id=s.entry.id,
                date=s.day,
                category=s.entry.category,
                action=s.entry.action,
                signed_amount=s.entry.signed_amount,
                home_payday=s.home_payday,
                status=s.status,
            )
            for s in statuses
        ],
        total=len(statuses),
    )


# ---------------------------------------------------------------------------
# Pay periods
# ---------------------------------------------------------------------------


def lookup_pay_period(payload: PayPeriodLookupRequest) -> PayPeriodResponse:
    calendar = _build_calendar(payload)
    period = calendar.period_for_date(payload.date)
    return PayPeriodResponse(
        start=period.start,
        end=period.end,
        payday=period.payday,
        is_payday=calendar.is_payday(payload.date),
    )


def list_paydays(payload: PaydayRangeRequest) -> PaydayListResponse:
    items = _build_calendar(payload).paydays(payload.start, payload.end)
    return PaydayListResponse(items=items, total=len(items))


def list_upcoming_paydays(payload: UpcomingPaydaysRequest) -> PaydayListResponse:
    max_count = get_settings().max_upcoming_paydays
    if payload.count > max_count:
        raise AppError(f"count must not exceed {max_count}", status_code=status.HTTP_400_BAD_REQUEST)
    items = _build_calendar(payload).upcoming_paydays(payload.from_date, payload.count)
    return PaydayListResponse(items=items, total=len(items))
