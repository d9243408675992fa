# ruff: noqa: TC001
"""Balance projection endpoints. Stateless: every request carries its config and entries."""

from __future__ import annotations

from fastapi import APIRouter

from leave_ledger.schemas.balance import (
    BalanceResponse,
    BalanceSummaryRequest,
    BalanceSummaryResponse,
    CurrentOfficialBalanceRequest,
    CurrentOfficialBalanceResponse,
    EntryStatusListResponse,
    EntryStatusRequest,
    ForecastBalanceRequest,
    OfficialBalanceRequest,
)
from leave_ledger.services import projection as projection_service

balances_router = APIRouter(
    prefix="/balances",
    tags=["balances"],
)

entries_router = APIRouter(
    prefix="/entries",
    tags=["entries"],
)


@balances_router.post("/official", response_model=BalanceResponse)
async def official_balance(payload: OfficialBalanceRequest) -> BalanceResponse:
    """Official balance as of a payday."""
    return projection_service.get_official_balance(payload)


@balances_router.post("/official/current", response_model=CurrentOfficialBalanceResponse)
async def current_official_balance(payload: CurrentOfficialBalanceRequest) -> CurrentOfficialBalanceResponse:
    """Official balance as of the last payday on or before ``as_of``."""
    return projection_service.get_current_official_balance(payload)


@balances_router.post("/forecast", response_model=BalanceResponse)
async def forecast_balance(payload: ForecastBalanceRequest) -> BalanceResponse:
    """Forecast balance as of any date, including entries that have not posted yet."""
    return projection_service.get_forecast_balance(payload)


@balances_router.post("/summary", response_model=BalanceSummaryResponse)
async def balance_summary(payload: BalanceSummaryRequest) -> BalanceSummaryResponse:
    """Current Official balance alongside the Forecast for the requested mode."""
    return projection_service.get_balance_summary(payload)


@entries_router.post("/status", response_model=EntryStatusListResponse)
async def entry_statuses(payload: EntryStatusRequest) -> EntryStatusListResponse:
    """Posted/pending status of each non-deleted entry."""
    return projection_service.get_entry_statuses(payload)
