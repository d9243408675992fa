# ruff: noqa: TC001
from __future__ import annotations

from fastapi import APIRouter

from leave_ledger.schemas.pay_period import (
    PaydayListResponse,
    PaydayRangeRequest,
    PayPeriodLookupRequest,
    PayPeriodResponse,
    UpcomingPaydaysRequest,
)
from leave_ledger.services import projection as projection_service

pay_periods_router = APIRouter(
    prefix="/pay-periods",
    tags=["pay-periods"],
)


@pay_periods_router.post("/lookup", response_model=PayPeriodResponse)
async def lookup_pay_period(payload: PayPeriodLookupRequest) -> PayPeriodResponse:
    """Pay period containing a date."""
    return projection_service.lookup_pay_period(payload)


@pay_periods_router.post("/paydays", response_model=PaydayListResponse)
async def list_paydays(payload: PaydayRangeRequest) -> PaydayListResponse:
    """Paydays within an inclusive date range."""
    return projection_service.list_paydays(payload)


@pay_periods_router.post("/upcoming", response_model=PaydayListResponse)
async def list_upcoming_paydays(payload: UpcomingPaydaysRequest) -> PaydayListResponse:
    """Next N paydays on or after a date."""
    return projection_service.list_upcoming_paydays(payload)
