# ruff: noqa: TC001, TC003
from __future__ import annotations

import uuid
from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field

from leave_ledger.models.enums import ForecastMode, LeaveAction, LeaveCategory, PayPeriodType, PostingStatus
from leave_ledger.models.ledger import LedgerEntry

# ---------------------------------------------------------------------------
# Shared input schemas
# ---------------------------------------------------------------------------


class CategoryAmounts(BaseModel):
    """One decimal amount per leave category."""

    comp: Decimal = Decimal(0)
    vacation: Decimal = Decimal(0)
    sick: Decimal = Decimal(0)


class AnchorConfigInput(BaseModel):
    """Anchor payday, the Official balances at that payday, and per-payday accrual rates."""

    anchor_payday: date
    starting_balances: CategoryAmounts = Field(default_factory=CategoryAmounts)
    accrual_rates: CategoryAmounts = Field(default_factory=CategoryAmounts)
    pay_period_type: PayPeriodType | None = Field(
        default=None,
        description="Defaults to the configured pay period type",
    )


class LedgerRequest(BaseModel):
    """Anchor configuration plus the full entry collection to project over."""

    config: AnchorConfigInput
    entries: list[LedgerEntry] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Balance request schemas
# ---------------------------------------------------------------------------


class OfficialBalanceRequest(LedgerRequest):
    """Official balance as of a specific payday."""

    as_of_payday: date


class CurrentOfficialBalanceRequest(LedgerRequest):
    """Official balance as of the last payday on or before a date."""

    as_of: date


class ForecastBalanceRequest(LedgerRequest):
    """Forecast balance as of any date."""

    as_of: date


class BalanceSummaryRequest(LedgerRequest):
    """Official and Forecast balances for a reference date."""

    as_of: date
    forecast_mode: ForecastMode = ForecastMode.TODAY
    selected_date: date | None = None


class EntryStatusRequest(LedgerRequest):
    """Posted/pending status of every entry as of a date."""

    as_of: date


# ---------------------------------------------------------------------------
# Balance response schemas
# ---------------------------------------------------------------------------


class BalanceResponse(BaseModel):
    """Balances for all three categories as of a date."""

    as_of: date
    comp: Decimal
    vacation: Decimal
    sick: Decimal


class CurrentOfficialBalanceResponse(BaseModel):
    """Official balance resolved to the last elapsed payday."""

    as_of: date
    last_payday: date
    balance: BalanceResponse


class BalanceSummaryResponse(BaseModel):
    """Official and Forecast balances side by side."""

    as_of: date
    last_payday: date
    official: BalanceResponse
    forecast_mode: ForecastMode
    forecast: BalanceResponse


class EntryStatusResponse(BaseModel):
    """Posting status of a single ledger entry."""

    entry_id: uuid.UUID
    date: date
    category: LeaveCategory
    action: LeaveAction
    signed_amount: Decimal
    home_payday: date
    status: PostingStatus


class EntryStatusListResponse(BaseModel):
    """Posting status for all non-deleted entries."""

    items: list[EntryStatusResponse]
    total: int
