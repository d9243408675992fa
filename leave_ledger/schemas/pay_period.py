# ruff: noqa: TC001, TC003
from __future__ import annotations

from datetime import date
from typing import Self

from pydantic import BaseModel, Field, model_validator

from leave_ledger.models.enums import PayPeriodType


class PayScheduleInput(BaseModel):
    """Anchor payday and pay schedule used for period lookups."""

    anchor_payday: date
    pay_period_type: PayPeriodType | None = None


class PayPeriodLookupRequest(PayScheduleInput):
    """Find the pay period containing a date."""

    date: date


class PaydayRangeRequest(PayScheduleInput):
    """List paydays falling within an inclusive date range."""

    start: date
    end: date

    @model_validator(mode="after")
    def _validate_range(self) -> Self:
        if self.end < self.start:
            msg = "end must be >= start"
            raise ValueError(msg)
        return self


class UpcomingPaydaysRequest(PayScheduleInput):
    """List the next N paydays on or after a date."""

    from_date: date
    count: int = Field(default=6, ge=1)


class PayPeriodResponse(BaseModel):
    """A pay period and whether the looked-up date is itself a payday."""

    start: date
    end: date
    payday: date
    is_payday: bool


class PaydayListResponse(BaseModel):
    """Ordered list of paydays."""

    items: list[date]
    total: int
