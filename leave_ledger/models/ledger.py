# ruff: noqa: TC003
from __future__ import annotations

import datetime
import uuid
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING, Any, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from leave_ledger.models.enums import AdjustmentSign, EntrySource, LeaveAction, LeaveCategory

if TYPE_CHECKING:
    from leave_ledger.services.dates import TimezoneLike

_QUARTERS_PER_HOUR = Decimal(4)


def round_to_quarter(value: Decimal) -> Decimal:
    """Round hours to the nearest 0.25, halves away from zero."""
    quarters = (value * _QUARTERS_PER_HOUR).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    return quarters / _QUARTERS_PER_HOUR


class LedgerEntry(BaseModel):
    """A dated, immutable leave ledger entry.

    ``magnitude`` is always non-negative; the sign applied to the balance is
    derived from ``action`` and, for adjustments, ``adjustment_sign``.
    """

    model_config = ConfigDict(frozen=True)

    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    date: datetime.date
    category: LeaveCategory
    action: LeaveAction
    magnitude: Decimal = Field(ge=0, description="Hours, always non-negative")
    adjustment_sign: AdjustmentSign | None = None
    notes: str | None = Field(default=None, max_length=2000)
    source: EntrySource = EntrySource.USER
    occurred_at: datetime.datetime | None = Field(
        default=None,
        description="Original timestamp; aware values are re-read in the engine's time zone",
    )
    deleted_at: datetime.datetime | None = None

    @model_validator(mode="before")
    @classmethod
    def _split_timestamp(cls, data: Any) -> Any:
        """Keep a datetime passed as ``date`` in ``occurred_at`` and store its default-zone day."""
        # Local import: services.dates reads settings, which import the enums module.
        from leave_ledger.services.dates import to_day

        if not isinstance(data, dict):
            return data
        value = data.get("date")
        if isinstance(value, datetime.datetime):
            return {**data, "date": to_day(value), "occurred_at": data.get("occurred_at") or value}
        occurred_at = data.get("occurred_at")
        if value is None and isinstance(occurred_at, datetime.datetime):
            return {**data, "date": to_day(occurred_at)}
        return data

    @model_validator(mode="after")
    def _validate_adjustment_sign(self) -> Self:
        if self.action == LeaveAction.ADJUSTMENT and self.adjustment_sign is None:
            msg = "adjustment_sign is required for ADJUSTMENT entries"
            raise ValueError(msg)
        if self.action != LeaveAction.ADJUSTMENT and self.adjustment_sign is not None:
            msg = "adjustment_sign is only allowed on ADJUSTMENT entries"
            raise ValueError(msg)
        return self

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def day_in(self, tz: TimezoneLike = None) -> datetime.date:
        """Calendar day of the entry, reading an aware ``occurred_at`` in ``tz``."""
        from leave_ledger.services.dates import to_day

        if self.occurred_at is not None and self.occurred_at.tzinfo is not None:
            return to_day(self.occurred_at, tz)
        return self.date

    @property
    def signed_amount(self) -> Decimal:
        """Balance contribution: +magnitude for accruals, -magnitude for usage."""
        if self.action == LeaveAction.ACCRUED:
            return self.magnitude
        if self.action == LeaveAction.USED:
            return -self.magnitude
        if self.adjustment_sign == AdjustmentSign.NEGATIVE:
            return -self.magnitude
        return self.magnitude

    @classmethod
    def create(
        cls,
        *,
        date: datetime.date | datetime.datetime,
        category: LeaveCategory,
        action: LeaveAction,
        hours: Decimal,
        adjustment_sign: AdjustmentSign | None = None,
        notes: str | None = None,
        enforce_quarter_increments: bool = True,
    ) -> LedgerEntry:
        """Build a user entry, optionally snapping hours to quarter-hour increments."""
        magnitude = round_to_quarter(hours) if enforce_quarter_increments else hours
        return cls(
            date=date,  # type: ignore[arg-type]
            category=category,
            action=action,
            magnitude=magnitude,
            adjustment_sign=adjustment_sign,
            notes=notes,
        )
