from __future__ import annotations

import enum


class LeaveCategory(enum.StrEnum):
    """Leave bucket a ledger entry or accrual applies to."""

    COMP = "COMP"
    VACATION = "VACATION"
    SICK = "SICK"


class LeaveAction(enum.StrEnum):
    """What a ledger entry does to its category's balance."""

    ACCRUED = "ACCRUED"
    USED = "USED"
    ADJUSTMENT = "ADJUSTMENT"


class AdjustmentSign(enum.StrEnum):
    """Direction of an ADJUSTMENT entry."""

    POSITIVE = "POSITIVE"
    NEGATIVE = "NEGATIVE"


class EntrySource(enum.StrEnum):
    """Origin of a ledger entry."""

    USER = "USER"
    SYSTEM = "SYSTEM"


class PayPeriodType(enum.StrEnum):
    """Pay schedule; fixes the number of days between paydays."""

    WEEKLY = "WEEKLY"
    BIWEEKLY = "BIWEEKLY"

    @property
    def interval_days(self) -> int:
        if self == PayPeriodType.WEEKLY:
            return 7
        return 14


class ForecastMode(enum.StrEnum):
    """Which date a forecast summary projects to."""

    TODAY = "TODAY"
    SELECTED_DAY = "SELECTED_DAY"
    NEXT_PAYDAY = "NEXT_PAYDAY"


class PostingStatus(enum.StrEnum):
    """Whether an entry's pay period has closed as of a reference date."""

    POSTED = "POSTED"
    PENDING = "PENDING"
