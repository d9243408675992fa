from leave_ledger.models.anchor import AccrualSchedule, AnchorConfig
from leave_ledger.models.balance import BalanceSnapshot
from leave_ledger.models.enums import (
    AdjustmentSign,
    EntrySource,
    ForecastMode,
    LeaveAction,
    LeaveCategory,
    PayPeriodType,
    PostingStatus,
)
from leave_ledger.models.ledger import LedgerEntry, round_to_quarter
from leave_ledger.models.pay_period import PayPeriod

__all__ = [
    "AccrualSchedule",
    "AdjustmentSign",
    "AnchorConfig",
    "BalanceSnapshot",
    "EntrySource",
    "ForecastMode",
    "LeaveAction",
    "LeaveCategory",
    "LedgerEntry",
    "PayPeriod",
    "PayPeriodType",
    "PostingStatus",
    "round_to_quarter",
]
