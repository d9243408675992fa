from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal
from typing import TYPE_CHECKING

from leave_ledger.models.enums import LeaveCategory

if TYPE_CHECKING:
    from leave_ledger.models.anchor import AccrualSchedule
    from leave_ledger.models.ledger import LedgerEntry

_ZERO = Decimal(0)


@dataclass(frozen=True)
class BalanceSnapshot:
    """Comp, vacation and sick balances at one point in time.

    Immutable: every ``apply*`` call returns a new snapshot. Balances are not
    floored and may go negative.
    """

    comp: Decimal = _ZERO
    vacation: Decimal = _ZERO
    sick: Decimal = _ZERO

    @classmethod
    def zero(cls) -> BalanceSnapshot:
        return cls()

    def get(self, category: LeaveCategory) -> Decimal:
        value: Decimal = getattr(self, category.value.lower())
        return value

    def apply(self, category: LeaveCategory, signed_amount: Decimal) -> BalanceSnapshot:
        """Add a signed amount to one category."""
        field_name = category.value.lower()
        return replace(self, **{field_name: self.get(category) + signed_amount})

    def apply_entry(self, entry: LedgerEntry) -> BalanceSnapshot:
        return self.apply(entry.category, entry.signed_amount)

    def apply_accruals(self, schedule: AccrualSchedule, cycles: int = 1) -> BalanceSnapshot:
        """Add ``cycles`` accrual cycles; a negative count undoes them."""
        if cycles == 0:
            return self
        return BalanceSnapshot(
            comp=self.comp + schedule.comp * cycles,
            vacation=self.vacation + schedule.vacation * cycles,
            sick=self.sick + schedule.sick * cycles,
        )

    def as_dict(self) -> dict[LeaveCategory, Decimal]:
        return {category: self.get(category) for category in LeaveCategory}
