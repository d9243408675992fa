# ruff: noqa: TC003
from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class PayPeriod:
    """Inclusive date range worked for one payday.

    The period closes a week before its payday: ``end = payday - 7 days``.
    """

    start: date
    end: date
    payday: date

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end

    @property
    def length_days(self) -> int:
        return (self.end - self.start).days + 1
