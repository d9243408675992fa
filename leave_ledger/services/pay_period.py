"""Pay period arithmetic relative to an anchor payday.

Given anchor payday 2026-02-06 on a biweekly schedule:

    period end   = payday - 7 days          (2026-01-30)
    period start = end - (interval - 1)     (2026-01-17)
    next payday  = payday + interval        (2026-02-20)

Periods tile the calendar with no gaps or overlaps, in both directions from the
anchor. Offsets from the anchor are divided with floor division going forward
and ceiling division going backward; every candidate is then verified against
its period and adjusted by one interval if needed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from leave_ledger.exceptions import ConfigurationError
from leave_ledger.models.enums import PayPeriodType
from leave_ledger.models.pay_period import PayPeriod
from leave_ledger.services.dates import add_days, days_between, to_day

if TYPE_CHECKING:
    from datetime import date, datetime

    from leave_ledger.services.dates import TimezoneLike


PAY_INTERVAL_DAYS = PayPeriodType.BIWEEKLY.interval_days
PERIOD_CLOSE_LAG_DAYS = 7


def _ceil_div(numerator: int, denominator: int) -> int:
    """Ceiling division for a non-negative numerator and positive denominator."""
    return (numerator + denominator - 1) // denominator


class PayPeriodCalculator:
    """Maps dates to pay periods and paydays for one anchor payday."""

    def __init__(
        self,
        anchor_payday: date | datetime,
        interval_days: int = PAY_INTERVAL_DAYS,
        *,
        tz: TimezoneLike = None,
    ) -> None:
        if interval_days <= 0:
            raise ConfigurationError(f"interval_days must be positive, got {interval_days}")
        self.tz = tz
        self.anchor = to_day(anchor_payday, tz)
        self.interval = interval_days

    def __repr__(self) -> str:
        return f"PayPeriodCalculator(anchor={self.anchor.isoformat()}, interval={self.interval})"

    def _day(self, value: date | datetime) -> date:
        return to_day(value, self.tz)

    # ------------------------------------------------------------------
    # Periods
    # ------------------------------------------------------------------

    def period_for_payday(self, payday: date | datetime) -> PayPeriod:
        """Return the pay period closed by ``payday``."""
        payday_day = self._day(payday)
        end = add_days(payday_day, -PERIOD_CLOSE_LAG_DAYS)
        start = add_days(end, -(self.interval - 1))
        return PayPeriod(start=start, end=end, payday=payday_day)

    def period_for_date(self, value: date | datetime) -> PayPeriod:
        """Return the pay period that contains ``value``."""
        return self.period_for_payday(self.payday_for(value))

    def payday_for(self, value: date | datetime) -> date:
        """Return the payday whose pay period contains ``value``."""
        target = self._day(value)
        anchor_period = self.period_for_payday(self.anchor)
        if anchor_period.contains(target):
            return self.anchor

        offset = days_between(anchor_period.start, target)

        if offset >= 0:
            periods_forward = offset // self.interval
            candidate = add_days(self.anchor, periods_forward * self.interval)
            if self.period_for_payday(candidate).contains(target):
                return candidate
            return add_days(candidate, self.interval)

        periods_back = _ceil_div(-offset, self.interval)
        candidate = add_days(self.anchor, -periods_back * self.interval)
        if self.period_for_payday(candidate).contains(target):
            return candidate
        next_payday = add_days(candidate, self.interval)
        if self.period_for_payday(next_payday).contains(target):
            return next_payday
        return add_days(candidate, -self.interval)

    # ------------------------------------------------------------------
    # Paydays
    # ------------------------------------------------------------------

    def last_payday(self, as_of: date | datetime) -> date:
        """Return the most recent payday on or before ``as_of``."""
        target = self._day(as_of)

        if target >= self.anchor:
            periods = days_between(self.anchor, target) // self.interval
            return add_days(self.anchor, periods * self.interval)

        periods = _ceil_div(days_between(target, self.anchor), self.interval)
        candidate = add_days(self.anchor, -periods * self.interval)
        if candidate > target:
            return add_days(candidate, -self.interval)
        return candidate

    def next_payday_on_or_after(self, value: date | datetime) -> date:
        target = self._day(value)
        last = self.last_payday(target)
        if last == target:
            return last
        return add_days(last, self.interval)

    def is_payday(self, value: date | datetime) -> bool:
        target = self._day(value)
        return self.last_payday(target) == target

    def paydays_between(self, target_payday: date | datetime) -> list[date]:
        """Paydays walked from the anchor to ``target_payday``, in chronological order.

        Forward: strictly after the anchor through the target (inclusive).
        Backward: strictly before the anchor back to the target (inclusive).
        Empty when the target is the anchor.
        """
        target = self._day(target_payday)
        result: list[date] = []
        if target == self.anchor:
            return result

        if target > self.anchor:
            current = add_days(self.anchor, self.interval)
            while current <= target:
                result.append(current)
                current = add_days(current, self.interval)
            return result

        current = add_days(self.anchor, -self.interval)
        while current >= target:
            result.append(current)
            current = add_days(current, -self.interval)
        result.reverse()
        return result

    def paydays(self, start: date | datetime, end: date | datetime) -> list[date]:
        """All paydays in ``[start, end]``."""
        end_day = self._day(end)
        result: list[date] = []
        current = self.next_payday_on_or_after(start)
        while current <= end_day:
            result.append(current)
            current = add_days(current, self.interval)
        return result

    def upcoming_paydays(self, from_date: date | datetime, count: int) -> list[date]:
        """The next ``count`` paydays on or after ``from_date``."""
        if count < 0:
            msg = f"count must not be negative, got {count}"
            raise ValueError(msg)
        first = self.next_payday_on_or_after(from_date)
        return [add_days(first, i * self.interval) for i in range(count)]


# ---------------------------------------------------------------------------
# Functional helpers (anchor passed explicitly)
# ---------------------------------------------------------------------------


def period_for_payday(payday: date, interval_days: int = PAY_INTERVAL_DAYS) -> PayPeriod:
    return PayPeriodCalculator(payday, interval_days).period_for_payday(payday)


def payday_for(value: date, anchor: date, interval_days: int = PAY_INTERVAL_DAYS) -> date:
    return PayPeriodCalculator(anchor, interval_days).payday_for(value)


def last_payday(as_of: date, anchor: date, interval_days: int = PAY_INTERVAL_DAYS) -> date:
    return PayPeriodCalculator(anchor, interval_days).last_payday(as_of)


def paydays_between(anchor: date, target: date, interval_days: int = PAY_INTERVAL_DAYS) -> list[date]:
    return PayPeriodCalculator(anchor, interval_days).paydays_between(target)


def paydays(start: date, end: date, anchor: date, interval_days: int = PAY_INTERVAL_DAYS) -> list[date]:
    return PayPeriodCalculator(anchor, interval_days).paydays(start, end)


def is_payday(value: date, anchor: date, interval_days: int = PAY_INTERVAL_DAYS) -> bool:
    return PayPeriodCalculator(anchor, interval_days).is_payday(value)
