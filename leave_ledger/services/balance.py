"""Balance engine: Official and Forecast projections over a leave ledger.

OFFICIAL balance as of a payday P includes only entries whose pay period has
closed by P, plus one accrual cycle per payday between the anchor and P.

FORECAST balance as of a date D includes every entry dated on or before D,
whether or not its pay period has closed, plus one accrual cycle per payday
on or before D.

Both projections start from the anchor snapshot, which is the Official
balance *at* the anchor payday (anchor accrual and anchor-period entries
already included). Going backward from the anchor the anchor's own accrual is
undone first.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import TYPE_CHECKING

from leave_ledger.models.enums import ForecastMode, PostingStatus
from leave_ledger.services.dates import add_days, to_day
from leave_ledger.services.pay_period import PayPeriodCalculator

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import date, datetime

    from leave_ledger.models.anchor import AnchorConfig
    from leave_ledger.models.balance import BalanceSnapshot
    from leave_ledger.models.ledger import LedgerEntry
    from leave_ledger.services.dates import TimezoneLike

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Result dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class EntryStatus:
    """Posting status of one ledger entry as of a reference date."""

    entry: LedgerEntry
    day: date
    home_payday: date
    status: PostingStatus

    @property
    def is_posted(self) -> bool:
        return self.status == PostingStatus.POSTED


@dataclass(frozen=True)
class BalanceSummary:
    """Official and Forecast balances side by side."""

    as_of: date
    last_payday: date
    official: BalanceSnapshot
    forecast_mode: ForecastMode
    forecast_as_of: date
    forecast: BalanceSnapshot


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------


class BalanceEngine:
    """Deterministic balance calculator for one anchor configuration.

    Holds no mutable state; safe to share between threads and tasks.
    """

    def __init__(self, config: AnchorConfig, *, tz: TimezoneLike = None) -> None:
        self.config = config
        self.tz = tz
        self.calendar = PayPeriodCalculator(config.anchor_payday, config.pay_interval, tz=tz)

    @property
    def anchor(self) -> date:
        return self.calendar.anchor

    @property
    def interval(self) -> int:
        return self.calendar.interval

    def _day(self, value: date | datetime) -> date:
        return to_day(value, self.tz)

    def _active_entries(self, entries: Iterable[LedgerEntry]) -> list[LedgerEntry]:
        return [entry for entry in entries if not entry.is_deleted]

    def _entries_by_payday(self, entries: Iterable[LedgerEntry]) -> dict[date, list[LedgerEntry]]:
        """Group non-deleted entries by the payday that closes their pay period."""
        grouped: dict[date, list[LedgerEntry]] = defaultdict(list)
        for entry in self._active_entries(entries):
            grouped[self.calendar.payday_for(entry.day_in(self.tz))].append(entry)
        return grouped

    # ------------------------------------------------------------------
    # Official balance
    # ------------------------------------------------------------------

    def official_balance(self, as_of_payday: date | datetime, entries: Iterable[LedgerEntry]) -> BalanceSnapshot:
        """Official balance as of a payday.

        At the anchor: the starting snapshot plus the anchor period's entries.
        Forward: anchor-period entries, then per payday one accrual cycle and
        that payday's period entries.
        Backward: the anchor's accrual and one per prior payday are undone;
        entries are neither applied nor undone.
        """
        target = self._day(as_of_payday)
        schedule = self.config.accrual_schedule
        balance = self.config.starting_snapshot

        if target < self.anchor:
            # Undo the anchor's own accrual, then one per payday still after the target.
            balance = balance.apply_accruals(schedule, -1)
            current = add_days(self.anchor, -self.interval)
            cycles_undone = 1
            while current > target:
                balance = balance.apply_accruals(schedule, -1)
                cycles_undone += 1
                current = add_days(current, -self.interval)
            logger.debug("Official balance as of %s: walked back %d accrual cycles", target, cycles_undone)
            return balance

        by_payday = self._entries_by_payday(entries)
        for entry in by_payday.get(self.anchor, []):
            balance = balance.apply_entry(entry)

        paydays = self.calendar.paydays_between(target) if target > self.anchor else []
        for payday in paydays:
            balance = balance.apply_accruals(schedule)
            for entry in by_payday.get(payday, []):
                balance = balance.apply_entry(entry)

        logger.debug("Official balance as of %s: applied %d accrual cycles", target, len(paydays))
        return balance

    def last_payday(self, as_of: date | datetime) -> date:
        return self.calendar.last_payday(self._day(as_of))

    def current_official_balance(self, as_of: date | datetime, entries: Iterable[LedgerEntry]) -> BalanceSnapshot:
        """Official balance as of the last payday on or before ``as_of``."""
        return self.official_balance(self.last_payday(as_of), entries)

    # ------------------------------------------------------------------
    # Forecast balance
    # ------------------------------------------------------------------

    def forecast_balance(self, as_of: date | datetime, entries: Iterable[LedgerEntry]) -> BalanceSnapshot:
        """Forecast balance as of any date.

        Accruals: one cycle per payday after the anchor up to ``as_of``, or,
        before the anchor, the anchor's cycle and every prior payday's cycle
        after ``as_of`` undone. Entries: every non-deleted entry dated on or
        before ``as_of``, regardless of its pay period.
        """
        target = self._day(as_of)
        schedule = self.config.accrual_schedule
        balance = self.config.starting_snapshot
        cycles = 0

        if target >= self.anchor:
            payday = add_days(self.anchor, self.interval)
            while payday <= target:
                balance = balance.apply_accruals(schedule)
                cycles += 1
                payday = add_days(payday, self.interval)
        else:
            balance = balance.apply_accruals(schedule, -1)
            cycles -= 1
            payday = add_days(self.anchor, -self.interval)
            while payday > target:
                balance = balance.apply_accruals(schedule, -1)
                cycles -= 1
                payday = add_days(payday, -self.interval)

        applied = 0
        for entry in self._active_entries(entries):
            if entry.day_in(self.tz) <= target:
                balance = balance.apply_entry(entry)
                applied += 1

        logger.debug("Forecast balance as of %s: %+d accrual cycles, %d entries", target, cycles, applied)
        return balance

    def resolve_forecast_date(
        self,
        mode: ForecastMode,
        today: date | datetime,
        selected_date: date | datetime | None = None,
    ) -> date:
        """Pick the date a forecast projects to for the given mode."""
        today_day = self._day(today)
        if mode == ForecastMode.SELECTED_DAY:
            return self._day(selected_date) if selected_date is not None else today_day
        if mode == ForecastMode.NEXT_PAYDAY:
            return self.calendar.next_payday_on_or_after(today_day)
        return today_day

    def forecast_for_mode(
        self,
        mode: ForecastMode,
        today: date | datetime,
        entries: Iterable[LedgerEntry],
        selected_date: date | datetime | None = None,
    ) -> tuple[date, BalanceSnapshot]:
        forecast_date = self.resolve_forecast_date(mode, today, selected_date)
        return forecast_date, self.forecast_balance(forecast_date, entries)

    def summary(
        self,
        as_of: date | datetime,
        entries: Iterable[LedgerEntry],
        *,
        forecast_mode: ForecastMode = ForecastMode.TODAY,
        selected_date: date | datetime | None = None,
    ) -> BalanceSummary:
        """Current Official balance and the Forecast for ``forecast_mode``."""
        entry_list = list(entries)
        today = self._day(as_of)
        last_pd = self.last_payday(today)
        forecast_date, forecast = self.forecast_for_mode(forecast_mode, today, entry_list, selected_date)
        return BalanceSummary(
            as_of=today,
            last_payday=last_pd,
            official=self.official_balance(last_pd, entry_list),
            forecast_mode=forecast_mode,
            forecast_as_of=forecast_date,
            forecast=forecast,
        )

    # ------------------------------------------------------------------
    # Posting status
    # ------------------------------------------------------------------

    def is_posted(self, entry: LedgerEntry, as_of: date | datetime) -> bool:
        """True once the payday closing the entry's pay period is on or before ``as_of``."""
        entry_payday = self.calendar.payday_for(entry.day_in(self.tz))
        return entry_payday <= self.last_payday(as_of)

    def entry_statuses(self, entries: Iterable[LedgerEntry], as_of: date | datetime) -> list[EntryStatus]:
        """Posting status for each non-deleted entry, ordered by date."""
        last_pd = self.last_payday(as_of)
        statuses: list[EntryStatus] = []
        dated = [(entry.day_in(self.tz), entry) for entry in self._active_entries(entries)]
        dated.sort(key=lambda pair: pair[0])
        for day, entry in dated:
            home_payday = self.calendar.payday_for(day)
            status = PostingStatus.POSTED if home_payday <= last_pd else PostingStatus.PENDING
            statuses.append(EntryStatus(entry=entry, day=day, home_payday=home_payday, status=status))
        return statuses
