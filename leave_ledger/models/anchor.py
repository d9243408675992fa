"""Anchor configuration: the reference payday the engine projects from."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal

from leave_ledger.exceptions import ConfigurationError
from leave_ledger.models.balance import BalanceSnapshot
from leave_ledger.models.enums import LeaveCategory, PayPeriodType

logger = logging.getLogger(__name__)

_ZERO = Decimal(0)
_FRIDAY = 4


@dataclass(frozen=True)
class AccrualSchedule:
    """Hours added to each category once per payday."""

    comp: Decimal = _ZERO
    vacation: Decimal = _ZERO
    sick: Decimal = _ZERO

    def __post_init__(self) -> None:
        for category in LeaveCategory:
            rate = self.rate_for(category)
            if not isinstance(rate, Decimal):
                raise ConfigurationError(f"Accrual rate for {category.value} must be a Decimal, got {rate!r}")
            if not rate.is_finite():
                raise ConfigurationError(f"Accrual rate for {category.value} must be finite")
            if rate < 0:
                raise ConfigurationError(f"Accrual rate for {category.value} must not be negative: {rate}")

    def rate_for(self, category: LeaveCategory) -> Decimal:
        value: Decimal = getattr(self, category.value.lower())
        return value


@dataclass(frozen=True)
class AnchorConfig:
    """Starting point for all balance projections.

    ``starting_snapshot`` is the Official balance *at* ``anchor_payday``: it
    already includes the anchor period's own accrual and every entry dated
    inside the anchor's pay period.
    """

    anchor_payday: date
    starting_snapshot: BalanceSnapshot = field(default_factory=BalanceSnapshot.zero)
    accrual_schedule: AccrualSchedule = field(default_factory=AccrualSchedule)
    pay_period_type: PayPeriodType = PayPeriodType.BIWEEKLY
    interval_days: int | None = None

    def __post_init__(self) -> None:
        if isinstance(self.anchor_payday, datetime) or not isinstance(self.anchor_payday, date):
            raise ConfigurationError(f"anchor_payday must be a calendar date, got {self.anchor_payday!r}")

        interval = self.interval_days if self.interval_days is not None else self.pay_period_type.interval_days
        if interval <= 0:
            raise ConfigurationError(f"Pay period length must be positive, got {interval} days")
        object.__setattr__(self, "interval_days", interval)

        if self.anchor_payday.weekday() != _FRIDAY:
            logger.info(
                "Anchor payday %s is a %s; the pay period model assumes Friday paydays",
                self.anchor_payday.isoformat(),
                self.anchor_payday.strftime("%A"),
            )
        starting = self.starting_snapshot.as_dict()
        for category, value in starting.items():
            if not isinstance(value, Decimal) or not value.is_finite():
                raise ConfigurationError(f"Starting balance for {category.value} must be a finite Decimal: {value!r}")
        if any(value < 0 for value in starting.values()):
            logger.warning("Starting balances contain negative values: %s", self.starting_snapshot)

    @property
    def pay_interval(self) -> int:
        """Days between consecutive paydays."""
        return self.interval_days or self.pay_period_type.interval_days
