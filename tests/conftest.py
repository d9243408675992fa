from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING

import pytest
from httpx import ASGITransport, AsyncClient

from leave_ledger.main import app
from leave_ledger.models.anchor import AccrualSchedule, AnchorConfig
from leave_ledger.models.balance import BalanceSnapshot
from leave_ledger.services.balance import BalanceEngine

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

ANCHOR_PAYDAY = date(2026, 2, 6)
STARTING = BalanceSnapshot(comp=Decimal("0.25"), vacation=Decimal("33.72"), sick=Decimal("801.84"))
RATES = AccrualSchedule(vacation=Decimal("6.46"), sick=Decimal("7.88"))


@pytest.fixture
def anchor_config() -> AnchorConfig:
    """Anchor 2026-02-06, biweekly, comp 0.25 / vacation 33.72 / sick 801.84."""
    return AnchorConfig(anchor_payday=ANCHOR_PAYDAY, starting_snapshot=STARTING, accrual_schedule=RATES)


@pytest.fixture
def engine(anchor_config: AnchorConfig) -> BalanceEngine:
    return BalanceEngine(anchor_config, tz="UTC")


@pytest.fixture
async def async_client() -> AsyncIterator[AsyncClient]:
    """Async HTTP client bound to the application."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
