"""HTTP tests for balance projection and entry status endpoints."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from httpx import AsyncClient

CONFIG: dict[str, Any] = {
    "anchor_payday": "2026-02-06",
    "starting_balances": {"comp": "0.25", "vacation": "33.72", "sick": "801.84"},
    "accrual_rates": {"vacation": "6.46", "sick": "7.88"},
}
VACATION_USED = {"date": "2026-02-02", "category": "VACATION", "action": "USED", "magnitude": "24"}


def _amounts(data: dict[str, Any]) -> tuple[Decimal, Decimal, Decimal]:
    return Decimal(data["comp"]), Decimal(data["vacation"]), Decimal(data["sick"])


# ---------------------------------------------------------------------------
# Official
# ---------------------------------------------------------------------------


async def test_official_balance_forward(async_client: AsyncClient) -> None:
    resp = await async_client.post(
        "/balances/official",
        json={"config": CONFIG, "entries": [VACATION_USED], "as_of_payday": "2026-02-20"},
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["as_of"] == "2026-02-20"
    assert _amounts(data) == (Decimal("0.25"), Decimal("16.18"), Decimal("809.72"))


async def test_official_balance_backward(async_client: AsyncClient) -> None:
    resp = await async_client.post("/balances/official", json={"config": CONFIG, "as_of_payday": "2026-01-23"})
    assert resp.status_code == 200
    assert _amounts(resp.json()) == (Decimal("0.25"), Decimal("27.26"), Decimal("793.96"))


async def test_current_official_balance(async_client: AsyncClient) -> None:
    resp = await async_client.post(
        "/balances/official/current",
        json={"config": CONFIG, "entries": [VACATION_USED], "as_of": "2026-02-25"},
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["last_payday"] == "2026-02-20"
    assert data["balance"]["as_of"] == "2026-02-20"
    assert Decimal(data["balance"]["vacation"]) == Decimal("16.18")


# ---------------------------------------------------------------------------
# Forecast
# ---------------------------------------------------------------------------


async def test_forecast_balance(async_client: AsyncClient) -> None:
    resp = await async_client.post(
        "/balances/forecast",
        json={"config": CONFIG, "entries": [VACATION_USED], "as_of": "2026-02-05"},
    )
    assert resp.status_code == 200
    assert _amounts(resp.json()) == (Decimal("0.25"), Decimal("3.26"), Decimal("793.96"))


async def test_forecast_skips_deleted_entries(async_client: AsyncClient) -> None:
    deleted = {**VACATION_USED, "deleted_at": "2026-02-03T12:00:00Z"}
    resp = await async_client.post(
        "/balances/forecast",
        json={"config": CONFIG, "entries": [deleted], "as_of": "2026-02-05"},
    )
    assert resp.status_code == 200
    assert Decimal(resp.json()["vacation"]) == Decimal("27.26")


async def test_balance_summary_next_payday(async_client: AsyncClient) -> None:
    resp = await async_client.post(
        "/balances/summary",
        json={
            "config": CONFIG,
            "entries": [VACATION_USED],
            "as_of": "2026-02-10",
            "forecast_mode": "NEXT_PAYDAY",
        },
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["last_payday"] == "2026-02-06"
    assert data["forecast_mode"] == "NEXT_PAYDAY"
    assert Decimal(data["official"]["vacation"]) == Decimal("33.72")
    assert data["forecast"]["as_of"] == "2026-02-20"
    assert Decimal(data["forecast"]["vacation"]) == Decimal("16.18")


async def test_balance_summary_selected_day(async_client: AsyncClient) -> None:
    resp = await async_client.post(
        "/balances/summary",
        json={
            "config": CONFIG,
            "as_of": "2026-02-10",
            "forecast_mode": "SELECTED_DAY",
            "selected_date": "2026-03-06",
        },
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["forecast"]["as_of"] == "2026-03-06"
    assert Decimal(data["forecast"]["sick"]) == Decimal("817.60")


# ---------------------------------------------------------------------------
# Entry status
# ---------------------------------------------------------------------------


async def test_entry_statuses(async_client: AsyncClient) -> None:
    posted = {"date": "2026-01-20", "category": "COMP", "action": "ACCRUED", "magnitude": "4"}
    resp = await async_client.post(
        "/entries/status",
        json={"config": CONFIG, "entries": [VACATION_USED, posted], "as_of": "2026-02-10"},
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["total"] == 2
    first, second = data["items"]
    assert first["date"] == "2026-01-20"
    assert first["home_payday"] == "2026-02-06"
    assert first["status"] == "POSTED"
    assert second["home_payday"] == "2026-02-20"
    assert second["status"] == "PENDING"
    assert Decimal(second["signed_amount"]) == Decimal(-24)


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


async def test_negative_accrual_rate_rejected(async_client: AsyncClient) -> None:
    config = {**CONFIG, "accrual_rates": {"sick": "-7.88"}}
    resp = await async_client.post("/balances/forecast", json={"config": config, "as_of": "2026-02-05"})
    assert resp.status_code == 422
    data = resp.json()
    assert data["error"] == "ConfigurationError"
    assert "must not be negative" in data["detail"]


async def test_adjustment_without_sign_rejected(async_client: AsyncClient) -> None:
    entry = {"date": "2026-02-03", "category": "SICK", "action": "ADJUSTMENT", "magnitude": "10"}
    resp = await async_client.post(
        "/balances/forecast",
        json={"config": CONFIG, "entries": [entry], "as_of": "2026-02-05"},
    )
    assert resp.status_code == 422
    assert resp.json()["error"] == "ValidationError"


async def test_negative_magnitude_rejected(async_client: AsyncClient) -> None:
    entry = {**VACATION_USED, "magnitude": "-24"}
    resp = await async_client.post(
        "/balances/forecast",
        json={"config": CONFIG, "entries": [entry], "as_of": "2026-02-05"},
    )
    assert resp.status_code == 422


async def test_missing_config_rejected(async_client: AsyncClient) -> None:
    resp = await async_client.post("/balances/forecast", json={"as_of": "2026-02-05"})
    assert resp.status_code == 422
