from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import FastAPI

from leave_ledger.config import Settings
from leave_ledger.middleware import setup_middleware

if TYPE_CHECKING:
    from httpx import AsyncClient


async def test_preflight_from_allowed_origin(async_client: AsyncClient) -> None:
    resp = await async_client.options(
        "/balances/forecast",
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )
    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "http://localhost:5173"
    assert "POST" in resp.headers["access-control-allow-methods"]
    assert "access-control-allow-credentials" not in resp.headers


async def test_preflight_rejects_unlisted_method(async_client: AsyncClient) -> None:
    resp = await async_client.options(
        "/balances/forecast",
        headers={"Origin": "http://localhost:5173", "Access-Control-Request-Method": "DELETE"},
    )
    assert resp.status_code == 400


async def test_preflight_from_unknown_origin(async_client: AsyncClient) -> None:
    resp = await async_client.options(
        "/balances/forecast",
        headers={"Origin": "http://evil.example", "Access-Control-Request-Method": "POST"},
    )
    assert resp.status_code == 400
    assert "access-control-allow-origin" not in resp.headers


def test_no_origins_skips_cors() -> None:
    app = FastAPI()
    setup_middleware(app, Settings(cors_origins=[]))
    assert app.user_middleware == []
