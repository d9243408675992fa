from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi.middleware.cors import CORSMiddleware

if TYPE_CHECKING:
    from fastapi import FastAPI

    from leave_ledger.config import Settings

logger = logging.getLogger(__name__)

# Projection endpoints are POST-only JSON calls; health is a GET.
CORS_METHODS = ["GET", "POST"]
CORS_HEADERS = ["Content-Type"]


def setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Allow browser clients on the configured origins to call the projection endpoints.

    No cookies or credentials are involved: every request carries its own
    anchor configuration and entries.
    """
    if not settings.cors_origins:
        logger.info("CORS disabled: no origins configured")
        return
    app.add_middleware(
        CORSMiddleware,  # ty: ignore[invalid-argument-type]
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=CORS_METHODS,
        allow_headers=CORS_HEADERS,
    )
