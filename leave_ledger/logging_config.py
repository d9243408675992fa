from __future__ import annotations

import logging

from leave_ledger.config import get_settings

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once, using the configured level unless one is given."""
    settings = get_settings()
    logging.basicConfig(level=level or settings.log_level, format=LOG_FORMAT)
