"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic. Used by main.py; no business
logic here, only wiring of infrastructure (Firestore client, shared HTTP
client for Akismet, Google Sheets client).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI

from app.core.config import get_settings
from app.infrastructure.external.sheets import GoogleSheetsClient
from app.infrastructure.firebase import (
    close_firebase,
    init_firebase,
    load_service_account_info,
)
from app.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: logging, Firestore, shared HTTP client, Sheets client.
    Shutdown order: HTTP client close, Firestore close.
    """
    settings = get_settings()
    setup_logging()

    # ---- Startup ----
    init_firebase()

    # Shared HTTP client for Akismet calls (connection reuse).
    app.state.http_client = httpx.AsyncClient(timeout=settings.akismet_timeout_seconds)

    # Same service account as Firestore; without it sheet sync is unavailable.
    app.state.sheets_client = None
    try:
        info = load_service_account_info()
        if info:
            app.state.sheets_client = GoogleSheetsClient.from_service_account_info(info)
            logger.info("Google Sheets client configured")
    except Exception:
        logger.exception("Google Sheets client could not be created")

    yield

    # ---- Shutdown ----
    if getattr(app.state, "http_client", None) is not None:
        await app.state.http_client.aclose()
        app.state.http_client = None
        logger.info("Shared HTTP client closed")

    await close_firebase()
