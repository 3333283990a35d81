"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic. Used by main.py; no business
logic here, only wiring of infrastructure (Firestore client, Gemini client,
telemetry).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.core.config import get_settings
from app.infrastructure.ai import GeminiClient
from app.infrastructure.firebase import close_firebase, init_firebase
from app.shared.telemetry import get_telemetry, set_telemetry, setup_telemetry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: telemetry (if enabled), Firestore client, Gemini client
    (if an API key is set). Shutdown closes them in reverse.
    """
    settings = get_settings()

    # ---- Startup ----
    if settings.telemetry_enabled:
        telemetry = setup_telemetry(settings)
        telemetry.instrument(app)
        set_telemetry(telemetry)

    init_firebase()

    if settings.gemini_api_key is not None:
        app.state.gemini_client = GeminiClient(
            api_key=settings.gemini_api_key.get_secret_value(),
            model=settings.gemini_model,
            base_url=settings.gemini_base_url,
            timeout=settings.gemini_timeout_seconds,
        )
        logger.info("Gemini client initialized (model %s)", settings.gemini_model)
    else:
        app.state.gemini_client = None
        logger.warning("GEMINI_API_KEY not set; assistant routes disabled")

    yield

    # ---- Shutdown ----
    if getattr(app.state, "gemini_client", None) is not None:
        await app.state.gemini_client.aclose()
        app.state.gemini_client = None
        logger.info("Gemini HTTP client closed")

    await close_firebase()

    telemetry = get_telemetry()
    if telemetry is not None:
        telemetry.shutdown()
        set_telemetry(None)
        logger.info("Telemetry shutdown complete")
