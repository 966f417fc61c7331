"""Application lifespan: startup and shutdown.

Telemetry is configured in create_app() (instrumentation must be added
before the app starts); this only logs startup and flushes spans on exit.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from surrogate_keys.core.config import get_settings
from surrogate_keys.shared.telemetry.telemetry import get_telemetry, set_telemetry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown."""
    settings = get_settings()
    logger.info(
        "%s %s starting (surrogate keys %s)",
        settings.app_name,
        settings.app_version,
        "enabled" if settings.surrogate_key_enabled else "disabled",
    )

    yield

    telemetry_instance = get_telemetry()
    if telemetry_instance is not None:
        telemetry_instance.shutdown()
        set_telemetry(None)
