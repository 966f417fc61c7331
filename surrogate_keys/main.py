"""FastAPI application entry point.

Wiring only: lifespan, exception handlers, middleware, routers.
No business logic here. See surrogate_keys.core.lifespan and
surrogate_keys.core.exception_handlers.

Settings are loaded inside create_app() so that tests can set env (and optionally
clear get_settings cache) before importing or calling create_app().
"""

from fastapi import FastAPI

from surrogate_keys.api.v1 import api_router
from surrogate_keys.application.services.surrogate_key_service import (
    SurrogateKeyProjector,
)
from surrogate_keys.core.config import get_settings
from surrogate_keys.core.exception_handlers import register_exception_handlers
from surrogate_keys.core.lifespan import create_lifespan
from surrogate_keys.middleware import SurrogateKeyMiddleware
from surrogate_keys.shared.telemetry.logging import get_logger, setup_logging
from surrogate_keys.shared.telemetry.telemetry import TelemetryConfig, set_telemetry


def create_app() -> FastAPI:
    """Build and return the FastAPI application. Settings are resolved here (deferred from import)."""
    settings = get_settings()
    setup_logging()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    register_exception_handlers(app)

    # Sees the final response start message of every primary request.
    if settings.surrogate_key_enabled:
        projector = SurrogateKeyProjector(
            logger=get_logger("surrogate_keys.projector")
        )
        app.add_middleware(SurrogateKeyMiddleware, projector=projector)

    if settings.telemetry_enabled:
        telemetry = TelemetryConfig(
            service_name=settings.app_name,
            service_version=settings.app_version,
            enabled=True,
            environment=settings.telemetry_environment,
        )
        telemetry.setup_telemetry(
            exporter_type=settings.telemetry_exporter,
            otlp_endpoint=settings.telemetry_otlp_endpoint,
            sample_rate=settings.telemetry_sample_rate,
        )
        telemetry.instrument_fastapi(app)
        telemetry.instrument_logging()
        set_telemetry(telemetry)

    app.include_router(api_router, prefix="/api/v1")

    return app


app = create_app()
