"""Surrogate-Key middleware.

Copies the cache-tags response header into the CDN Surrogate-Key header,
compressing it to fingerprints when it exceeds the CDN size limit.
Only primary requests are projected; embedded sub-requests (scope state
"subrequest" set by fragment renderers) pass through untouched.
Uses raw ASGI (no BaseHTTPMiddleware) for production-safe streaming and background tasks.
"""

import logging
from typing import Callable

from starlette.datastructures import MutableHeaders

from surrogate_keys.application.services.surrogate_key_service import (
    SurrogateKeyProjector,
)
from surrogate_keys.core.constants import SUBREQUEST_STATE_KEY

logger = logging.getLogger(__name__)


def is_primary_request(scope: dict) -> bool:
    """True unless the scope is marked as an embedded sub-request."""
    state = scope.get("state") or {}
    return not state.get(SUBREQUEST_STATE_KEY, False)


def SurrogateKeyMiddleware(
    app: Callable, projector: SurrogateKeyProjector | None = None
) -> Callable:
    """Set Surrogate-Key on primary HTTP responses. Raw ASGI.

    Never raises into the pipeline: a projection failure is logged and the
    response start message is forwarded unmodified.
    """
    resolved = projector or SurrogateKeyProjector(logger=logger)

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http" or not is_primary_request(scope):
            await app(scope, receive, send)
            return

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                original = list(message.get("headers", []))
                try:
                    message["headers"] = list(original)
                    resolved.project_headers(MutableHeaders(scope=message))
                except Exception:
                    logger.exception("Surrogate-Key projection failed; header not set")
                    message["headers"] = original
            await send(message)

        await app(scope, receive, send_wrapper)

    return asgi_app
