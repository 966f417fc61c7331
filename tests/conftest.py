"""Pytest configuration and fixtures for surrogate-keys.

Uses surrogate_keys.main:create_app for HTTP tests and a throwaway FastAPI
app (tagged_app) whose routes emit cache-tags headers for middleware tests.
"""

import pytest
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse
from httpx import ASGITransport, AsyncClient

from surrogate_keys.application.services.surrogate_key_service import (
    SurrogateKeyProjector,
)
from surrogate_keys.core.config import get_settings
from surrogate_keys.core.constants import CACHE_TAGS_HEADER, SUBREQUEST_STATE_KEY
from surrogate_keys.main import create_app
from surrogate_keys.middleware import SurrogateKeyMiddleware

# 6000 tags, well over the 16 KB Surrogate-Key limit once joined.
MANY_TAGS = " ".join(f"tag:{n}" for n in range(6000))


@pytest.fixture(autouse=True)
def _fresh_settings() -> None:
    """Clear cached settings around each test so env patches take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=create_app())
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


def build_tagged_app(projector: SurrogateKeyProjector | None = None) -> FastAPI:
    """FastAPI app whose routes echo ?tags= into the cache-tags header."""
    app = FastAPI()
    app.add_middleware(SurrogateKeyMiddleware, projector=projector)

    @app.get("/tagged")
    def tagged(tags: str = "") -> PlainTextResponse:
        return PlainTextResponse("ok", headers={CACHE_TAGS_HEADER: tags})

    @app.get("/many")
    def many() -> PlainTextResponse:
        return PlainTextResponse("ok", headers={CACHE_TAGS_HEADER: MANY_TAGS})

    @app.get("/untagged")
    def untagged() -> PlainTextResponse:
        return PlainTextResponse("ok")

    @app.get("/fragment")
    def fragment() -> PlainTextResponse:
        return PlainTextResponse("fragment", headers={CACHE_TAGS_HEADER: "node:1"})

    return app


class SubrequestMarker:
    """Outer ASGI wrapper that marks every request as an embedded sub-request."""

    def __init__(self, app) -> None:
        self.app = app

    async def __call__(self, scope, receive, send) -> None:
        if scope["type"] == "http":
            scope.setdefault("state", {})[SUBREQUEST_STATE_KEY] = True
        await self.app(scope, receive, send)


@pytest.fixture
async def tagged_client() -> AsyncClient:
    """Client against build_tagged_app() with the default projector."""
    transport = ASGITransport(app=build_tagged_app())
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
