"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags.
"""

from fastapi import APIRouter

from surrogate_keys.api.v1.endpoints import health, surrogate_keys

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(
    surrogate_keys.router, prefix="/surrogate-keys", tags=["surrogate-keys"]
)
