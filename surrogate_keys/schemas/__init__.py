"""Pydantic request/response schemas for the API."""

from surrogate_keys.schemas.health import HealthResponse
from surrogate_keys.schemas.surrogate_key import (
    FingerprintRequest,
    FingerprintResponse,
    TagFingerprint,
)

__all__ = [
    "FingerprintRequest",
    "FingerprintResponse",
    "HealthResponse",
    "TagFingerprint",
]
