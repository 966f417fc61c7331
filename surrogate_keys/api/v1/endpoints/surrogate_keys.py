"""Surrogate-key endpoints.

Purge tooling cannot tell whether a cached response carried verbatim tags
or fingerprints, so it asks here for both forms. No CDN call is made.
"""

from fastapi import APIRouter

from surrogate_keys.application.services.surrogate_key_service import (
    fingerprint,
    purge_keys_for,
)
from surrogate_keys.schemas.surrogate_key import (
    FingerprintRequest,
    FingerprintResponse,
    TagFingerprint,
)

router = APIRouter()


@router.post("/fingerprints", response_model=FingerprintResponse)
def fingerprint_tags(body: FingerprintRequest) -> FingerprintResponse:
    """Return each tag's fingerprint and the full list of keys to purge."""
    return FingerprintResponse(
        fingerprints=[
            TagFingerprint(tag=tag, fingerprint=fingerprint(tag)) for tag in body.tags
        ],
        purge_keys=purge_keys_for(body.tags),
    )
