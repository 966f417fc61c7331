"""Surrogate-key API schemas (tag fingerprinting for purge tooling)."""

from pydantic import BaseModel, Field, field_validator


class FingerprintRequest(BaseModel):
    """Request for POST /surrogate-keys/fingerprints."""

    tags: list[str] = Field(
        ..., min_length=1, max_length=10_000, description="Cache tags to fingerprint"
    )

    @field_validator("tags")
    @classmethod
    def tags_are_utf8(cls, tags: list[str]) -> list[str]:
        """Reject tags with lone surrogates; they cannot be echoed back as JSON."""
        for tag in tags:
            try:
                tag.encode("utf-8")
            except UnicodeEncodeError:
                raise ValueError("tags must be valid UTF-8 text") from None
        return tags


class TagFingerprint(BaseModel):
    """A cache tag and the fingerprint used for it in compressed headers."""

    tag: str
    fingerprint: str = Field(..., description="3-char lowercase hex MD5 prefix")


class FingerprintResponse(BaseModel):
    """Fingerprints in request order plus the de-duplicated keys to purge."""

    fingerprints: list[TagFingerprint]
    purge_keys: list[str] = Field(
        ..., description="Each tag followed by its fingerprint, duplicates removed"
    )
