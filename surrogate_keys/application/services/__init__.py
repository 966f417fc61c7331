"""Application services: Surrogate-Key projection and tag fingerprinting."""

from surrogate_keys.application.services.surrogate_key_service import (
    SurrogateKeyProjector,
    cache_tags_to_hashes,
    fingerprint,
    parse_cache_tags,
    purge_keys_for,
)

__all__ = [
    "SurrogateKeyProjector",
    "cache_tags_to_hashes",
    "fingerprint",
    "parse_cache_tags",
    "purge_keys_for",
]
