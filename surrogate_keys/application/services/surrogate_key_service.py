"""Surrogate-Key projection for outbound responses.

Mirrors the cache-tags header into the CDN Surrogate-Key header. When the
raw tag list exceeds the CDN header limit, every tag is replaced by a short
MD5-derived fingerprint so the header fits; purging a tag later means
purging both the tag and its fingerprint (see purge_keys_for).
"""

from __future__ import annotations

import hashlib
import logging
from collections.abc import Iterable
from typing import Any

from starlette.datastructures import MutableHeaders

from surrogate_keys.core.constants import (
    CACHE_TAGS_HEADER,
    FINGERPRINT_LENGTH,
    SURROGATE_KEY_HEADER,
    SURROGATE_KEY_MAX_BYTES,
    TAG_SEP,
)
from surrogate_keys.shared.telemetry.tracing import add_span_event

COMPRESSED_NOTICE = (
    "%s header size exceeded the %d byte limit that the CDN supports; "
    "replaced the cache tags with hashed equivalents."
)


def _as_bytes(value: bytes | str | None) -> bytes:
    """Raw bytes of a header value; None is empty, undecodable str survives.

    Escaped bytes (U+DC80-U+DCFF, from a surrogateescape decode) map back to
    the original byte; any other lone surrogate is encoded as-is.
    """
    if value is None:
        return b""
    if isinstance(value, bytes):
        return value
    try:
        return value.encode("utf-8", errors="surrogateescape")
    except UnicodeEncodeError:
        return value.encode("utf-8", errors="surrogatepass")


def parse_cache_tags(value: bytes | str | None) -> list[str]:
    """Split a cache-tags header value on single spaces.

    Consecutive spaces yield empty tags and duplicates are kept, so the
    result lines up one-to-one with the header's tokens; an empty or
    missing value is a single empty tag. Invalid UTF-8 is escaped, so
    fingerprinting a tag hashes exactly its original bytes.
    """
    return _as_bytes(value).decode("utf-8", errors="surrogateescape").split(TAG_SEP)


def fingerprint(tag: bytes | str, length: int = FINGERPRINT_LENGTH) -> str:
    """Return the first `length` lowercase hex chars of the tag's MD5 digest."""
    return hashlib.md5(_as_bytes(tag), usedforsecurity=False).hexdigest()[:length]


def cache_tags_to_hashes(
    cache_tags: Iterable[bytes | str], length: int = FINGERPRINT_LENGTH
) -> list[str]:
    """Map cache tags to fingerprints, preserving order and duplicates."""
    return [fingerprint(tag, length) for tag in cache_tags]


def purge_keys_for(
    cache_tags: Iterable[str], length: int = FINGERPRINT_LENGTH
) -> list[str]:
    """Keys to purge for the given tags: each tag, then its fingerprint.

    A cached response may carry either form depending on its header size,
    so both must be purged. Duplicates are dropped (first occurrence wins).
    """
    keys: dict[str, None] = {}
    for tag in cache_tags:
        keys.setdefault(tag, None)
        keys.setdefault(fingerprint(tag, length), None)
    return list(keys)


class SurrogateKeyProjector:
    """Writes the Surrogate-Key header from the cache-tags header.

    Collaborators and limits are passed in explicitly. Instances hold no
    per-request state and may be shared across concurrent requests.
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        max_bytes: int = SURROGATE_KEY_MAX_BYTES,
        fingerprint_length: int = FINGERPRINT_LENGTH,
        cache_tags_header: str = CACHE_TAGS_HEADER,
        surrogate_key_header: str = SURROGATE_KEY_HEADER,
    ) -> None:
        self.logger = logger or logging.getLogger(__name__)
        self.max_bytes = max_bytes
        self.fingerprint_length = fingerprint_length
        self.cache_tags_header = cache_tags_header
        self.surrogate_key_header = surrogate_key_header

    def project_value(self, raw: bytes | str | None) -> bytes:
        """Return the Surrogate-Key value for a raw cache-tags value.

        The size decision uses the byte length of the original value. At or
        under the limit the bytes are returned unchanged; above it each
        space-separated token is fingerprinted, order preserved.
        """
        raw_bytes = _as_bytes(raw)
        if len(raw_bytes) <= self.max_bytes:
            return raw_bytes

        tokens = parse_cache_tags(raw_bytes)
        hashes = cache_tags_to_hashes(tokens, self.fingerprint_length)
        self._notify_compressed(len(raw_bytes), len(tokens))
        return TAG_SEP.join(hashes).encode("ascii")

    def project_headers(self, headers: MutableHeaders) -> None:
        """Set the Surrogate-Key header from the cache-tags header in place.

        Starlette decodes header values as latin-1, so re-encoding recovers
        the exact wire bytes. A missing cache-tags header yields an empty
        Surrogate-Key header, which is still written.
        """
        raw = (headers.get(self.cache_tags_header) or "").encode("latin-1")
        headers[self.surrogate_key_header] = self.project_value(raw).decode(
            "latin-1"
        )

    def project(self, response: Any, primary: bool = True) -> Any:
        """Project a response object exposing `.headers` (MutableHeaders).

        Sub-requests (primary=False) are returned untouched.
        """
        if primary:
            self.project_headers(response.headers)
        return response

    def _notify_compressed(self, size: int, tag_count: int) -> None:
        """Emit the single compression notice; collaborator failures are ignored."""
        try:
            self.logger.warning(
                COMPRESSED_NOTICE, self.cache_tags_header, self.max_bytes
            )
        except Exception:
            pass
        try:
            add_span_event(
                "surrogate_key.compressed",
                {"header.size": size, "tag.count": tag_count},
            )
        except Exception:
            pass
