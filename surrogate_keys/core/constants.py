"""Core constants: header names and CDN limits.

Single source of truth for the surrogate-key projection. These are fixed
by the CDN contract and are deliberately not exposed as settings.
"""

# Inbound header set by the response pipeline (space-delimited cache tags)
CACHE_TAGS_HEADER = "X-Cache-Tags"

# Outbound header read by the CDN edge
SURROGATE_KEY_HEADER = "Surrogate-Key"

# Maximum Surrogate-Key header size the CDN accepts (16 KB)
SURROGATE_KEY_MAX_BYTES = 16384

# Hex characters kept from each tag digest when the header is compressed
FINGERPRINT_LENGTH = 3

# Delimiter between tags in both headers
TAG_SEP = " "

# Key in scope["state"] marking an embedded sub-request (fragment render)
SUBREQUEST_STATE_KEY = "subrequest"
