"""HTTP middleware: Surrogate-Key projection.

Applied in main app; runs on the response start message of every primary request.
Import and use from surrogate_keys.main.
"""

from surrogate_keys.middleware.surrogate_key import (
    SurrogateKeyMiddleware,
    is_primary_request,
)

__all__ = ["SurrogateKeyMiddleware", "is_primary_request"]
