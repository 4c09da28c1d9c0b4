"""HTTP client wrappers for the DeBank Pro OpenAPI."""

from .client import (
    DebankApiClient,
    DebankApiError,
    UnauthorizedError,
    UpstreamUnreachableError,
    default_client,
)

__all__ = [
    "DebankApiClient",
    "DebankApiError",
    "UnauthorizedError",
    "UpstreamUnreachableError",
    "default_client",
]
