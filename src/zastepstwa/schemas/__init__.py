"""Shared schemas for the substitution proxy."""

from zastepstwa.schemas.cache import CacheLookup, CacheState
from zastepstwa.schemas.intent import ExplicitIntent, RelativeIntent, RequestIntent
from zastepstwa.schemas.upstream import (
    UpstreamNotFound,
    UpstreamOutcome,
    UpstreamStatusError,
    UpstreamSuccess,
    UpstreamTransportFailure,
)

__all__ = [
    "CacheLookup",
    "CacheState",
    "ExplicitIntent",
    "RelativeIntent",
    "RequestIntent",
    "UpstreamNotFound",
    "UpstreamOutcome",
    "UpstreamStatusError",
    "UpstreamSuccess",
    "UpstreamTransportFailure",
]
