"""Cache lookup results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class CacheState(str, Enum):
    """Freshness of a cached artifact."""

    FRESH = "fresh"
    STALE = "stale"
    ABSENT = "absent"


@dataclass(frozen=True)
class CacheLookup:
    """Result of looking a canonical date up in the cache directory.

    Attributes:
        state: Whether the file is fresh, stale, or missing.
        path: Where the artifact for this date lives (or would live).
        age_seconds: Age of the file at lookup time, None when absent.
    """

    state: CacheState
    path: Path
    age_seconds: float | None = None
