"""Local configuration for the substitution proxy."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Callable

DEFAULT_CACHE_DIR = "cached"
DEFAULT_CACHE_MAX_AGE_SECONDS = 10 * 60
DEFAULT_UPSTREAM_URL = "https://zastepstwa.zschie.pl"
DEFAULT_FETCH_TIMEOUT_S = 10.0
DEFAULT_USER_AGENT = "zastepstwa-proxy/0.1"
DEFAULT_LANGUAGE = "pl"
DEFAULT_LOG_LEVEL = "INFO"

# Flat directory holding one <DD.MM.YYYY>.pdf per date.
ZASTEPSTWA_CACHE_PATH = Path(os.getenv("ZASTEPSTWA_CACHE_PATH", DEFAULT_CACHE_DIR)).expanduser().resolve()
ZASTEPSTWA_CACHE_MAX_AGE_SECONDS = int(
    os.getenv("ZASTEPSTWA_CACHE_MAX_AGE_SECONDS", str(DEFAULT_CACHE_MAX_AGE_SECONDS))
)
ZASTEPSTWA_UPSTREAM_URL = os.getenv("ZASTEPSTWA_UPSTREAM_URL", DEFAULT_UPSTREAM_URL).rstrip("/")
ZASTEPSTWA_FETCH_TIMEOUT_S = float(os.getenv("ZASTEPSTWA_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S)))
ZASTEPSTWA_USER_AGENT = os.getenv("ZASTEPSTWA_USER_AGENT", DEFAULT_USER_AGENT)
ZASTEPSTWA_LANGUAGE = os.getenv("ZASTEPSTWA_LANGUAGE", DEFAULT_LANGUAGE)
ZASTEPSTWA_LOG_LEVEL = os.getenv("ZASTEPSTWA_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


def local_now() -> datetime:
    """Return the current wall-clock time in the local timezone."""
    return datetime.now().astimezone()


@dataclass(frozen=True)
class ProxySettings:
    """Everything the resolution pipeline needs, passed in explicitly.

    Attributes:
        cache_dir: Directory holding cached PDFs.
        upstream_url: Base URL of the upstream origin (no trailing slash).
        max_age_seconds: Freshness threshold for cached files.
        fetch_timeout_s: Timeout applied to short-lived HTTP clients.
        user_agent: User-Agent header sent upstream.
        language: Key into the message tables.
        clock: Returns the current, timezone-aware local time.
    """

    cache_dir: Path = ZASTEPSTWA_CACHE_PATH
    upstream_url: str = ZASTEPSTWA_UPSTREAM_URL
    max_age_seconds: int = ZASTEPSTWA_CACHE_MAX_AGE_SECONDS
    fetch_timeout_s: float = ZASTEPSTWA_FETCH_TIMEOUT_S
    user_agent: str = ZASTEPSTWA_USER_AGENT
    language: str = ZASTEPSTWA_LANGUAGE
    clock: Callable[[], datetime] = field(default=local_now, compare=False)
