"""Resolve a requested date to a cached or freshly fetched substitution PDF."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import BinaryIO

import httpx

from zastepstwa.cache_utils import evict, lookup, open_artifact, store
from zastepstwa.config import ProxySettings
from zastepstwa.dates import resolve_date
from zastepstwa.exceptions import (
    CacheIOError,
    NoSubstitutionsForDateError,
    UnknownUpstreamStatusError,
    UpstreamUnreachableError,
    ZastepstwaError,
)
from zastepstwa.http_utils import fetch_schedule
from zastepstwa.schemas import (
    CacheState,
    ExplicitIntent,
    RequestIntent,
    UpstreamNotFound,
    UpstreamStatusError,
    UpstreamSuccess,
)
from zastepstwa.utils.logging_config import get_logger

logger = get_logger(__name__)


class KeyedLocks:
    """One asyncio.Lock per key, dropped once nobody holds or awaits it."""

    def __init__(self) -> None:
        self._locks: dict[str, asyncio.Lock] = {}
        self._users: dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._locks)

    @asynccontextmanager
    async def hold(self, key: str) -> AsyncIterator[None]:
        lock = self._locks.setdefault(key, asyncio.Lock())
        self._users[key] = self._users.get(key, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._users[key] -= 1
            if self._users[key] == 0:
                del self._users[key]
                del self._locks[key]


class SubstitutionProxy:
    """Date-keyed cache-or-fetch resolution.

    For one canonical date the cache check, eviction, upstream fetch and
    persist steps run under a per-date lock, so concurrent misses in this
    process trigger a single upstream request. Separate processes sharing
    the cache directory are not coordinated; the last writer wins.

    Args:
        settings: Cache directory, upstream URL, freshness threshold and clock.
        client: Optional shared httpx.AsyncClient. If not provided, each fetch
            uses a short-lived client.
    """

    def __init__(self, settings: ProxySettings, client: httpx.AsyncClient | None = None) -> None:
        self.settings = settings
        self.client = client
        self._inflight = KeyedLocks()

    async def resolve_and_serve(self, intent: RequestIntent) -> BinaryIO:
        """Return an open handle to the PDF for the requested date.

        Raises:
            ZastepstwaError: A subclass describing why nothing can be served.
        """
        now = self.settings.clock()
        if isinstance(intent, ExplicitIntent):
            logger.info("Incoming request", extra={"day": intent.day, "month": intent.month})
        else:
            logger.info("Incoming request", extra={"when": intent.token})

        try:
            date = resolve_date(intent, now=now)
        except ZastepstwaError as exc:
            logger.warning("Rejected request", extra={"reason": str(exc)})
            raise

        async with self._inflight.hold(date):
            path = await self._ensure_cached(date)
            return await self._open(path)

    async def serve_cached_file(self, filename: str) -> BinaryIO:
        """Open a file already present in the cache directory.

        No date validation or freshness check is done. Names that escape the
        cache directory are reported as missing.

        Raises:
            CacheIOError: If the file cannot be opened (``missing`` when absent).
        """
        cache_dir = self.settings.cache_dir.resolve()
        path = (cache_dir / filename).resolve()
        if path.parent != cache_dir:
            raise CacheIOError("open", path, missing=True)
        return await self._open(path)

    async def _ensure_cached(self, date: str) -> Path:
        cached = await lookup(
            date,
            cache_dir=self.settings.cache_dir,
            max_age_seconds=self.settings.max_age_seconds,
            now=self.settings.clock(),
        )
        if cached.state is CacheState.FRESH:
            logger.info("Returning cached data", extra={"date": date})
            return cached.path
        if cached.state is CacheState.STALE:
            logger.info("Deleting old cached data", extra={"date": date, "age_seconds": cached.age_seconds})
            try:
                await evict(cached.path)
            except CacheIOError as exc:
                _log_cache_error(exc)
                raise

        logger.info("Getting data", extra={"date": date})
        outcome = await fetch_schedule(
            date,
            base_url=self.settings.upstream_url,
            client=self.client,
            timeout_s=self.settings.fetch_timeout_s,
            user_agent=self.settings.user_agent,
        )
        if isinstance(outcome, UpstreamSuccess):
            try:
                return await store(date, outcome.content, cache_dir=self.settings.cache_dir)
            except CacheIOError as exc:
                _log_cache_error(exc)
                raise
        if isinstance(outcome, UpstreamNotFound):
            logger.warning("No data for date", extra={"date": date})
            raise NoSubstitutionsForDateError(date)
        if isinstance(outcome, UpstreamStatusError):
            logger.error("Server returned an unknown status code", extra={"status_code": outcome.status_code})
            raise UnknownUpstreamStatusError(outcome.status_code)
        raise UpstreamUnreachableError(f"Upstream unreachable ({outcome.stage})") from outcome.cause

    async def _open(self, path: Path) -> BinaryIO:
        try:
            return await open_artifact(path)
        except CacheIOError as exc:
            if not exc.missing:
                _log_cache_error(exc)
            raise


def _log_cache_error(exc: CacheIOError) -> None:
    logger.error(
        "Cache operation failed",
        extra={"operation": exc.operation, "path": str(exc.path), "error": str(exc.__cause__)},
    )
