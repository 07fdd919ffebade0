"""Cache utilities for the date-keyed PDF cache directory."""

from __future__ import annotations

import asyncio
import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from typing import BinaryIO

from zastepstwa.exceptions import CacheDirectoryError, CacheIOError
from zastepstwa.schemas import CacheLookup, CacheState

ARTIFACT_SUFFIX = ".pdf"


def artifact_path(date: str, cache_dir: Path) -> Path:
    """Get the on-disk path of the cached PDF for a canonical date.

    Args:
        date: Canonical date (``DD.MM.YYYY``).
        cache_dir: The cache directory.

    Returns:
        Path to ``<cache_dir>/<date>.pdf``.
    """
    return cache_dir / f"{date}{ARTIFACT_SUFFIX}"


def file_age_seconds(path: Path, now: datetime) -> float:
    """Return how many seconds ago ``path`` was last modified.

    Args:
        path: Existing file.
        now: Timezone-aware current time.

    Raises:
        OSError: If the file metadata cannot be read.
    """
    mtime = datetime.fromtimestamp(path.stat().st_mtime, tz=timezone.utc)
    return (now - mtime).total_seconds()


def _lookup(date: str, cache_dir: Path, max_age_seconds: int, now: datetime) -> CacheLookup:
    path = artifact_path(date, cache_dir)
    try:
        age = file_age_seconds(path, now)
    except FileNotFoundError:
        return CacheLookup(state=CacheState.ABSENT, path=path)
    except OSError as exc:
        raise CacheIOError("stat", path) from exc
    state = CacheState.FRESH if age < max_age_seconds else CacheState.STALE
    return CacheLookup(state=state, path=path, age_seconds=age)


async def lookup(date: str, *, cache_dir: Path, max_age_seconds: int, now: datetime) -> CacheLookup:
    """Classify the cached artifact for ``date`` as fresh, stale or absent.

    Args:
        date: Canonical date.
        cache_dir: The cache directory.
        max_age_seconds: Files younger than this are fresh.
        now: Timezone-aware current time.

    Returns:
        The lookup result. A stale file must be evicted before refetching.

    Raises:
        CacheIOError: If the file exists but its metadata cannot be read.
    """
    return await asyncio.to_thread(_lookup, date, cache_dir, max_age_seconds, now)


def _evict(path: Path) -> None:
    try:
        path.unlink(missing_ok=True)
    except OSError as exc:
        raise CacheIOError("delete", path) from exc


async def evict(path: Path) -> None:
    """Delete a cached artifact. A file that is already gone counts as evicted.

    Raises:
        CacheIOError: If the file exists and cannot be deleted.
    """
    await asyncio.to_thread(_evict, path)


def _store(path: Path, content: bytes) -> Path:
    try:
        handle = path.open("wb")
    except OSError as exc:
        raise CacheIOError("create", path) from exc
    with handle:
        try:
            handle.write(content)
        except OSError as exc:
            raise CacheIOError("write", path) from exc
    return path


async def store(date: str, content: bytes, *, cache_dir: Path) -> Path:
    """Create (or overwrite) the cached artifact for ``date``.

    Args:
        date: Canonical date.
        content: PDF bytes from upstream.
        cache_dir: The cache directory.

    Returns:
        Path of the written file.

    Raises:
        CacheIOError: With ``operation`` ``"create"`` or ``"write"``.
    """
    return await asyncio.to_thread(_store, artifact_path(date, cache_dir), content)


def _open(path: Path) -> BinaryIO:
    try:
        return path.open("rb")
    except FileNotFoundError as exc:
        raise CacheIOError("open", path, missing=True) from exc
    except OSError as exc:
        raise CacheIOError("open", path) from exc


async def open_artifact(path: Path) -> BinaryIO:
    """Open a cached artifact for streaming back to the client.

    The caller owns the returned handle and must close it.

    Raises:
        CacheIOError: If the file cannot be opened; ``missing`` is set when it
            does not exist.
    """
    return await asyncio.to_thread(_open, path)


def ensure_cache_dir(path: Path) -> Path:
    """Create the cache directory if needed and check it is writable.

    Called once at startup; any failure here is fatal.

    Raises:
        CacheDirectoryError: If the directory cannot be created or written.
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
        fd, probe = tempfile.mkstemp(dir=path, prefix=".probe-")
        os.close(fd)
        os.unlink(probe)
    except OSError as exc:
        raise CacheDirectoryError(f"Cache directory {path} is not usable: {exc}") from exc
    return path
