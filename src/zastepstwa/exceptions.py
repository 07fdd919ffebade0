"""Custom exceptions for the substitution proxy."""

from __future__ import annotations

from pathlib import Path
from typing import Any, ClassVar, Mapping

from zastepstwa.messages import render_message


class ZastepstwaError(Exception):
    """Base exception for proxy operations.

    Subclasses name the message table entry shown to the client and the
    HTTP status the server answers with.
    """

    message_key: str = "cache_io"
    status_code: ClassVar[int] = 500

    def message_params(self) -> dict[str, Any]:
        return {}

    def user_message(self, messages: Mapping[str, str]) -> str:
        """Render the client-facing message from a message table."""
        return render_message(messages, self.message_key, **self.message_params())


class InvalidDateError(ZastepstwaError):
    """Explicit day or month is out of range."""

    message_key = "invalid_date"
    status_code = 400

    def __init__(self, day: int, month: int) -> None:
        super().__init__(f"Invalid date: {day}/{month}")
        self.day = day
        self.month = month


class InvalidParameterError(ZastepstwaError):
    """Relative token is not one of the supported values."""

    message_key = "invalid_parameter"
    status_code = 400

    def __init__(self, token: str) -> None:
        super().__init__(f"Invalid parameter for when: {token!r}")
        self.token = token


class NoSubstitutionsWeekendError(ZastepstwaError):
    """Tomorrow falls on a weekend, so no substitutions are published."""

    status_code = 404

    def __init__(self, weekday: str) -> None:
        super().__init__(f"Tomorrow is {weekday}")
        self.weekday = weekday
        self.message_key = f"no_substitutions_weekend.{weekday}"


class NoLessonsWeekendError(ZastepstwaError):
    """Today is a weekend day."""

    status_code = 404

    def __init__(self, weekday: str) -> None:
        super().__init__(f"Today is {weekday}")
        self.weekday = weekday
        self.message_key = f"no_lessons_weekend.{weekday}"


class NoSubstitutionsForDateError(ZastepstwaError):
    """Upstream has no PDF for the requested date."""

    message_key = "no_substitutions_for_date"
    status_code = 404

    def __init__(self, date: str) -> None:
        super().__init__(f"No data for {date}")
        self.date = date

    def message_params(self) -> dict[str, Any]:
        return {"date": self.date}


class UnknownUpstreamStatusError(ZastepstwaError):
    """Upstream answered with a status other than 200 or 404."""

    message_key = "unknown_upstream_status"
    status_code = 502

    def __init__(self, upstream_status: int) -> None:
        super().__init__(f"Server returned a {upstream_status} status code")
        self.upstream_status = upstream_status

    def message_params(self) -> dict[str, Any]:
        return {"status_code": self.upstream_status}


class UpstreamUnreachableError(ZastepstwaError):
    """Upstream could not be reached or the body could not be read."""

    message_key = "upstream_unreachable"
    status_code = 503


# Error numbers shown to clients, one per failing filesystem operation.
CACHE_ERROR_CODES: dict[str, int] = {
    "create": 1,
    "write": 3,
    "open": 4,
    "stat": 5,
    "delete": 6,
}


class CacheIOError(ZastepstwaError):
    """A local filesystem operation on the cache failed.

    ``operation`` is one of the keys of ``CACHE_ERROR_CODES``; it is logged
    and surfaces to clients only as an error number.
    """

    message_key = "cache_io"
    status_code = 500

    def __init__(self, operation: str, path: Path, *, missing: bool = False) -> None:
        super().__init__(f"Cache {operation} failed for {path}")
        self.operation = operation
        self.path = path
        self.missing = missing

    def message_params(self) -> dict[str, Any]:
        return {"code": CACHE_ERROR_CODES.get(self.operation, 0)}


class CacheDirectoryError(ZastepstwaError):
    """The cache directory cannot be created or written. Fatal at startup."""
