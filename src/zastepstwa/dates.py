"""Turn request intents into canonical ``DD.MM.YYYY`` dates."""

from __future__ import annotations

from datetime import datetime, timedelta

from zastepstwa.exceptions import (
    InvalidDateError,
    InvalidParameterError,
    NoLessonsWeekendError,
    NoSubstitutionsWeekendError,
)
from zastepstwa.schemas import ExplicitIntent, RequestIntent

CANONICAL_DATE_FORMAT = "%d.%m.%Y"

_FRIDAY = 4
_SATURDAY = 5
_SUNDAY = 6


def resolve_date(intent: RequestIntent, *, now: datetime) -> str:
    """Resolve a request intent to the canonical date used as the cache key.

    Args:
        intent: Explicit day/month or a relative token.
        now: Current local time; its year and timezone are used.

    Returns:
        The date formatted as ``DD.MM.YYYY``.

    Raises:
        InvalidDateError: Day above 31 or month above 12.
        InvalidParameterError: Unknown relative token.
        NoSubstitutionsWeekendError: ``tomorrow`` requested on Friday or Saturday.
        NoLessonsWeekendError: ``today`` requested on Saturday or Sunday.
    """
    if isinstance(intent, ExplicitIntent):
        return _resolve_explicit(intent.day, intent.month, now=now)
    return _resolve_relative(intent.token, now=now).strftime(CANONICAL_DATE_FORMAT)


def _resolve_explicit(day: int, month: int, *, now: datetime) -> str:
    # No calendar validation beyond the ranges: 31.02 is passed upstream as is.
    if day > 31 or month > 12:
        raise InvalidDateError(day, month)
    return f"{day:02d}.{month:02d}.{now.year}"


def _resolve_relative(token: str, *, now: datetime) -> datetime:
    weekday = now.weekday()
    if token == "tomorrow":
        if weekday == _FRIDAY:
            raise NoSubstitutionsWeekendError("saturday")
        if weekday == _SATURDAY:
            raise NoSubstitutionsWeekendError("sunday")
        return now + timedelta(days=1)
    if token == "today":
        if weekday == _SATURDAY:
            raise NoLessonsWeekendError("saturday")
        if weekday == _SUNDAY:
            raise NoLessonsWeekendError("sunday")
        return now
    raise InvalidParameterError(token)
