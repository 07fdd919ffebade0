"""zastepstwa: caching proxy for daily schedule-substitution PDFs."""

from zastepstwa.config import ProxySettings
from zastepstwa.dates import resolve_date
from zastepstwa.exceptions import (
    CacheDirectoryError,
    CacheIOError,
    InvalidDateError,
    InvalidParameterError,
    NoLessonsWeekendError,
    NoSubstitutionsForDateError,
    NoSubstitutionsWeekendError,
    UnknownUpstreamStatusError,
    UpstreamUnreachableError,
    ZastepstwaError,
)
from zastepstwa.proxy import SubstitutionProxy
from zastepstwa.schemas import ExplicitIntent, RelativeIntent

__all__ = [
    "CacheDirectoryError",
    "CacheIOError",
    "ExplicitIntent",
    "InvalidDateError",
    "InvalidParameterError",
    "NoLessonsWeekendError",
    "NoSubstitutionsForDateError",
    "NoSubstitutionsWeekendError",
    "ProxySettings",
    "RelativeIntent",
    "SubstitutionProxy",
    "UnknownUpstreamStatusError",
    "UpstreamUnreachableError",
    "ZastepstwaError",
    "resolve_date",
]
