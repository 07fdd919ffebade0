"""Classified outcomes of a single upstream request."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Union


@dataclass(frozen=True)
class UpstreamSuccess:
    """Upstream answered 200 and the full body was read."""

    content: bytes


@dataclass(frozen=True)
class UpstreamNotFound:
    """Upstream answered 404: no PDF published for that date."""


@dataclass(frozen=True)
class UpstreamStatusError:
    """Upstream answered with any other status."""

    status_code: int


@dataclass(frozen=True)
class UpstreamTransportFailure:
    """The request failed before a status arrived, or the body read failed."""

    cause: Exception
    stage: Literal["request", "body"] = "request"


UpstreamOutcome = Union[UpstreamSuccess, UpstreamNotFound, UpstreamStatusError, UpstreamTransportFailure]
