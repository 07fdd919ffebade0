"""Request intents: what date a client asked for."""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict, Field


class ExplicitIntent(BaseModel):
    """A date given as day and month of the current year.

    Values arrive as unsigned bytes; calendar range checks belong to the
    date resolver so out-of-range input gets the domain error message.
    """

    model_config = ConfigDict(frozen=True)

    day: int = Field(..., ge=0, le=255)
    month: int = Field(..., ge=0, le=255)


class RelativeIntent(BaseModel):
    """A date given relative to now (``today`` or ``tomorrow``)."""

    model_config = ConfigDict(frozen=True)

    token: str


RequestIntent = Union[ExplicitIntent, RelativeIntent]
