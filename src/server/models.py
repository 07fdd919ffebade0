"""Pydantic models for API responses."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error payload returned instead of a PDF.

    Attributes
    ----------
    error : str
        Human-readable message from the active message table.

    """

    error: str = Field(..., description="Error message")
