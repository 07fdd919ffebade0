"""Substitution endpoints for the API."""

from __future__ import annotations

import os
from collections.abc import Iterator
from functools import partial
from pathlib import Path
from typing import BinaryIO

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import PlainTextResponse, StreamingResponse

from server.models import ErrorResponse
from server.server_config import PDF_MEDIA_TYPE, STREAM_CHUNK_SIZE
from zastepstwa.messages import render_message
from zastepstwa.proxy import SubstitutionProxy
from zastepstwa.schemas import ExplicitIntent, RelativeIntent

router = APIRouter()

PDF_RESPONSES = {
    200: {"content": {PDF_MEDIA_TYPE: {}}, "description": "Substitution PDF"},
    400: {"model": ErrorResponse, "description": "Invalid date or parameter"},
    404: {"model": ErrorResponse, "description": "No substitutions for the date"},
    500: {"model": ErrorResponse, "description": "Cache failure"},
    502: {"model": ErrorResponse, "description": "Unexpected upstream status"},
    503: {"model": ErrorResponse, "description": "Upstream unreachable"},
}


def get_proxy(request: Request) -> SubstitutionProxy:
    """Return the proxy created on application startup."""
    return request.app.state.proxy


def _iter_file(handle: BinaryIO) -> Iterator[bytes]:
    with handle:
        yield from iter(partial(handle.read, STREAM_CHUNK_SIZE), b"")


def _pdf_response(handle: BinaryIO) -> StreamingResponse:
    """Stream an open cached file back to the client and close it afterwards."""
    size = os.fstat(handle.fileno()).st_size
    name = Path(handle.name).name
    return StreamingResponse(
        _iter_file(handle),
        media_type=PDF_MEDIA_TYPE,
        headers={
            "Content-Length": str(size),
            "Content-Disposition": f'inline; filename="{name}"',
        },
    )


@router.get("/", responses=PDF_RESPONSES)
async def get_by_date(
    day: int = Query(..., ge=0, le=255),
    month: int = Query(..., ge=0, le=255),
    proxy: SubstitutionProxy = Depends(get_proxy),
) -> StreamingResponse:
    """Return the substitution PDF for ``day``.``month`` of the current year."""
    handle = await proxy.resolve_and_serve(ExplicitIntent(day=day, month=month))
    return _pdf_response(handle)


@router.get("/auto/", responses=PDF_RESPONSES)
async def get_relative(
    when: str = Query(...),
    proxy: SubstitutionProxy = Depends(get_proxy),
) -> StreamingResponse:
    """Return the substitution PDF for ``today`` or ``tomorrow``."""
    handle = await proxy.resolve_and_serve(RelativeIntent(token=when))
    return _pdf_response(handle)


@router.get("/files/{filename}", responses=PDF_RESPONSES)
async def get_cached_file(
    filename: str,
    proxy: SubstitutionProxy = Depends(get_proxy),
) -> StreamingResponse:
    """Serve a file already in the cache directory, e.g. ``/files/10.10.2022.pdf``."""
    handle = await proxy.serve_cached_file(filename)
    return _pdf_response(handle)


@router.get("/status/", response_class=PlainTextResponse)
async def status(request: Request) -> str:
    """Liveness text."""
    return render_message(request.app.state.messages, "status")
