"""FastAPI application for the substitution proxy."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from server.models import ErrorResponse
from server.routers import substitutions
from zastepstwa.cache_utils import ensure_cache_dir
from zastepstwa.config import ProxySettings
from zastepstwa.exceptions import CacheIOError, ZastepstwaError
from zastepstwa.http_utils import build_http_client
from zastepstwa.messages import get_messages, render_message
from zastepstwa.proxy import SubstitutionProxy
from zastepstwa.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def create_app(settings: ProxySettings | None = None, client: httpx.AsyncClient | None = None) -> FastAPI:
    """Build the application.

    Parameters
    ----------
    settings : ProxySettings | None
        Proxy configuration; defaults come from the environment.
    client : httpx.AsyncClient | None
        Upstream client to use. When omitted, one is created on startup and
        closed on shutdown.

    Returns
    -------
    FastAPI
        The configured application.

    """
    settings = settings or ProxySettings()
    messages = get_messages(settings.language)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        configure_logging()
        # An unusable cache directory aborts startup instead of failing every request.
        ensure_cache_dir(settings.cache_dir)
        logger.info("Cache directory ready", extra={"cache_dir": str(settings.cache_dir)})

        owned_client = client is None
        http_client = client or build_http_client(
            timeout_s=settings.fetch_timeout_s,
            user_agent=settings.user_agent,
        )
        app.state.proxy = SubstitutionProxy(settings, client=http_client)
        try:
            yield
        finally:
            if owned_client:
                await http_client.aclose()

    app = FastAPI(title="zastepstwa", lifespan=lifespan)
    app.state.settings = settings
    app.state.messages = messages

    @app.exception_handler(ZastepstwaError)
    async def proxy_error_handler(request: Request, exc: ZastepstwaError) -> JSONResponse:  # noqa: ARG001
        if isinstance(exc, CacheIOError) and exc.missing:
            payload = ErrorResponse(error=render_message(messages, "file_not_found"))
            return JSONResponse(payload.model_dump(), status_code=404)
        payload = ErrorResponse(error=exc.user_message(messages))
        return JSONResponse(payload.model_dump(), status_code=exc.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def not_found_handler(request: Request, exc: StarletteHTTPException) -> Response:
        if exc.status_code == 404:
            return PlainTextResponse(render_message(messages, "not_found"), status_code=404)
        return await http_exception_handler(request, exc)

    app.include_router(substitutions.router)
    return app


app = create_app()
