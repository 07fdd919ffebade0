"""HTTP utilities for fetching substitution PDFs from the upstream origin."""

from __future__ import annotations

from typing import Final

import httpx

from zastepstwa.config import (
    ZASTEPSTWA_FETCH_TIMEOUT_S,
    ZASTEPSTWA_UPSTREAM_URL,
    ZASTEPSTWA_USER_AGENT,
)
from zastepstwa.schemas import (
    UpstreamNotFound,
    UpstreamOutcome,
    UpstreamStatusError,
    UpstreamSuccess,
    UpstreamTransportFailure,
)
from zastepstwa.utils.logging_config import get_logger

logger = get_logger(__name__)

_MAX_REDIRECTS: Final[int] = 5


def upstream_url_for(date: str, base_url: str = ZASTEPSTWA_UPSTREAM_URL) -> str:
    """Return the upstream URL of the PDF for a canonical date."""
    return f"{base_url.rstrip('/')}/pliki/{date}.pdf"


def build_http_client(
    *,
    timeout_s: float = ZASTEPSTWA_FETCH_TIMEOUT_S,
    user_agent: str = ZASTEPSTWA_USER_AGENT,
) -> httpx.AsyncClient:
    """Create the AsyncClient used for upstream requests."""
    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout_s),
        headers={"User-Agent": user_agent},
        follow_redirects=True,
        max_redirects=_MAX_REDIRECTS,
    )


async def fetch_schedule(
    date: str,
    *,
    base_url: str = ZASTEPSTWA_UPSTREAM_URL,
    client: httpx.AsyncClient | None = None,
    timeout_s: float = ZASTEPSTWA_FETCH_TIMEOUT_S,
    user_agent: str = ZASTEPSTWA_USER_AGENT,
) -> UpstreamOutcome:
    """Request the PDF for ``date`` exactly once and classify the response.

    Args:
        date: Canonical date (``DD.MM.YYYY``).
        base_url: Upstream origin.
        client: Optional httpx.AsyncClient for connection pooling. If not
            provided, a new client is created for this request.
        timeout_s: Timeout for a newly created client.
        user_agent: User-Agent for a newly created client.

    Returns:
        ``UpstreamSuccess`` on 200 with a readable body, ``UpstreamNotFound``
        on 404, ``UpstreamStatusError`` on any other status and
        ``UpstreamTransportFailure`` when the network fails.
    """
    url = upstream_url_for(date, base_url)

    if client is not None:
        return await _fetch_once(client, url)

    async with build_http_client(timeout_s=timeout_s, user_agent=user_agent) as new_client:
        return await _fetch_once(new_client, url)


async def _fetch_once(client: httpx.AsyncClient, url: str) -> UpstreamOutcome:
    try:
        async with client.stream("GET", url) as response:
            if response.status_code == 404:
                return UpstreamNotFound()
            if response.status_code != 200:
                return UpstreamStatusError(status_code=response.status_code)
            try:
                content = await response.aread()
            except httpx.HTTPError as exc:
                logger.error("Error while downloading file", extra={"url": url, "error": str(exc)})
                return UpstreamTransportFailure(cause=exc, stage="body")
            return UpstreamSuccess(content=content)
    except httpx.HTTPError as exc:
        logger.error("Error while getting data", extra={"url": url, "error": str(exc)})
        return UpstreamTransportFailure(cause=exc, stage="request")
