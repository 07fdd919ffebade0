"""Shared helpers for proxy tests."""

from __future__ import annotations

import os
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Callable

import httpx

# Friday 15 March 2024, noon UTC. The rest of that week:
# Mon 11, Tue 12, Wed 13, Thu 14, Sat 16, Sun 17.
FRIDAY_NOON = datetime(2024, 3, 15, 12, 0, tzinfo=timezone.utc)

UPSTREAM_URL = "https://upstream.test"

PDF_BYTES = b"%PDF-1.4\n% substitutions\n%%EOF\n"


def fixed_clock(moment: datetime) -> Callable[[], datetime]:
    """Return a clock that always reports ``moment``."""
    return lambda: moment


def set_age(path: Path, now: datetime, minutes: float) -> None:
    """Backdate ``path`` so it is ``minutes`` old relative to ``now``."""
    stamp = (now - timedelta(minutes=minutes)).timestamp()
    os.utime(path, (stamp, stamp))


def mock_client(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
    """Build an AsyncClient whose requests are answered by ``handler``."""
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class RecordingUpstream:
    """MockTransport handler that answers every request the same way and records URLs."""

    def __init__(self, status_code: int = 200, content: bytes = PDF_BYTES) -> None:
        self.status_code = status_code
        self.content = content
        self.urls: list[str] = []

    @property
    def calls(self) -> int:
        return len(self.urls)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.urls.append(str(request.url))
        return httpx.Response(self.status_code, content=self.content)
