"""Configuration for the server."""

from __future__ import annotations

import os

DEFAULT_HOST = "0.0.0.0"  # noqa: S104
DEFAULT_PORT = 9000

PDF_MEDIA_TYPE = "application/pdf"
STREAM_CHUNK_SIZE = 64 * 1024

HOST = os.getenv("HOST", DEFAULT_HOST)
PORT = int(os.getenv("PORT", str(DEFAULT_PORT)))
RELOAD = os.getenv("RELOAD", "false").lower() == "true"
