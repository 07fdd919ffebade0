"""Test setup for the substitution proxy."""

from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from tests.helpers import FRIDAY_NOON, UPSTREAM_URL, fixed_clock  # noqa: E402
from zastepstwa.config import ProxySettings  # noqa: E402


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for pytest.

    This allows running integration tests selectively:
        pytest -m integration       # run only integration tests
        pytest -m "not integration" # skip integration tests
    """
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (make real network calls)",
    )


@pytest.fixture
def now() -> datetime:
    return FRIDAY_NOON


@pytest.fixture
def settings(tmp_path: Path, now: datetime) -> ProxySettings:
    """Settings pointing at a temporary cache directory and a fixed clock."""
    return ProxySettings(
        cache_dir=tmp_path,
        upstream_url=UPSTREAM_URL,
        max_age_seconds=600,
        language="pl",
        clock=fixed_clock(now),
    )
