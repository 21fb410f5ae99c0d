"""
Shared pytest fixtures for kasos-docs tests.

This module provides:
- A temporary documentation root with a partials directory
- A helper to write partials with a chosen modification time
- A fixed clock for the daily updater
- Logging and settings cleanup for test isolation
"""

import os
from collections.abc import Callable, Generator
from datetime import UTC, datetime
from pathlib import Path

import pytest
import structlog

from kasos_docs.core.settings import clear_settings_cache
from kasos_docs.site.repository import SiteRepository


# =============================================================================
# Test Markers Configuration
# =============================================================================


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Auto-mark tests based on their location."""
    for item in items:
        test_path = Path(item.fspath).relative_to(Path(__file__).parent)

        if test_path.parts[0] == "cli":
            item.add_marker(pytest.mark.cli)

        markers = {mark.name for mark in item.iter_markers()}
        if not markers.intersection({"unit", "cli"}):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Isolation Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_logging_and_settings() -> Generator[None, None, None]:
    """
    Reset structlog and the settings cache around each test.

    The CLIs configure structlog against the runner's stderr, which is closed
    once the invocation returns.
    """
    structlog.reset_defaults()
    clear_settings_cache()
    yield
    structlog.reset_defaults()
    clear_settings_cache()


# =============================================================================
# Documentation Root Fixtures
# =============================================================================

FIXED_NOW = datetime(2025, 7, 2, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """Empty documentation root with a partials/ directory."""
    (tmp_path / "partials").mkdir()
    return tmp_path


@pytest.fixture
def repo(site_root: Path) -> SiteRepository:
    return SiteRepository(site_root)


@pytest.fixture
def write_partial(site_root: Path) -> Callable[..., Path]:
    """
    Write ``partials/<topic>.html``.

    Usage:
        write_partial("terminal", "<p>T</p>")
        write_partial("old", "<p>O</p>", modified=FIXED_NOW - timedelta(days=3))
    """

    def _write(topic: str, content: str, *, modified: datetime | None = None) -> Path:
        path = site_root / "partials" / f"{topic}.html"
        path.write_text(content, encoding="utf-8")
        if modified is not None:
            ts = modified.timestamp()
            os.utime(path, (ts, ts))
        return path

    return _write


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    return lambda: FIXED_NOW
