"""Shared test fixtures for prowl."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from prowl.config import LoaderConfig
from prowl.mount import RecordingApp

# Route module with a single ``GET /`` route
INDEX_ROUTE = (
    "from prowl import Router\n"
    "\n"
    "router = Router()\n"
    "\n"
    "@router.get('/')\n"
    "async def index(request):\n"
    "    return 'index'\n"
)


@pytest.fixture
def routes_dir(tmp_path: Path) -> Path:
    """Create a routes/ directory for testing."""
    d = tmp_path / "routes"
    d.mkdir()
    return d


@pytest.fixture
def app() -> RecordingApp:
    """A host app that only records what was mounted."""
    return RecordingApp()


@pytest.fixture
def config(routes_dir: Path) -> LoaderConfig:
    return LoaderConfig(routes_folder=routes_dir)


@pytest.fixture
def write_route(routes_dir: Path) -> Callable[..., Path]:
    """Return a helper that writes a route module under routes_dir.

    ``write_route("users/index.py")`` writes a module with a ``GET /`` route;
    pass *content* to write anything else.
    """

    def _write(name: str, content: str = INDEX_ROUTE) -> Path:
        p = routes_dir / name
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(content)
        return p

    return _write
