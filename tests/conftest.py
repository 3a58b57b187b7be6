"""Shared pytest fixtures and test helpers for mdbullets tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner
from rich.console import Console

from mdbullets.output.console import create_console, get_output


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def console() -> Console:
    """Colorless 60-column console backed by StringIO."""
    return create_console(no_color=True, width=60)


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer config and env vars out of every test."""
    monkeypatch.delenv("MDBULLETS_CONFIG", raising=False)
    monkeypatch.delenv("MDBULLETS_BULLETS__STYLE", raising=False)
    monkeypatch.delenv("MDBULLETS_BULLETS__TEXT_SCALE", raising=False)
    monkeypatch.delenv("MDBULLETS_RENDER__WIDTH", raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test (the CLI reconfigures it)."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    mdb = logging.getLogger("mdbullets")
    mdb_level = mdb.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    mdb.setLevel(mdb_level)


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Change CWD to a temp directory so config discovery finds nothing stray."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------

NESTED_LIST = """\
- alpha
  - beta
    - gamma
"""


def render_plain(console: Console, renderable: object) -> list[str]:
    """Print *renderable* and return its non-empty output lines."""
    console.print(renderable)
    return [line for line in get_output(console).splitlines() if line.strip()]
