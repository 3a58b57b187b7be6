"""Rich Console factory and theme for mdbullets output.

Creates Console instances that render to a StringIO buffer so commands
and tests can capture rendered markdown as a string.  In non-TTY
environments (tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

MDB_THEME = Theme(
    {
        "markdown.item.bullet": "bold yellow",
        "mdb.style": "bold cyan",
        "mdb.glyph": "bold",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=MDB_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
