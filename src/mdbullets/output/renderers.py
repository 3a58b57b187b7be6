"""Render helpers used by the CLI.

Each renderer writes to a Rich Console (backed by StringIO) and returns
the captured text via ``get_output(console)``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.table import Table

from mdbullets.output.console import create_console, get_output
from mdbullets.output.markdown import BulletMarkdown
from mdbullets.styles.bullets import BulletConfiguration, markdown_bullet_style
from mdbullets.styles.environment import text_scale

if TYPE_CHECKING:
    from collections.abc import Mapping

    from rich.console import Console, RenderableType

    from mdbullets.styles.bullets import BulletStyle

PREVIEW_LEVELS = 4


# ── Public API ────────────────────────────────────────────────────────


def render_markdown(
    markup: str,
    style: BulletStyle,
    *,
    scale: float = 1.0,
    width: int | None = None,
    code_theme: str = "monokai",
    hyperlinks: bool = True,
) -> str:
    """Render markdown with *style* applied to every unordered bullet."""
    console = create_console(width=width)
    document = BulletMarkdown(markup, code_theme=code_theme, hyperlinks=hyperlinks)
    console.print(markdown_bullet_style(text_scale(document, scale), style))
    return get_output(console).strip("\n")


def preview_glyphs(style: BulletStyle, levels: int = PREVIEW_LEVELS) -> list[str]:
    """Plain text of the labels *style* draws for levels ``0..levels-1``."""
    console = create_console(no_color=True)
    return [
        _plain(console, style.make_label(BulletConfiguration(level=level)))
        for level in range(levels)
    ]


def render_style_table(
    styles: Mapping[str, BulletStyle],
    *,
    levels: int = PREVIEW_LEVELS,
) -> str:
    """Render a table of named styles and the glyph each draws per level."""
    console = create_console()
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Style", style="mdb.style", no_wrap=True)
    for level in range(levels):
        table.add_column(f"Level {level}", style="mdb.glyph", justify="center")

    for name, style in styles.items():
        table.add_row(name, *preview_glyphs(style, levels))

    console.print(table)
    return get_output(console).rstrip("\n")


# ── Helpers ───────────────────────────────────────────────────────────


def _plain(console: Console, renderable: RenderableType) -> str:
    """Render *renderable* and return its text without padding."""
    segments = console.render(renderable, console.options)
    return "".join(segment.text for segment in segments).strip()
