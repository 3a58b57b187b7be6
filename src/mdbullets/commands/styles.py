"""Command: list the named bullet styles."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from mdbullets.commands._base import MdbCommand

if TYPE_CHECKING:
    from mdbullets.commands._context import AppContext


@click.command(
    cls=MdbCommand,
    examples="""\
  mdbullets styles
  mdbullets styles --levels 6
  mdbullets --json styles""",
)
@click.option("--levels", type=click.IntRange(min=1), default=4, help="Levels to preview.")
@click.pass_obj
def styles(app: AppContext, levels: int) -> None:
    """List named bullet styles with the glyph drawn at each level."""
    from mdbullets.output.renderers import preview_glyphs, render_style_table
    from mdbullets.styles.registry import NAMED_STYLES

    if app.settings.json_output:
        payload = {name: preview_glyphs(style, levels) for name, style in NAMED_STYLES.items()}
        click.echo(json.dumps(payload, ensure_ascii=False, indent=2))
        return
    click.echo(render_style_table(NAMED_STYLES, levels=levels))
