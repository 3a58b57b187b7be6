"""Command: render a markdown document with a bullet style."""

from __future__ import annotations

import math
from typing import IO, TYPE_CHECKING

import click

from mdbullets.commands._base import MdbCommand
from mdbullets.config.models import MAX_TEXT_SCALE

if TYPE_CHECKING:
    from mdbullets.commands._context import AppContext


def _finite_scale(
    _ctx: click.Context, _param: click.Parameter, value: float | None
) -> float | None:
    if value is not None and math.isnan(value):
        raise click.BadParameter("must be a number, not nan.")
    return value


@click.command(
    cls=MdbCommand,
    examples="""\
  mdbullets render README.md
  mdbullets render notes.md --style hollow
  mdbullets render notes.md --text-scale 2 --width 60
  cat notes.md | mdbullets render -""",
)
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option("--style", "style_name", default=None, help="Named bullet style.")
@click.option(
    "--text-scale",
    type=click.FloatRange(min=0, max=MAX_TEXT_SCALE, min_open=True),
    default=None,
    callback=_finite_scale,
    help="Scale factor for the reserved bullet width.",
)
@click.option("--width", type=click.IntRange(min=10), default=None, help="Output width.")
@click.pass_obj
def render(
    app: AppContext,
    source: IO[str],
    style_name: str | None,
    text_scale: float | None,
    width: int | None,
) -> None:
    """Render markdown from SOURCE (a file, or - for stdin)."""
    from mdbullets.output.renderers import render_markdown

    style = app.style(style_name)
    config = app.settings
    output = render_markdown(
        source.read(),
        style,
        scale=text_scale if text_scale is not None else config.bullets.text_scale,
        width=width or config.render.width,
        code_theme=config.render.code_theme,
        hyperlinks=config.render.hyperlinks,
    )
    click.echo(output)
