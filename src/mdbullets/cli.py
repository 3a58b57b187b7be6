"""Root CLI group for mdbullets with global flags and command registration."""

from __future__ import annotations

import click
from pydantic import ValidationError

from mdbullets import __version__
from mdbullets.commands import register_commands
from mdbullets.commands._base import MdbGroup
from mdbullets.commands._context import AppContext
from mdbullets.config.settings import MdBulletsSettings


@click.group(
    cls=MdbGroup,
    invoke_without_command=True,
    examples="""\
  mdbullets render README.md
  mdbullets render notes.md --style ascii --width 80
  cat notes.md | mdbullets render -
  mdbullets --json styles""",
)
@click.version_option(version=__version__, prog_name="mdbullets")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """mdbullets — render markdown with depth-aware bullet styles."""
    try:
        settings = MdBulletsSettings.from_cli(
            config_path=config_path,
            json_output=json_output,
            verbose=verbose,
            log_json=log_json,
        )
    except ValidationError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}") from exc
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
