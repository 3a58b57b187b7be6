"""Subcommand modules for mdbullets.

Provides register_commands() which uses deferred imports to keep
``mdbullets --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from mdbullets.commands.render import render
    from mdbullets.commands.styles import styles

    cli.add_command(render)
    cli.add_command(styles)
