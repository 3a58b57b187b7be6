"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Configures logging and resolves the effective
render options from settings plus per-command flags.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from mdbullets.styles.registry import UnknownStyleError, resolve_style

if TYPE_CHECKING:
    from mdbullets.config.settings import MdBulletsSettings
    from mdbullets.styles.bullets import BulletStyle

logger = logging.getLogger(__name__)


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.
    """

    def __init__(self, settings: MdBulletsSettings) -> None:
        self.settings = settings

        from mdbullets.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        if settings.config_path:
            logger.debug("Loaded config from %s", settings.config_path)

    def style(self, name: str | None = None) -> BulletStyle:
        """Resolve *name* (or the configured default) to a bullet style.

        Raises:
            click.BadParameter: If the name is not a registered style.
        """
        chosen = name or self.settings.bullets.style
        try:
            return resolve_style(chosen)
        except UnknownStyleError as exc:
            raise click.BadParameter(str(exc), param_hint="'--style'") from exc
