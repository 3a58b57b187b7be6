"""Unordered-list bullet styles.

A bullet style turns a :class:`BulletConfiguration` (the item's nesting
level) into a Rich renderable.  The active style lives in the render
environment under :data:`BULLET_STYLE` and defaults to the automatic
style, which draws the depth's preferred glyph:

    • Element one
    • Element two
       • Element one
       • Element two
          ◼︎ Element one
          ◼︎ Element two
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Generator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel
from rich.cells import cell_len
from rich.measure import Measurement
from rich.segment import Segment

from mdbullets.domain.glyphs import BulletGlyph, preferred_glyph
from mdbullets.styles.environment import (
    TEXT_SCALE,
    EnvironmentKey,
    EnvironmentScope,
    EnvironmentValues,
    current_environment,
    environment_override,
    use_environment,
)

if TYPE_CHECKING:
    from rich.console import Console, ConsoleOptions, RenderableType, RenderResult

logger = logging.getLogger(__name__)

R = TypeVar("R")

# Matches the three-cell bullet column Rich draws for its own lists.
NOMINAL_RESERVED_WIDTH = 3


def scaled_width(base: int, scale: float) -> int:
    """Scale a nominal cell width by a text-scale factor, rounding up.

    A non-finite or non-positive *scale* leaves *base* unscaled.
    """
    if not math.isfinite(scale) or scale <= 0:
        return max(1, base)
    return max(1, math.ceil(base * scale))


# ── Label ────────────────────────────────────────────────────────────


class BulletLabel:
    """A glyph centred in a reserved minimum width.

    The reserved width is resolved at render time from the environment's
    text scale unless *reserved_width* pins it.  A glyph wider than the
    reservation widens the label instead of being cut.
    """

    def __init__(
        self,
        glyph: BulletGlyph,
        *,
        reserved_width: int | None = None,
        style: str = "markdown.item.bullet",
    ) -> None:
        self.glyph = glyph
        self.reserved_width = reserved_width
        self.style = style

    @property
    def width(self) -> int:
        reserved = self.reserved_width
        if reserved is None:
            reserved = scaled_width(NOMINAL_RESERVED_WIDTH, current_environment()[TEXT_SCALE])
        return max(reserved, cell_len(self.glyph.raw_value))

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        width = min(self.width, options.max_width)
        glyph_width = cell_len(self.glyph.raw_value)
        left = max(0, (width - glyph_width) // 2)
        right = max(0, width - glyph_width - left)
        style = console.get_style(self.style, default="none")
        yield Segment(" " * left + self.glyph.raw_value + " " * right, style)
        yield Segment.line()

    def __rich_measure__(self, console: Console, options: ConsoleOptions) -> Measurement:
        width = min(self.width, options.max_width)
        return Measurement(width, width)

    def __repr__(self) -> str:
        return f"BulletLabel({self.glyph.raw_value!r})"


# ── Configuration ────────────────────────────────────────────────────


class BulletConfiguration(BaseModel):
    """The properties of an unordered bullet element.

    Attributes:
        level: Zero-based nesting depth of the list item.
    """

    model_config = {"frozen": True}

    level: int

    @property
    def preferred_glyph(self) -> BulletGlyph:
        """The default glyph for this configuration's level."""
        return preferred_glyph(self.level)

    @property
    def label(self) -> BulletLabel:
        """The default bullet label: the preferred glyph in a reserved width."""
        return BulletLabel(self.preferred_glyph)


# ── Styles ───────────────────────────────────────────────────────────


@runtime_checkable
class BulletStyle(Protocol):
    """Anything that can draw a bullet for a configuration."""

    def make_label(self, configuration: BulletConfiguration) -> RenderableType: ...


@dataclass(frozen=True)
class AutomaticBulletStyle:
    """Draws each bullet with its level's preferred glyph."""

    def make_label(self, configuration: BulletConfiguration) -> RenderableType:
        return configuration.label


@dataclass(frozen=True)
class GlyphBulletStyle:
    """Draws the same glyph at every level."""

    glyph: BulletGlyph

    def make_label(self, configuration: BulletConfiguration) -> RenderableType:
        return BulletLabel(self.glyph)


@dataclass(frozen=True)
class GlyphSequenceBulletStyle:
    """Draws ``glyphs[level]``, repeating the last glyph for deeper levels.

    Negative levels use the first glyph.
    """

    glyphs: tuple[BulletGlyph, ...]

    def __post_init__(self) -> None:
        if not self.glyphs:
            raise ValueError("GlyphSequenceBulletStyle needs at least one glyph")
        object.__setattr__(self, "glyphs", tuple(self.glyphs))

    @classmethod
    def of(cls, *raw: str) -> GlyphSequenceBulletStyle:
        """Build a sequence style from raw glyph strings."""
        return cls(tuple(BulletGlyph(r) for r in raw))

    def glyph_for(self, level: int) -> BulletGlyph:
        index = min(max(level, 0), len(self.glyphs) - 1)
        return self.glyphs[index]

    def make_label(self, configuration: BulletConfiguration) -> RenderableType:
        return BulletLabel(self.glyph_for(configuration.level))


def automatic() -> AutomaticBulletStyle:
    """The default style: preferred glyph per level."""
    return AutomaticBulletStyle()


BULLET_STYLE: EnvironmentKey[BulletStyle] = EnvironmentKey(
    "markdown_unordered_list_bullet_style", AutomaticBulletStyle()
)


# ── Environment access ───────────────────────────────────────────────


def get_active_style(context: EnvironmentValues | None = None) -> BulletStyle:
    """Return the bullet style in effect for *context*.

    With no *context*, reads the environment bound for the current render.
    Falls back to the automatic style when no scope set one.
    """
    if context is None:
        context = current_environment()
    return context[BULLET_STYLE]


def with_bullet_style(
    context: EnvironmentValues | None,
    style: BulletStyle,
    body: Callable[[EnvironmentValues], R],
) -> R:
    """Run *body* with *style* as the active bullet style.

    *body* receives the child environment, which is also bound as the
    current environment until it returns.  *context* is left untouched and
    the previous binding is restored on exit, even if *body* raises.
    """
    parent = current_environment() if context is None else context
    child = parent.updating(BULLET_STYLE, style)
    logger.debug("Bullet style scope: %s", type(style).__name__)
    with use_environment(child):
        return body(child)


@contextmanager
def bullet_style(style: BulletStyle) -> Generator[EnvironmentValues]:
    """Make *style* the active bullet style for the ``with`` body."""
    with environment_override(BULLET_STYLE, style) as values:
        yield values


def markdown_bullet_style(renderable: RenderableType, style: BulletStyle) -> EnvironmentScope:
    """Apply *style* to the bullets of *renderable* and everything inside it."""
    return EnvironmentScope(renderable, BULLET_STYLE, style)


def resolve_label(level: int, context: EnvironmentValues | None = None) -> RenderableType:
    """Ask the active style for the label of a bullet at *level*."""
    style = get_active_style(context)
    logger.debug("Bullet label: level=%d style=%s", level, type(style).__name__)
    return style.make_label(BulletConfiguration(level=level))
