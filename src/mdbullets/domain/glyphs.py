"""Bullet glyph values and the default depth mapping.

Three named glyphs, one per default depth band:

    • level 0 (filled circle)
    • level 1 (outline circle)
    ◼︎ level 2 and deeper (square)

NOTE: ``OUTLINE_CIRCLE`` deliberately shares the filled circle's glyph.
Renderers that depended on the historical output keep it; the ``hollow``
named style offers a distinct ``◦`` for level 1 instead.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BulletGlyph:
    """A single bullet display string.

    Any string is accepted, including empty and multi-character ones.
    Equality and hashing follow ``raw_value``.
    """

    raw_value: str

    def __str__(self) -> str:
        return self.raw_value


FILLED_CIRCLE = BulletGlyph("•")
OUTLINE_CIRCLE = BulletGlyph("•")
SQUARE = BulletGlyph("◼︎")


def preferred_glyph(level: int) -> BulletGlyph:
    """Return the default glyph for an indentation *level*.

    Total over all integers: anything other than 0 or 1, negative
    values included, maps to ``SQUARE``.
    """
    if level == 0:
        return FILLED_CIRCLE
    if level == 1:
        return OUTLINE_CIRCLE
    return SQUARE
