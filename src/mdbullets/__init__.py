"""mdbullets — depth-aware bullet styles for Rich markdown rendering."""

from __future__ import annotations

from mdbullets.domain.glyphs import FILLED_CIRCLE, OUTLINE_CIRCLE, SQUARE, BulletGlyph
from mdbullets.output.markdown import BulletMarkdown
from mdbullets.styles.bullets import (
    AutomaticBulletStyle,
    BulletConfiguration,
    BulletLabel,
    BulletStyle,
    GlyphBulletStyle,
    GlyphSequenceBulletStyle,
    automatic,
    bullet_style,
    get_active_style,
    markdown_bullet_style,
    preferred_glyph,
    with_bullet_style,
)

__version__ = "0.3.0"

__all__ = [
    "FILLED_CIRCLE",
    "OUTLINE_CIRCLE",
    "SQUARE",
    "AutomaticBulletStyle",
    "BulletConfiguration",
    "BulletGlyph",
    "BulletLabel",
    "BulletMarkdown",
    "BulletStyle",
    "GlyphBulletStyle",
    "GlyphSequenceBulletStyle",
    "__version__",
    "automatic",
    "bullet_style",
    "get_active_style",
    "markdown_bullet_style",
    "preferred_glyph",
    "with_bullet_style",
]
