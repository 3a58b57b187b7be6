"""Named bullet styles selectable from config and the CLI."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mdbullets.domain.glyphs import BulletGlyph
from mdbullets.styles.bullets import GlyphBulletStyle, GlyphSequenceBulletStyle, automatic

if TYPE_CHECKING:
    from mdbullets.styles.bullets import BulletStyle

NAMED_STYLES: dict[str, BulletStyle] = {
    "automatic": automatic(),
    "ascii": GlyphSequenceBulletStyle.of("-", "*", "+"),
    "arrow": GlyphBulletStyle(BulletGlyph("→")),
    "hollow": GlyphSequenceBulletStyle.of("•", "◦", "▪"),
}


class UnknownStyleError(KeyError):
    """Raised when a style name is not registered."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        known = ", ".join(sorted(NAMED_STYLES))
        return f"Unknown bullet style {self.name!r} (known: {known})"


def resolve_style(name: str) -> BulletStyle:
    """Look up a named style, case-insensitively."""
    try:
        return NAMED_STYLES[name.strip().lower()]
    except KeyError:
        raise UnknownStyleError(name) from None
