"""Tests for the CLI render helpers."""

from __future__ import annotations

from mdbullets.output.renderers import preview_glyphs, render_markdown, render_style_table
from mdbullets.styles.bullets import GlyphSequenceBulletStyle, automatic
from tests.conftest import NESTED_LIST


class TestRenderMarkdown:
    def test_default_style(self) -> None:
        output = render_markdown(NESTED_LIST, automatic(), width=40)
        lines = output.splitlines()
        assert lines[0].rstrip() == " • alpha"
        assert "◼" in lines[2]

    def test_named_style(self) -> None:
        style = GlyphSequenceBulletStyle.of("-", "*", "+")
        output = render_markdown(NESTED_LIST, style, width=40)
        stripped = [line.strip() for line in output.splitlines()]
        assert stripped == ["- alpha", "* beta", "+ gamma"]

    def test_scale(self) -> None:
        output = render_markdown("- x\n", automatic(), scale=2.0, width=40)
        assert output.rstrip() == "  •   x"

    def test_no_blank_line_around_list(self) -> None:
        output = render_markdown(NESTED_LIST, automatic(), width=40)
        assert not output.startswith("\n")
        assert not output.endswith("\n")
        assert output.splitlines()[0].strip() == "• alpha"

    def test_infinite_scale_uses_nominal_width(self) -> None:
        output = render_markdown("- x\n", automatic(), scale=float("inf"), width=40)
        assert output.rstrip() == " • x"

    def test_width_respected(self) -> None:
        output = render_markdown("- " + "word " * 20, automatic(), width=30)
        assert all(len(line) <= 30 for line in output.splitlines())

    def test_non_list_markdown_passes_through(self) -> None:
        output = render_markdown("# Title\n\nplain text\n", automatic())
        assert "Title" in output
        assert "plain text" in output


class TestPreviewGlyphs:
    def test_automatic(self) -> None:
        assert preview_glyphs(automatic()) == ["•", "•", "◼︎", "◼︎"]

    def test_levels(self) -> None:
        style = GlyphSequenceBulletStyle.of("a", "b")
        assert preview_glyphs(style, levels=3) == ["a", "b", "b"]


class TestRenderStyleTable:
    def test_lists_each_style(self) -> None:
        styles = {"automatic": automatic(), "ascii": GlyphSequenceBulletStyle.of("-", "*", "+")}
        output = render_style_table(styles)
        assert "automatic" in output
        assert "ascii" in output
        assert "Level 0" in output
        assert "Level 3" in output
