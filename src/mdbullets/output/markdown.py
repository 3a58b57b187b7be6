"""Rich Markdown with depth-aware unordered-list bullets.

Rich draws every unordered bullet as `` • ``.  :class:`BulletMarkdown`
swaps in list elements that remember how deeply each item is nested in
unordered lists, then ask the active bullet style for the item's label
when the list is rendered.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from rich.markdown import ListElement, ListItem
from rich.markdown import Markdown as RichMarkdown
from rich.measure import Measurement
from rich.segment import Segment

from mdbullets.styles.bullets import resolve_label

if TYPE_CHECKING:
    from markdown_it.token import Token
    from rich.console import Console, ConsoleOptions, RenderResult
    from rich.markdown import MarkdownContext, MarkdownElement

BULLET_LIST = "bullet_list_open"


class LeveledListElement(ListElement):
    """List element that hands unordered items to the bullet style."""

    @classmethod
    def create(cls, markdown: RichMarkdown, token: Token) -> LeveledListElement:
        return cls(token.type, int(token.attrs.get("start", 1)))

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        if self.list_type != BULLET_LIST:
            yield from super().__rich_console__(console, options)
            return
        for item in self.items:
            yield from item.render_bullet(console, options)


class LeveledListItem(ListItem):
    """List item that knows its unordered-list depth."""

    level: int = 0

    def on_enter(self, context: MarkdownContext) -> None:
        super().on_enter(context)
        self.level = unordered_depth(context.stack) - 1

    def render_bullet(self, console: Console, options: ConsoleOptions) -> RenderResult:
        label = resolve_label(self.level)
        label_width = Measurement.get(console, options, label).maximum
        label_width = max(1, min(label_width, options.max_width - 1))

        label_lines = console.render_lines(label, options.update(width=label_width), pad=True)
        content_width = options.max_width - label_width
        render_options = options.update(width=content_width)
        lines = console.render_lines(self.elements, render_options, style=self.style)

        bullet_style = console.get_style("markdown.item.bullet", default="none")
        padding = [Segment(" " * label_width, bullet_style)]
        blank = [Segment(" " * content_width, self.style)]
        new_line = Segment("\n")
        # A label taller than its item extends the item with blank lines.
        for index in range(max(len(lines), len(label_lines))):
            yield from label_lines[index] if index < len(label_lines) else padding
            yield from lines[index] if index < len(lines) else blank
            yield new_line


def unordered_depth(stack: list[MarkdownElement]) -> int:
    """Count the unordered lists open on a markdown element stack."""
    return sum(
        1
        for element in stack
        if isinstance(element, ListElement) and element.list_type == BULLET_LIST
    )


class BulletMarkdown(RichMarkdown):
    """Markdown renderer whose unordered bullets follow the active bullet style."""

    elements: ClassVar[dict[str, type[MarkdownElement]]] = {
        **RichMarkdown.elements,
        "bullet_list_open": LeveledListElement,
        "ordered_list_open": LeveledListElement,
        "list_item_open": LeveledListItem,
    }
