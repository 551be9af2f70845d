"""Layout-preserving formatter for LDN documents.

Re-serializes a parsed tree, deciding line breaks and indentation from the
*source* line numbers of sibling items rather than from the width of what
has already been emitted. Formatting is therefore a pure function of the
tree and its spans.

Layout rules, applied between consecutive siblings ``prev`` and ``item``:
- At top level, two non-comment items are always separated by one blank line.
- Otherwise ``delta = item.start.line - prev.start.line``:
  - 0: a single space
  - 1 or more: a line feed; at top level a gap of more than one line keeps
    exactly one blank line, inside a list the line is indented by 4 spaces
    per nesting level.

Thread Safety:
Formatter instances hold only immutable settings; every format() call builds
its output in a fresh StringBuilder. Safe to share across threads.

"""

from __future__ import annotations

from collections.abc import Iterable

from ldn.nodes import (
    Comment,
    Document,
    Integer,
    Item,
    Keyword,
    List,
    String,
    Symbol,
)
from ldn.stringbuilder import StringBuilder
from ldn.utils.logger import get_logger

logger = get_logger(__name__)

INDENT_WIDTH = 4


def escape_string(value: str) -> str:
    """Escape a string value so that re-parsing yields the same value."""
    return value.replace('"', '\\"')


class Formatter:
    """Canonical pretty-printer for LDN trees.

    Usage:
            >>> from ldn import parse
            >>> Formatter().format(parse("(a\\n b)  c"))
            '(a\\n    b)\\n\\nc\\n'

    """

    __slots__ = ("_indent",)

    def __init__(self, indent: int = INDENT_WIDTH) -> None:
        """Initialize formatter.

        Args:
            indent: Spaces added per list nesting level
        """
        if indent < 0:
            msg = f"indent must be non-negative, got {indent}"
            raise ValueError(msg)
        self._indent = indent

    def format(self, document: Document | Iterable[Item]) -> str:
        """Format a document (or any top-level item sequence).

        The result always ends with a line feed and always re-parses.
        """
        items = document.items if isinstance(document, Document) else tuple(document)
        sb = StringBuilder()
        self._format_items(items, sb, top_level=True, lhs=0)
        logger.debug("formatted %d top-level items", len(items))
        return sb.build()

    def _format_items(
        self,
        items: Iterable[Item],
        sb: StringBuilder,
        *,
        top_level: bool,
        lhs: int,
    ) -> None:
        if not top_level:
            sb.append("(")

        prev: Item | None = None
        for item in items:
            if prev is not None:
                self._format_gap(prev, item, sb, top_level=top_level, lhs=lhs)
            self._format_item(item, sb, lhs)
            prev = item

        if top_level:
            sb.append("\n")
            return

        if prev is not None and prev.is_comment:
            # Keep the closing paren off the comment's line
            sb.append_newline(lhs - self._indent)
        sb.append(")")

    def _format_gap(
        self,
        prev: Item,
        item: Item,
        sb: StringBuilder,
        *,
        top_level: bool,
        lhs: int,
    ) -> None:
        """Emit the separator between two siblings."""
        if top_level and not prev.is_comment and not item.is_comment:
            delta = 2
        else:
            delta = max(item.span.start.line - prev.span.start.line, 0)
            if delta == 0 and prev.is_comment:
                delta = 1

        if delta == 0:
            sb.append(" ")
        elif top_level:
            sb.append("\n")
            if delta > 1:
                sb.append("\n")
        else:
            sb.append_newline(lhs)

    def _format_item(self, item: Item, sb: StringBuilder, lhs: int) -> None:
        match item:
            case Integer():
                sb.append(str(item.value))
            case Keyword():
                sb.append(":").append(item.name)
            case String():
                sb.append('"').append(escape_string(item.value)).append('"')
            case Symbol():
                sb.append(item.name)
            case Comment():
                sb.append(f"; {item.text}" if item.text else ";")
            case List():
                self._format_items(item.items, sb, top_level=False, lhs=lhs + self._indent)
            case _:
                msg = f"Cannot format node type: {type(item).__name__}"
                raise TypeError(msg)


def format_document(document: Document | Iterable[Item], *, indent: int = INDENT_WIDTH) -> str:
    """Format ``document`` with the canonical layout.

    Args:
        document: Parsed document (or a sequence of top-level items)
        indent: Spaces per list nesting level

    Returns:
        Formatted text, terminated by a line feed.
    """
    return Formatter(indent).format(document)
