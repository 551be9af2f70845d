"""Source positions and spans for LDN documents.

Provides Position and Span dataclasses for tracking where every token and
tree node came from. Used by the tokenizer, parser, errors and diagnostics.

All coordinates are zero-based. Human-readable rendering (``str()``) is
one-based, which is what most editors expect on stdout/stderr.

Thread Safety:
Position and Span are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass, field

NEWLINE = 0x0A


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """Zero-based line/column coordinate.

    Attributes:
        line: Line offset (0 for the first line)
        column: Byte offset within the line

    Examples:
        >>> Position(0, 4)
        Position(line=0, column=4)
        >>> str(Position(0, 4))
        '1:5'

    """

    line: int = 0
    column: int = 0

    def __str__(self) -> str:
        return f"{self.line + 1}:{self.column + 1}"

    def advanced(self, byte: int) -> Position:
        """Return the position after consuming ``byte``.

        A line feed moves to column 0 of the next line; any other byte moves
        one column to the right.
        """
        if byte == NEWLINE:
            return Position(self.line + 1, 0)
        return Position(self.line, self.column + 1)


@dataclass(frozen=True, slots=True)
class Span:
    """Range of source covered by a token or node.

    ``start`` is the position recorded before the production began, ``end``
    is the position after its last consumed byte (exclusive).

    Attributes:
        start: First position covered
        end: Position just past the last consumed byte

    """

    start: Position = field(default_factory=Position)
    end: Position = field(default_factory=Position)

    def __str__(self) -> str:
        # Renders as "a:b:c:d", piggy-backing on Position.__str__
        return f"{self.start}:{self.end}"

    @classmethod
    def default(cls) -> Span:
        """Empty span at the start of the document."""
        return cls()

    @classmethod
    def at(cls, position: Position) -> Span:
        """Empty span located at a single point."""
        return cls(position, position)

    @classmethod
    def from_parts(
        cls,
        start_line: int,
        start_column: int,
        end_line: int,
        end_column: int,
    ) -> Span:
        """Create a span from raw zero-based offsets."""
        return cls(Position(start_line, start_column), Position(end_line, end_column))

    @property
    def is_empty(self) -> bool:
        return self.start == self.end


def span(start_line: int, start_column: int, end_line: int, end_column: int) -> Span:
    """Shorthand for :meth:`Span.from_parts`."""
    return Span.from_parts(start_line, start_column, end_line, end_column)
