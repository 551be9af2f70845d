"""Peekable tokenizer over a position-tracking cursor.

Adds one byte of lookahead and a "consume while" primitive on top of
PositionCursor. The parser pulls bytes on demand; there is no separate
token stream.

Thread Safety:
Tokenizer instances are single-use. Create one per source buffer.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Callable

from ldn.errors import Utf8Error
from ldn.lexer.cursor import PositionCursor
from ldn.location import Position, Span


class Tokenizer:
    """Byte tokenizer with single-byte lookahead.

    ``peek()`` memoizes the next byte in a single slot together with the
    position it was read from. Repeated peeks return the same byte and leave
    :attr:`position` unchanged; only :meth:`advance` clears the slot.

    Usage:
            >>> t = Tokenizer("foo bar")
            >>> t.consume_while(lambda b: b != 0x20)
            ('foo', Span(start=Position(line=0, column=0), end=Position(line=0, column=3)))
            >>> t.peek()
            32

    """

    __slots__ = ("_cursor", "_peeked", "_has_peeked", "_peeked_position")

    def __init__(self, source: str | bytes | PositionCursor) -> None:
        """Initialize tokenizer.

        Args:
            source: Text (encoded as UTF-8), raw bytes, or an existing cursor
        """
        if isinstance(source, PositionCursor):
            self._cursor = source
        elif isinstance(source, str):
            self._cursor = PositionCursor(source.encode("utf-8"))
        else:
            self._cursor = PositionCursor(source)
        self._peeked: int | None = None
        self._has_peeked = False
        self._peeked_position = Position()

    @property
    def position(self) -> Position:
        """Current position, taking a pending peek into account."""
        if self._has_peeked:
            return self._peeked_position
        return self._cursor.position

    def peek(self) -> int | None:
        """Return the next byte without consuming it (None at end of input)."""
        if not self._has_peeked:
            self._peeked_position = self._cursor.position
            self._peeked = self._cursor.next()
            self._has_peeked = True
        return self._peeked

    def advance(self) -> int | None:
        """Consume and return the next byte, resolving a pending peek first."""
        if self._has_peeked:
            self._has_peeked = False
            byte, self._peeked = self._peeked, None
            return byte
        return self._cursor.next()

    def consume_while(self, predicate: Callable[[int], bool]) -> tuple[str, Span]:
        """Consume bytes while ``predicate`` holds on the next byte.

        Stops at the first byte failing the predicate (left unconsumed) or at
        end of input.

        Returns:
            The consumed bytes decoded as text, and the span covering them.

        Raises:
            Utf8Error: The consumed bytes are not valid UTF-8.
        """
        start = self.position
        buf = bytearray()
        while True:
            byte = self.peek()
            if byte is None or not predicate(byte):
                break
            buf.append(byte)
            self.advance()

        token_span = Span(start, self.position)
        try:
            return buf.decode("utf-8"), token_span
        except UnicodeDecodeError as e:
            raise Utf8Error(token_span) from e
