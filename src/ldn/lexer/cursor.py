"""Position-tracking byte cursor.

Wraps a byte sequence and keeps the zero-based line/column of the next byte
it will produce. Exhaustion is a normal terminal condition, reported as
``None`` from :meth:`PositionCursor.next`.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ldn.location import Position


class PositionCursor:
    """Byte iterator that tracks line and column as bytes are consumed.

    Usage:
            >>> cursor = PositionCursor(b"ab\\nc")
            >>> [cursor.next() for _ in range(3)]
            [97, 98, 10]
            >>> cursor.position
            Position(line=1, column=0)

    Thread Safety:
        Cursor instances are single-use. Create one per source buffer.

    """

    __slots__ = ("_iter", "_position")

    def __init__(self, data: bytes | Iterable[int]) -> None:
        self._iter: Iterator[int] = iter(data)
        self._position = Position()

    @property
    def position(self) -> Position:
        """Position of the byte about to be produced."""
        return self._position

    def next(self) -> int | None:
        """Consume and return the next byte, or None once exhausted."""
        byte = next(self._iter, None)
        if byte is not None:
            self._position = self._position.advanced(byte)
        return byte

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        byte = self.next()
        if byte is None:
            raise StopIteration
        return byte
