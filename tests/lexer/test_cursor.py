"""Tests for the position-tracking byte cursor."""

from ldn.lexer import PositionCursor
from ldn.location import Position


def _drain(data: bytes) -> PositionCursor:
    cursor = PositionCursor(data)
    for _ in cursor:
        pass
    return cursor


class TestPositionCursor:
    """Line/column tracking while consuming bytes."""

    def test_empty(self) -> None:
        assert _drain(b"").position == Position(0, 0)

    def test_one_line(self) -> None:
        assert _drain(b"foo").position == Position(0, 3)

    def test_trailing_newline(self) -> None:
        assert _drain(b"foo\n").position == Position(1, 0)

    def test_two_lines(self) -> None:
        assert _drain(b"foo\nbar").position == Position(1, 3)

    def test_position_is_of_next_byte(self) -> None:
        cursor = PositionCursor(b"ab\nc")
        assert cursor.position == Position(0, 0)
        assert cursor.next() == ord("a")
        assert cursor.position == Position(0, 1)
        assert cursor.next() == ord("b")
        assert cursor.next() == ord("\n")
        assert cursor.position == Position(1, 0)
        assert cursor.next() == ord("c")
        assert cursor.position == Position(1, 1)

    def test_exhaustion_is_sticky(self) -> None:
        cursor = PositionCursor(b"x")
        assert cursor.next() == ord("x")
        assert cursor.next() is None
        assert cursor.next() is None
        assert cursor.position == Position(0, 1)

    def test_accepts_any_byte_iterable(self) -> None:
        cursor = PositionCursor(iter([0x61, 0x0A]))
        assert list(cursor) == [0x61, 0x0A]
        assert cursor.position == Position(1, 0)

    def test_columns_count_bytes(self) -> None:
        # "é" is two bytes in UTF-8
        assert _drain("é".encode()).position == Position(0, 2)
