"""Tests for Position and Span."""

import pytest

from ldn.location import Position, Span, span


class TestPosition:
    """Position construction, rendering and advancing."""

    def test_default_is_origin(self) -> None:
        assert Position() == Position(0, 0)

    def test_str_is_one_based(self) -> None:
        assert str(Position(0, 0)) == "1:1"
        assert str(Position(2, 7)) == "3:8"

    def test_advanced_by_regular_byte(self) -> None:
        assert Position(0, 3).advanced(ord("x")) == Position(0, 4)

    def test_advanced_by_newline(self) -> None:
        assert Position(4, 12).advanced(ord("\n")) == Position(5, 0)

    def test_carriage_return_is_not_a_newline(self) -> None:
        assert Position(0, 0).advanced(ord("\r")) == Position(0, 1)

    def test_ordering(self) -> None:
        assert Position(0, 9) < Position(1, 0)
        assert Position(1, 2) < Position(1, 3)

    def test_immutable(self) -> None:
        pos = Position(1, 1)
        with pytest.raises(AttributeError):
            pos.line = 2  # type: ignore[misc]


class TestSpan:
    """Span construction and rendering."""

    def test_default_span(self) -> None:
        assert Span.default() == Span(Position(0, 0), Position(0, 0))
        assert Span() == Span.default()

    def test_from_parts(self) -> None:
        s = Span.from_parts(0, 1, 2, 3)
        assert s.start == Position(0, 1)
        assert s.end == Position(2, 3)
        assert span(0, 1, 2, 3) == s

    def test_str_concatenates_positions(self) -> None:
        assert str(span(0, 0, 0, 2)) == "1:1:1:3"

    def test_at_is_empty(self) -> None:
        s = Span.at(Position(3, 4))
        assert s.is_empty
        assert s.start == s.end == Position(3, 4)

    def test_non_empty(self) -> None:
        assert not span(0, 0, 0, 1).is_empty

    def test_hashable(self) -> None:
        assert len({span(0, 0, 0, 1), span(0, 0, 0, 1), span(0, 0, 0, 2)}) == 2
