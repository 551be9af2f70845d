"""Tests for the peekable tokenizer."""

import pytest

from ldn.errors import Utf8Error
from ldn.lexer import PositionCursor, Tokenizer
from ldn.location import Position, Span, span

SPACE = ord(" ")


class TestConsumeWhile:
    """consume_while() returns decoded text and the covering span."""

    def test_empty_input(self) -> None:
        t = Tokenizer("")
        assert t.consume_while(lambda _: True) == ("", Span.default())
        assert t.position == Position()

    def test_everything(self) -> None:
        t = Tokenizer("foo bar")
        assert t.consume_while(lambda _: True) == ("foo bar", span(0, 0, 0, 7))
        assert t.position == Position(0, 7)

    def test_nothing(self) -> None:
        t = Tokenizer("foo bar")
        assert t.consume_while(lambda _: False) == ("", Span.default())
        assert t.position == Position()

    def test_words(self) -> None:
        t = Tokenizer("foo bar")

        assert t.consume_while(lambda b: b != SPACE) == ("foo", span(0, 0, 0, 3))
        assert t.position == Position(0, 3)

        assert t.advance() == SPACE
        assert t.position == Position(0, 4)

        assert t.consume_while(lambda b: b != SPACE) == ("bar", span(0, 4, 0, 7))
        assert t.position == Position(0, 7)

        assert t.advance() is None
        assert t.position == Position(0, 7)

    def test_stops_before_failing_byte(self) -> None:
        t = Tokenizer("ab)")
        t.consume_while(lambda b: b != ord(")"))
        assert t.peek() == ord(")")

    def test_multiline_span(self) -> None:
        t = Tokenizer("foo\nbar\"")
        assert t.consume_while(lambda b: b != ord('"')) == ("foo\nbar", span(0, 0, 1, 3))

    def test_multibyte_text(self) -> None:
        t = Tokenizer("héllo")
        assert t.consume_while(lambda _: True) == ("héllo", span(0, 0, 0, 6))

    def test_invalid_utf8(self) -> None:
        t = Tokenizer(b"\xff\xfe")
        with pytest.raises(Utf8Error) as exc_info:
            t.consume_while(lambda _: True)
        assert exc_info.value.span == span(0, 0, 0, 2)


class TestPeek:
    """peek() is memoized and never moves the reported position."""

    def test_empty(self) -> None:
        t = Tokenizer("")
        assert t.peek() is None
        assert t.position == Position()
        assert t.advance() is None
        assert t.position == Position()

    def test_repeated_peeks(self) -> None:
        t = Tokenizer("foo")

        assert t.peek() == ord("f")
        assert t.position == Position()
        assert t.peek() == ord("f")
        assert t.position == Position()

        assert t.advance() == ord("f")
        assert t.advance() == ord("o")
        assert t.position == Position(0, 2)

        assert t.peek() == ord("o")
        assert t.position == Position(0, 2)

        assert t.advance() == ord("o")
        assert t.position == Position(0, 3)

        assert t.advance() is None
        assert t.position == Position(0, 3)

    def test_peek_newline_reports_its_own_position(self) -> None:
        t = Tokenizer("a\nb")
        t.advance()
        assert t.peek() == ord("\n")
        assert t.position == Position(0, 1)
        t.advance()
        assert t.position == Position(1, 0)


class TestAdvance:
    """advance() without peeking."""

    def test_advance_all(self) -> None:
        t = Tokenizer("foo")
        assert [t.advance() for _ in range(4)] == [ord("f"), ord("o"), ord("o"), None]
        assert t.position == Position(0, 3)

    def test_wraps_existing_cursor(self) -> None:
        cursor = PositionCursor(b"xy")
        t = Tokenizer(cursor)
        assert t.advance() == ord("x")
        assert t.position == Position(0, 1)

    def test_accepts_bytes(self) -> None:
        t = Tokenizer(b"z")
        assert t.peek() == ord("z")
