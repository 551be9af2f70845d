"""Tests for editor diagnostics built from parse errors."""

import pytest

from ldn.diagnostics import SEVERITY_ERROR, check, span_to_range, to_diagnostic
from ldn.errors import ParseError
from ldn.location import span
from ldn.parser import Parser


def _error(source: str) -> ParseError:
    with pytest.raises(ParseError) as exc_info:
        Parser(source).parse()
    return exc_info.value


class TestCheck:
    def test_valid_source(self) -> None:
        assert check("(ok 1 :two)") == []

    def test_unbalanced(self) -> None:
        [diagnostic] = check("(1 2")
        point = {"line": 0, "character": 4}
        assert diagnostic["range"] == {"start": point, "end": point}
        assert diagnostic["severity"] == SEVERITY_ERROR
        assert diagnostic["source"] == "ldn"
        assert diagnostic["code"] == "UnbalancedParentheses"
        assert diagnostic["message"] == "Unbalanced parentheses"
        assert diagnostic["data"] == "1:5 unbalanced parentheses in list"

    def test_token_range(self) -> None:
        [diagnostic] = check("a\n  007")
        assert diagnostic["range"] == {
            "start": {"line": 1, "character": 2},
            "end": {"line": 1, "character": 5},
        }
        assert diagnostic["message"] == "Found leading zero while parsing integer constant"

    @pytest.mark.parametrize(
        ("source", "message"),
        [
            ("12a", "Invalid integer constant"),
            ("#", "Invalid character"),
            ("a.b", "Symbol parse error"),
            (")", "Unexpected closing parenthesis"),
            (b"\"\xff\"", "UTF-8 decode error"),
        ],
    )
    def test_messages(self, source: str | bytes, message: str) -> None:
        [diagnostic] = check(source)
        assert diagnostic["message"] == message


class TestToDiagnostic:
    def test_rendered_error_kept(self) -> None:
        error = _error("(a #)")
        diagnostic = to_diagnostic(error)
        assert diagnostic["data"] == str(error)
        assert diagnostic["code"] == "UnknownCharacter"

    def test_span_to_range(self) -> None:
        assert span_to_range(span(1, 2, 3, 4)) == {
            "start": {"line": 1, "character": 2},
            "end": {"line": 3, "character": 4},
        }
