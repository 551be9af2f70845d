"""Tests for the top-level ``ldn`` API."""

import pytest

import ldn
from ldn import Document, ParseConfig, format, parse
from ldn.errors import NestingTooDeep, ParseError


class TestExports:
    def test_all_names_exist(self) -> None:
        for name in ldn.__all__:
            assert hasattr(ldn, name), name

    def test_version(self) -> None:
        assert ldn.__version__ == "0.1.0"

    def test_invalid_character_alias(self) -> None:
        assert ldn.InvalidCharacter is ldn.UnknownCharacter


class TestParse:
    def test_returns_document(self) -> None:
        document = parse("a (b)")
        assert isinstance(document, Document)
        assert [type(item).__name__ for item in document] == ["Symbol", "List"]

    def test_accepts_bytes(self) -> None:
        assert parse(b"(1)") == parse("(1)")

    def test_config_applies_to_call_only(self) -> None:
        with pytest.raises(NestingTooDeep):
            parse("((a))", config=ParseConfig(max_depth=1))
        assert len(parse("((a))")) == 1

    def test_source_file_in_message(self) -> None:
        with pytest.raises(ParseError, match=r"^conf\.ldn:1:1 unexpected"):
            parse(")", source_file="conf.ldn")


class TestFormat:
    def test_parse_format_parse(self) -> None:
        source = "(config :port 8080)  ; server"
        assert format(parse(source)) == "(config :port 8080) ; server\n"

    def test_document_is_a_sequence(self) -> None:
        document = parse("1 2 3")
        assert len(document) == 3
        assert [item.value for item in document[1:]] == [2, 3]
