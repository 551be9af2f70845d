"""Recursive descent parser producing the typed LDN tree.

Pulls bytes from the Tokenizer on demand and builds frozen dataclass nodes.
The only parser state is the recursion depth, which stands in for list
nesting. The first error aborts the parse; no partial tree is returned.

Grammar (informal):
    document ::= item*
    item     ::= comment | integer | string | keyword | symbol | list
    list     ::= '(' item* ')'
    comment  ::= ';' <anything up to end of line>
    keyword  ::= ':' symbol
    token    ::= <bytes up to whitespace or ')'>

Thread Safety:
- Parser instances are single-use and not thread-safe
- Configuration is read from ContextVar (thread-local)
- The resulting tree is immutable and safe to share

"""

from __future__ import annotations

import re

from ldn.config import ParseConfig, get_parse_config
from ldn.errors import (
    IntegerLeadingZero,
    IntegerParseError,
    NestingTooDeep,
    ParseError,
    SymbolParseError,
    UnbalancedParentheses,
    UnexpectedCloseParen,
    UnknownCharacter,
)
from ldn.lexer import Tokenizer
from ldn.location import Position, Span
from ldn.nodes import Comment, Document, Integer, Item, Keyword, List, String, Symbol
from ldn.utils.logger import get_logger

logger = get_logger(__name__)

SPACE = ord(" ")
NEWLINE = ord("\n")
SEMICOLON = ord(";")
QUOTE = ord('"')
BACKSLASH = "\\"
COLON = ord(":")
MINUS = ord("-")
ZERO = ord("0")
LPAREN = ord("(")
RPAREN = ord(")")

SYMBOL_PUNCTUATION = frozenset(b"+-*/%=<>?!")

INT_MIN = -(2**63)
INT_MAX = 2**63 - 1

_INTEGER_RE = re.compile(r"-?[0-9]+")


# =============================================================================
# Recognizers
# =============================================================================


def is_whitespace(byte: int) -> bool:
    """Space and line feed only; tabs and carriage returns are not whitespace."""
    return byte == SPACE or byte == NEWLINE


def is_digit_1_9(byte: int) -> bool:
    return 0x31 <= byte <= 0x39


def is_alpha(byte: int) -> bool:
    """ASCII letter, either case."""
    return 0x61 <= byte <= 0x7A or 0x41 <= byte <= 0x5A


def is_symbol_char(byte: int) -> bool:
    """Symbol constituent: a letter or one of ``+ - * / % = < > ? !``."""
    return byte in SYMBOL_PUNCTUATION or is_alpha(byte)


def _is_token_byte(byte: int) -> bool:
    return not is_whitespace(byte) and byte != RPAREN


def _is_comment_byte(byte: int) -> bool:
    return byte != NEWLINE


def _is_string_byte(byte: int) -> bool:
    return byte != QUOTE


# =============================================================================
# Parser
# =============================================================================


class Parser:
    """Recursive descent parser for LDN.

    Usage:
            >>> Parser("(1 :two)").parse()[0]
        List(span=..., items=(Integer(..., value=1), Keyword(..., name='two')))

    Configuration:
        ``max_depth`` is read from the parse ContextVar when ``parse()`` runs.
        Use parse_config_context() to change it. Each nesting level costs two
        Python stack frames, so very large limits can hit RecursionError.

    """

    __slots__ = ("_source", "_source_file", "_tokenizer", "_depth", "_max_depth")

    def __init__(self, source: str | bytes, source_file: str | None = None) -> None:
        """Initialize parser with source text.

        Args:
            source: LDN source text, or raw bytes expected to be UTF-8
            source_file: Optional source file path for error messages
        """
        self._source = source
        self._source_file = source_file
        self._tokenizer = Tokenizer(source)
        self._depth = 0
        self._max_depth = ParseConfig().max_depth

    @property
    def _config(self) -> ParseConfig:
        return get_parse_config()

    def parse(self) -> Document:
        """Parse the whole input as a top-level item sequence.

        Returns:
            Document whose span runs from (0, 0) to the end of input.

        Raises:
            ParseError: On the first malformed construct (see ldn.errors).
        """
        self._tokenizer = Tokenizer(self._source)
        self._depth = 0
        self._max_depth = self._config.max_depth

        try:
            items = self._parse_items(top_level=True)
        except ParseError as e:
            if self._source_file is not None:
                e.with_source_file(self._source_file)
            logger.debug("parse failed: %s", e)
            raise

        end = self._tokenizer.position
        logger.debug("parsed %d top-level items ending at %s", len(items), end)
        return Document(tuple(items), Span(Position(), end))

    # =========================================================================
    # Main loop
    # =========================================================================

    def _parse_items(self, *, top_level: bool) -> list[Item]:
        """Parse items until end of input (top level) or a closing paren.

        Top-level and list parsing share this loop; the only difference is
        whether a ``)`` closes the sequence or is an error.
        """
        t = self._tokenizer
        items: list[Item] = []

        while (byte := t.peek()) is not None:
            if is_whitespace(byte):
                t.advance()
            elif byte == SEMICOLON:
                items.append(self._parse_comment())
            elif byte == ZERO or byte == MINUS or is_digit_1_9(byte):
                # Integers, or the symbol "-" on its own
                items.append(self._parse_integer_or_symbol())
            elif byte == QUOTE:
                items.append(self._parse_string())
            elif byte == COLON:
                items.append(self._parse_keyword())
            elif is_symbol_char(byte):
                items.append(self._parse_symbol())
            elif byte == LPAREN:
                items.append(self._parse_list())
            elif byte == RPAREN:
                if top_level:
                    raise UnexpectedCloseParen(t.position)
                t.advance()
                return items
            else:
                raise UnknownCharacter(byte, t.position)

        if not top_level:
            raise UnbalancedParentheses(t.position)

        return items

    # =========================================================================
    # Productions
    # =========================================================================

    def _parse_list(self) -> List:
        """Called at the opening paren's position."""
        t = self._tokenizer
        start = t.position

        if self._depth >= self._max_depth:
            raise NestingTooDeep(start, self._max_depth)

        t.advance()
        self._depth += 1
        items = self._parse_items(top_level=False)
        self._depth -= 1

        return List(Span(start, t.position), tuple(items))

    def _parse_comment(self) -> Comment:
        """Called at the first semicolon; runs to end of line (excluded)."""
        text, comment_span = self._tokenizer.consume_while(_is_comment_byte)
        return Comment(comment_span, text.lstrip(";").strip())

    def _parse_integer_or_symbol(self) -> Integer | Symbol:
        """Called at a digit or a minus sign."""
        token, token_span = self._next_token()

        if (token.startswith("0") and token != "0") or token.startswith("-0"):
            raise IntegerLeadingZero(token, token_span)
        if token == "-":
            return Symbol(token_span, token)

        if _INTEGER_RE.fullmatch(token) is None:
            raise IntegerParseError(token, token_span)
        value = int(token)
        if not INT_MIN <= value <= INT_MAX:
            raise IntegerParseError(token, token_span)

        return Integer(token_span, value)

    def _parse_string(self) -> String:
        """Called at the opening quote.

        The span starts at the opening quote and ends where the last chunk
        ends, so it does not include the closing quote.
        """
        t = self._tokenizer
        start = t.position
        t.advance()

        parts: list[str] = []
        while True:
            chunk, chunk_span = t.consume_while(_is_string_byte)
            t.advance()
            end = chunk_span.end

            if chunk.endswith(BACKSLASH):
                # Escaped quote; the string continues
                parts.append(chunk[:-1])
                parts.append('"')
            else:
                parts.append(chunk)
                break

        return String(Span(start, end), "".join(parts))

    def _parse_keyword(self) -> Keyword:
        """Called at the colon; the symbol after it becomes the name."""
        t = self._tokenizer
        start = t.position
        t.advance()

        symbol = self._parse_symbol()
        return Keyword(Span(start, symbol.span.end), symbol.name)

    def _parse_symbol(self) -> Symbol:
        token, token_span = self._next_token()

        if not all(map(is_symbol_char, token.encode("utf-8"))):
            raise SymbolParseError(token, token_span)

        return Symbol(token_span, token)

    def _next_token(self) -> tuple[str, Span]:
        """Consume bytes up to the first whitespace or closing paren."""
        return self._tokenizer.consume_while(_is_token_byte)
