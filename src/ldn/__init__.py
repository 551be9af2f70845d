"""
LDN: parser and layout-preserving formatter for Lithium Data Notation.

A document is a sequence of items: integers, keywords, strings, symbols,
line comments and parenthesized lists. Every node carries a zero-based
source Span so editors and linters can report errors and apply edits at
exact character ranges.

Quick Start:
    >>> from ldn import parse, format
    >>> doc = parse("(config :port 8080)  ; server")
    >>> doc[0].items[1]
    Keyword(span=..., name='port')
    >>> print(format(doc), end="")
    (config :port 8080) ; server

Errors:
    >>> parse("(1 (2) 3")
    Traceback (most recent call last):
    ...
    ldn.errors.UnbalancedParentheses: 1:9 unbalanced parentheses in list
"""

from collections.abc import Iterable

from ldn.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from ldn.diagnostics import check, to_diagnostic
from ldn.errors import (
    IntegerLeadingZero,
    IntegerParseError,
    InvalidCharacter,
    LdnError,
    NestingTooDeep,
    ParseError,
    SymbolParseError,
    UnbalancedParentheses,
    UnexpectedCloseParen,
    UnknownCharacter,
    Utf8Error,
)
from ldn.formatter import INDENT_WIDTH, Formatter, format_document
from ldn.lexer import PositionCursor, Tokenizer
from ldn.location import Position, Span
from ldn.nodes import (
    Atom,
    Comment,
    Document,
    Integer,
    Item,
    Keyword,
    List,
    Node,
    String,
    Symbol,
    is_comment,
    strip_spans,
)
from ldn.parser import Parser
from ldn.serialization import from_dict, from_json, to_dict, to_json

__version__ = "0.1.0"


def parse(
    source: str | bytes,
    *,
    source_file: str | None = None,
    config: ParseConfig | None = None,
) -> Document:
    """Parse LDN source into a typed document tree.

    Args:
        source: LDN source text (or raw UTF-8 bytes)
        source_file: Optional source file path for error messages
        config: Parse configuration for this call (defaults to the
            context's current configuration)

    Returns:
        Document (a sequence of top-level items)

    Raises:
        ParseError: On the first malformed construct.

    Example:
        >>> parse("-")[0]
        Symbol(span=Span(start=Position(line=0, column=0), end=Position(line=0, column=1)), name='-')
    """
    if config is None:
        return Parser(source, source_file).parse()

    with parse_config_context(config):
        return Parser(source, source_file).parse()


def format(document: Document | Iterable[Item], *, indent: int = INDENT_WIDTH) -> str:
    """Format a parsed document with the canonical, layout-preserving style.

    The output re-parses to a structurally equal tree.
    """
    return format_document(document, indent=indent)


__all__ = [
    # Main API
    "parse",
    "format",
    "check",
    "Parser",
    "Formatter",
    "format_document",
    "__version__",
    # Configuration
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Lexing
    "PositionCursor",
    "Tokenizer",
    # Positions
    "Position",
    "Span",
    # Tree
    "Node",
    "Atom",
    "Integer",
    "Keyword",
    "String",
    "Symbol",
    "Comment",
    "List",
    "Item",
    "Document",
    "is_comment",
    "strip_spans",
    # Errors
    "LdnError",
    "ParseError",
    "IntegerLeadingZero",
    "IntegerParseError",
    "UnknownCharacter",
    "InvalidCharacter",
    "SymbolParseError",
    "UnbalancedParentheses",
    "UnexpectedCloseParen",
    "NestingTooDeep",
    "Utf8Error",
    # Diagnostics and serialization
    "to_diagnostic",
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
]
