"""Editor diagnostics for LDN parse errors.

Maps the error taxonomy onto Language Server Protocol style diagnostic
dicts, ready to be JSON-encoded by an editor integration. Positions are
zero-based in both LDN and LSP, so spans are copied without re-offsetting.

Example:
    >>> check("(1 2")
    [{'range': {...}, 'severity': 1, 'source': 'ldn', 'message': 'Unbalanced parentheses', ...}]

"""

from __future__ import annotations

from typing import Any

from ldn.errors import (
    IntegerLeadingZero,
    IntegerParseError,
    NestingTooDeep,
    ParseError,
    SymbolParseError,
    UnbalancedParentheses,
    UnexpectedCloseParen,
    UnknownCharacter,
    Utf8Error,
)
from ldn.location import Position, Span
from ldn.parser import Parser

SEVERITY_ERROR = 1
SOURCE = "ldn"

_MESSAGES: dict[type[ParseError], str] = {
    IntegerLeadingZero: "Found leading zero while parsing integer constant",
    IntegerParseError: "Invalid integer constant",
    UnknownCharacter: "Invalid character",
    SymbolParseError: "Symbol parse error",
    UnbalancedParentheses: "Unbalanced parentheses",
    UnexpectedCloseParen: "Unexpected closing parenthesis",
    NestingTooDeep: "Lists nested too deeply",
    Utf8Error: "UTF-8 decode error",
}


def position_to_lsp(position: Position) -> dict[str, int]:
    return {"line": position.line, "character": position.column}


def span_to_range(span: Span) -> dict[str, dict[str, int]]:
    """Convert a Span to an LSP range (both are zero-based)."""
    return {"start": position_to_lsp(span.start), "end": position_to_lsp(span.end)}


def to_diagnostic(error: ParseError) -> dict[str, Any]:
    """Build a diagnostic dict for ``error``.

    The short message depends on the error kind; the full rendered error
    (with one-based location) is kept under ``data``.
    """
    message = _MESSAGES.get(type(error), error.message)
    return {
        "range": span_to_range(error.span),
        "severity": SEVERITY_ERROR,
        "source": SOURCE,
        "code": type(error).__name__,
        "message": message,
        "data": str(error),
    }


def check(source: str | bytes) -> list[dict[str, Any]]:
    """Parse ``source`` and return its diagnostics (empty when valid)."""
    try:
        Parser(source).parse()
    except ParseError as e:
        return [to_diagnostic(e)]
    return []
