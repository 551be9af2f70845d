"""Exception classes for LDN.

Every parse failure is a subclass of ParseError and carries the offending
token (or byte) together with the span or position where it was found.
The first error aborts the parse; there is no recovery.
"""

from __future__ import annotations

from ldn.location import Position, Span


class LdnError(Exception):
    """Base exception for all LDN errors.

    Subclass this for specific error categories.
    """

    pass


class ParseError(LdnError):
    """Error during LDN parsing.

    Attributes:
        message: Error description without location
        span: Source range of the failure (empty for point errors)
        source_file: Path to source file (optional)

    ``str(err)`` renders as ``"<location> <message>"`` where the location is
    one-based, optionally prefixed by ``source_file:``.
    """

    def __init__(
        self,
        message: str,
        span: Span,
        *,
        location: Position | Span | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error.

        Args:
            message: Error description
            span: Source range of the failure
            location: What to print in front of the message (defaults to span)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.span = span
        self.source_file = source_file
        self._location = location if location is not None else span
        super().__init__(self._render())

    def _render(self) -> str:
        prefix = f"{self.source_file}:" if self.source_file else ""
        return f"{prefix}{self._location} {self.message}"

    def with_source_file(self, source_file: str | None) -> ParseError:
        """Attach a source file path to the error (returns self)."""
        self.source_file = source_file
        self.args = (self._render(),)
        return self


class _PointError(ParseError):
    """Parse error located at a single position rather than a token span."""

    def __init__(self, message: str, position: Position) -> None:
        self.position = position
        super().__init__(message, Span.at(position), location=position)


class IntegerLeadingZero(ParseError):
    """Numeric token has a disallowed leading zero (``01``, ``-0``)."""

    def __init__(self, token: str, span: Span) -> None:
        self.token = token
        super().__init__(
            f"found leading zero while parsing integer constant '{token}'", span
        )


class IntegerParseError(ParseError):
    """Token looked numeric but is not a valid 64-bit signed integer."""

    def __init__(self, token: str, span: Span) -> None:
        self.token = token
        super().__init__(f"cannot parse '{token}' as integer", span)


class SymbolParseError(ParseError):
    """Token contains a byte that is not a symbol constituent."""

    def __init__(self, token: str, span: Span) -> None:
        self.token = token
        super().__init__(f"cannot parse '{token}' as symbol", span)


class UnknownCharacter(_PointError):
    """Byte that cannot start any production."""

    def __init__(self, byte: int, position: Position) -> None:
        self.byte = byte
        super().__init__(f"unknown character {_describe_byte(byte)}", position)


InvalidCharacter = UnknownCharacter


class UnbalancedParentheses(_PointError):
    """List opened but input ended before its closing paren."""

    def __init__(self, position: Position) -> None:
        super().__init__("unbalanced parentheses in list", position)


class UnexpectedCloseParen(_PointError):
    """Closing paren found at top level, with no list open."""

    def __init__(self, position: Position) -> None:
        super().__init__("unexpected ')' outside of a list", position)


class NestingTooDeep(_PointError):
    """List nesting exceeds the configured maximum depth."""

    def __init__(self, position: Position, max_depth: int) -> None:
        self.max_depth = max_depth
        super().__init__(f"lists nested deeper than {max_depth} levels", position)


class Utf8Error(ParseError):
    """Consumed byte run is not valid UTF-8."""

    def __init__(self, span: Span) -> None:
        super().__init__("utf-8 decode error", span)


def _describe_byte(byte: int) -> str:
    if byte < 0x80:
        return f"{chr(byte)!r} (0x{byte:02x})"
    return f"0x{byte:02x}"
