"""StringBuilder for O(n) string accumulation.

Appends to a list, joins once at the end: O(n) total vs O(n²) for
repeated string concatenation. Used by the formatter as its only mutable
state.

Thread Safety:
StringBuilder instances are local to each format() call.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator.

    Usage:
            >>> sb = StringBuilder()
            >>> _ = sb.append("(foo").append_newline(4).append("bar)")
            >>> sb.build()
            '(foo\\n    bar)'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a string (empty strings are skipped)."""
        if s:
            self._parts.append(s)
        return self

    def append_newline(self, indent: int = 0) -> StringBuilder:
        """Append a line feed followed by ``indent`` spaces."""
        self._parts.append("\n")
        if indent > 0:
            self._parts.append(" " * indent)
        return self

    def build(self) -> str:
        """Join all parts into the final string."""
        return "".join(self._parts)

    def __len__(self) -> int:
        """Return number of parts (not total length)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        return bool(self._parts)
