"""Byte-level lexing for the LDN parser.

Architecture:
lexer/
├── __init__.py          # Re-exports PositionCursor, Tokenizer
├── cursor.py            # PositionCursor (line/column tracking)
└── core.py              # Tokenizer (peek, advance, consume_while)

Usage:
    >>> from ldn.lexer import Tokenizer
    >>> t = Tokenizer("(foo)")
    >>> t.peek()
    40

"""

from ldn.lexer.core import Tokenizer
from ldn.lexer.cursor import PositionCursor

__all__ = ["PositionCursor", "Tokenizer"]
