"""Typed document tree for LDN.

All nodes are frozen dataclasses with slots, so a parsed tree is immutable
and safe to share across threads. Every node carries its own Span, giving
formatters and diagnostics O(1) access to source positions.

Node Hierarchy:
Node (base)
├── Atom
│   ├── Integer
│   ├── Keyword
│   ├── String
│   └── Symbol
├── Comment
└── List

Document is the parse result: the top-level (unparenthesized) item sequence.

"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any, overload

from ldn.location import Span


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all tree nodes."""

    span: Span

    @property
    def is_comment(self) -> bool:
        return False


# =============================================================================
# Atoms
# =============================================================================


@dataclass(frozen=True, slots=True)
class Atom(Node):
    """An indivisible element: anything that is not a comment or a list."""


@dataclass(frozen=True, slots=True)
class Integer(Atom):
    """Signed 64-bit integer. Source: ``42``, ``-7``."""

    value: int


@dataclass(frozen=True, slots=True)
class Keyword(Atom):
    """Keyword, written ``:name`` and stored without the colon."""

    name: str


@dataclass(frozen=True, slots=True)
class String(Atom):
    """Quoted string with ``\\"`` escapes resolved. May span lines."""

    value: str


@dataclass(frozen=True, slots=True)
class Symbol(Atom):
    """Bare symbol such as ``string->int`` or ``-``."""

    name: str


# =============================================================================
# Comments and lists
# =============================================================================


@dataclass(frozen=True, slots=True)
class Comment(Node):
    """Line comment, with leading ``;`` characters and whitespace stripped."""

    text: str

    @property
    def is_comment(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class List(Node):
    """Parenthesized sequence of items. May be empty."""

    items: tuple[Item, ...] = ()


type Item = Integer | Keyword | String | Symbol | Comment | List


def is_comment(item: Node) -> bool:
    """Return True if ``item`` is a comment."""
    return isinstance(item, Comment)


# =============================================================================
# Document
# =============================================================================


@dataclass(frozen=True, slots=True)
class Document(Sequence["Item"]):
    """Top-level item sequence produced by the parser.

    Behaves like a read-only sequence of items. ``span`` covers the whole
    input, from ``(0, 0)`` to the end position.

    """

    items: tuple[Item, ...] = ()
    span: Span = field(default_factory=Span)

    @overload
    def __getitem__(self, index: int) -> Item: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Item, ...]: ...

    def __getitem__(self, index: int | slice) -> Item | tuple[Item, ...]:
        return self.items[index]

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items)


def strip_spans(node: Node | Document) -> Any:
    """Return a span-free, comparable rendition of ``node``.

    Two trees are structurally equal (same kinds, values and nesting) exactly
    when their stripped forms compare equal.

    Example:
        >>> strip_spans(List(Span(), (Integer(Span(), 1),)))
        ('List', (('Integer', 1),))
    """
    match node:
        case Document():
            return ("Document", tuple(strip_spans(item) for item in node.items))
        case List():
            return ("List", tuple(strip_spans(item) for item in node.items))
        case Integer():
            return ("Integer", node.value)
        case Keyword():
            return ("Keyword", node.name)
        case String():
            return ("String", node.value)
        case Symbol():
            return ("Symbol", node.name)
        case Comment():
            return ("Comment", node.text)
        case _:
            msg = f"Unknown node type: {type(node).__name__}"
            raise TypeError(msg)
