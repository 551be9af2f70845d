"""Tree serialization: JSON round-trip for LDN documents.

Converts typed tree nodes to/from JSON-compatible dicts. Useful for:
- Handing parsed documents to tools written in other languages
- Caching parsed trees to disk
- Debugging and inspection (``python -m ldn --json``)

All output is deterministic (sorted keys) for cache-key stability.

Example:
    from ldn import parse
    from ldn.serialization import to_json, from_json

    doc = parse("(foo :bar 1)")
    assert from_json(to_json(doc)) == doc

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from dataclasses import fields
from typing import Any

from ldn.location import Position, Span
from ldn.nodes import (
    Comment,
    Document,
    Integer,
    Keyword,
    List,
    Node,
    String,
    Symbol,
)

# Registry of node type names to classes for deserialization
_NODE_TYPES: dict[str, type] = {
    "Document": Document,
    "List": List,
    "Comment": Comment,
    "Integer": Integer,
    "Keyword": Keyword,
    "String": String,
    "Symbol": Symbol,
}


def to_dict(node: Node | Document) -> dict[str, Any]:
    """Convert a tree node to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.
    Spans are written as ``[start_line, start_column, end_line, end_column]``.

    """
    result: dict[str, Any] = {"_type": type(node).__name__}

    for f in fields(node):
        result[f.name] = _serialize_value(getattr(node, f.name))

    return result


def _serialize_value(value: Any) -> Any:
    if isinstance(value, (Node, Document)):
        return to_dict(value)
    if isinstance(value, Span):
        return [value.start.line, value.start.column, value.end.line, value.end.column]
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    # Primitives: str, int
    return value


def from_dict(data: dict[str, Any]) -> Node | Document:
    """Reconstruct a typed tree node from a dict.

    Raises:
        ValueError: If ``_type`` is missing or unknown, or a span is malformed.

    """
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized node"
        raise ValueError(msg)

    node_cls = _NODE_TYPES.get(type_name)
    if node_cls is None:
        msg = f"Unknown node type: {type_name!r}"
        raise ValueError(msg)

    kwargs: dict[str, Any] = {}
    for f in fields(node_cls):
        if f.name not in data:
            continue
        raw = data[f.name]
        if f.name == "span":
            kwargs[f.name] = _deserialize_span(raw)
        elif f.name == "items":
            kwargs[f.name] = tuple(from_dict(item) for item in raw)
        else:
            kwargs[f.name] = raw

    return node_cls(**kwargs)


def _deserialize_span(raw: Any) -> Span:
    if not isinstance(raw, list) or len(raw) != 4:
        msg = f"Malformed span: {raw!r}"
        raise ValueError(msg)
    start_line, start_column, end_line, end_column = raw
    return Span(Position(start_line, start_column), Position(end_line, end_column))


def to_json(doc: Document, *, indent: int | None = None) -> str:
    """Serialize a Document to a JSON string (sorted keys)."""
    return json.dumps(to_dict(doc), sort_keys=True, indent=indent)


def from_json(data: str) -> Document:
    """Deserialize a Document from a JSON string.

    Raises:
        ValueError: If the JSON doesn't represent a Document.

    """
    raw = json.loads(data)
    node = from_dict(raw)
    if not isinstance(node, Document):
        msg = f"Expected Document, got {type(node).__name__}"
        raise ValueError(msg)
    return node
