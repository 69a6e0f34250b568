#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/all2trac/ast/serialization.py
"""JSON serialization and deserialization for AST nodes.

The JSON form is how an external outline parser hands a document tree to
all2trac. Every node is an object with a ``node_type`` field naming its class,
plus the node's own fields; child nodes nest as objects or lists of objects.
The root object additionally carries ``schema_version``.

Examples
--------
Serialize AST to JSON:

    >>> from all2trac.ast import Document, Heading, Text
    >>> doc = Document(children=[Heading(level=1, content=[Text(content="Title")])])
    >>> json_str = ast_to_json(doc, indent=2)

Deserialize JSON back to AST:

    >>> doc = json_to_ast(json_str)
    >>> doc.children[0].level
    1

A table with a header rule::

    {"node_type": "Table", "rows": [
        {"node_type": "TableRow", "cells": [{"node_type": "TableCell",
            "content": [{"node_type": "Text", "content": "Name"}]}]},
        {"node_type": "TableRow", "row_type": "rule"},
        {"node_type": "TableRow", "cells": [{"node_type": "TableCell",
            "content": [{"node_type": "Text", "content": "Alice"}]}]}
    ]}

"""

from __future__ import annotations

import json
import logging
from typing import Any, cast

from all2trac.ast.nodes import (
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    SourceLocation,
    Strikethrough,
    Strong,
    Subscript,
    Superscript,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
)
from all2trac.exceptions import ParsingError

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1

# "value" fields are copied as is, "nodes" fields hold a list of child nodes.
_NODE_FIELDS: dict[type, dict[str, str]] = {
    Document: {"children": "nodes"},
    Heading: {"level": "value", "content": "nodes"},
    Paragraph: {"content": "nodes"},
    CodeBlock: {"content": "value", "language": "value"},
    BlockQuote: {"children": "nodes"},
    List: {"ordered": "value", "items": "nodes", "start": "value"},
    ListItem: {"children": "nodes"},
    Table: {"rows": "nodes"},
    TableRow: {"cells": "nodes", "row_type": "value"},
    TableCell: {"content": "nodes"},
    ThematicBreak: {},
    Text: {"content": "value"},
    Emphasis: {"content": "nodes"},
    Strong: {"content": "nodes"},
    Code: {"content": "value"},
    Link: {"url": "value", "content": "nodes"},
    Image: {"url": "value", "alt_text": "value"},
    LineBreak: {"soft": "value"},
    Strikethrough: {"content": "nodes"},
    Superscript: {"content": "nodes"},
    Subscript: {"content": "nodes"},
}

_NODE_CLASSES: dict[str, type] = {cls.__name__: cls for cls in _NODE_FIELDS}


def _serialize_source_location(location: SourceLocation) -> dict[str, Any]:
    result: dict[str, Any] = {"format": location.format}
    if location.line is not None:
        result["line"] = location.line
    if location.column is not None:
        result["column"] = location.column
    if location.metadata:
        result["metadata"] = location.metadata
    return result


def _deserialize_source_location(location: Any) -> SourceLocation:
    if not isinstance(location, dict) or not isinstance(location.get("format"), str):
        raise ValueError("source_location must be an object with a string 'format'")
    metadata = location.get("metadata", {})
    if not isinstance(metadata, dict):
        raise ValueError("source_location metadata must be an object")
    return SourceLocation(
        format=location["format"],
        line=location.get("line"),
        column=location.get("column"),
        metadata=metadata,
    )


def ast_to_dict(node: Node) -> dict[str, Any]:
    """Convert an AST node to a dictionary representation.

    Parameters
    ----------
    node : Node
        The AST node to convert

    Returns
    -------
    dict
        Dictionary representation of the node

    Raises
    ------
    ValueError
        If the node type is unknown

    Examples
    --------
    >>> ast_to_dict(Text(content="Hello"))
    {'node_type': 'Text', 'content': 'Hello'}

    """
    fields = _NODE_FIELDS.get(type(node))
    if fields is None:
        raise ValueError(f"Unknown node type for serialization: {type(node).__name__}")

    result: dict[str, Any] = {"node_type": type(node).__name__}
    for name, kind in fields.items():
        value = getattr(node, name)
        if kind == "nodes":
            result[name] = [ast_to_dict(child) for child in value]
        else:
            result[name] = value
    if node.metadata:
        result["metadata"] = node.metadata
    if node.source_location is not None:
        result["source_location"] = _serialize_source_location(node.source_location)
    return result


def dict_to_ast(data: dict[str, Any], strict_mode: bool = True) -> Node:
    """Convert a dictionary representation back to an AST node.

    Parameters
    ----------
    data : dict
        Dictionary representation of a node
    strict_mode : bool, default True
        If True, raise ValueError on unknown node types.
        If False, replace unknown nodes with a placeholder Text node.

    Returns
    -------
    Node
        Reconstructed AST node

    Raises
    ------
    ValueError
        If the dictionary is malformed, or names an unknown node type in strict mode

    """
    if not isinstance(data, dict):
        raise ValueError(f"Expected a node object, got {type(data).__name__}")

    node_type = data.get("node_type")
    node_class = _NODE_CLASSES.get(node_type) if isinstance(node_type, str) else None
    if node_class is None:
        if strict_mode:
            raise ValueError(f"Unknown node type: {node_type}")
        logger.warning("Unknown node type '%s', replaced by placeholder text", node_type)
        return Text(content=f"[Unknown node type: {node_type}]")

    kwargs: dict[str, Any] = {}
    for name, kind in _NODE_FIELDS[node_class].items():
        if name not in data:
            continue
        if kind == "nodes":
            children = data[name]
            if not isinstance(children, list):
                raise ValueError(f"Field '{name}' of {node_type} must be a list, got {type(children).__name__}")
            kwargs[name] = [dict_to_ast(child, strict_mode=strict_mode) for child in children]
        else:
            kwargs[name] = data[name]
    if data.get("metadata"):
        if not isinstance(data["metadata"], dict):
            raise ValueError(f"Metadata of {node_type} must be an object")
        kwargs["metadata"] = dict(data["metadata"])
    if data.get("source_location"):
        kwargs["source_location"] = _deserialize_source_location(data["source_location"])

    try:
        return cast(Node, node_class(**kwargs))
    except TypeError as e:
        raise ValueError(f"Missing or invalid fields for {node_type}: {e}") from e


def ast_to_json(node: Node, indent: int | None = None) -> str:
    """Serialize an AST node to a JSON string with schema versioning.

    Parameters
    ----------
    node : Node
        The AST node to serialize
    indent : int or None, default = None
        Number of spaces for indentation (None for compact format)

    Returns
    -------
    str
        JSON string with a root ``schema_version`` field

    """
    versioned = {"schema_version": SCHEMA_VERSION, **ast_to_dict(node)}
    return json.dumps(versioned, indent=indent, ensure_ascii=False)


def json_to_ast(json_str: str, strict_mode: bool = True) -> Node:
    """Deserialize a JSON string to an AST node.

    JSON without ``schema_version`` is read as version 1.

    Parameters
    ----------
    json_str : str
        JSON string representation
    strict_mode : bool, default True
        If True, unknown node types are errors; otherwise they become placeholders

    Returns
    -------
    Node
        Reconstructed AST node

    Raises
    ------
    ParsingError
        If the JSON is malformed, the schema version is unsupported, or the
        node structure is invalid

    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ParsingError(f"Invalid JSON document tree: {e}", parsing_stage="json_decode", original_error=e) from e

    if not isinstance(data, dict):
        raise ParsingError("Document tree JSON must be an object", parsing_stage="json_decode")

    schema_version = data.pop("schema_version", SCHEMA_VERSION)
    if schema_version != SCHEMA_VERSION:
        raise ParsingError(
            f"Unsupported schema version: {schema_version}. Supported version is {SCHEMA_VERSION}.",
            parsing_stage="schema_validation",
        )

    try:
        return dict_to_ast(data, strict_mode=strict_mode)
    except ValueError as e:
        raise ParsingError(str(e), parsing_stage="node_construction", original_error=e) from e


__all__ = [
    "ast_to_dict",
    "dict_to_ast",
    "ast_to_json",
    "json_to_ast",
]
