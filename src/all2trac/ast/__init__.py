#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/all2trac/ast/__init__.py
"""Abstract Syntax Tree (AST) module for document representation.

The AST is the hand-over point between an outline-document parser and the
Trac renderer. The module consists of several components:

- nodes: AST node classes representing document structure
- visitors: Visitor pattern base for AST traversal
- tables: Read-only table queries (dimensions, row positions, width cookies)
- serialization: JSON serialization and deserialization of AST structures
- builder: Helper classes for constructing tables and documents

Examples
--------
Basic usage:

    >>> from all2trac.ast import Document, Heading, Paragraph, Text
    >>> from all2trac.renderers.trac import TracRenderer
    >>>
    >>> doc = Document(children=[
    ...     Heading(level=1, content=[Text(content="Title")]),
    ...     Paragraph(content=[Text(content="Hello world")])
    ... ])
    >>> TracRenderer().render_to_string(doc)
    '== Title\\n\\nHello world\\n'

"""

from __future__ import annotations

# Builder helpers
from all2trac.ast.builder import DocumentBuilder, TableBuilder

# Core node types
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
    get_node_children,
)

# Serialization
from all2trac.ast.serialization import ast_to_dict, ast_to_json, dict_to_ast, json_to_ast

# Table queries
from all2trac.ast.tables import (
    TableLayout,
    cell_starts_colgroup,
    cell_text,
    column_width_cookie,
    exportable_rows,
    has_special_column,
    is_special_row,
    row_cells,
    row_index,
    table_dimensions,
)

# Utilities
from all2trac.ast.utils import extract_text

# Visitor pattern base
from all2trac.ast.visitors import NodeVisitor

__all__ = [
    # Nodes
    "Node",
    "SourceLocation",
    "Document",
    "Heading",
    "Paragraph",
    "CodeBlock",
    "BlockQuote",
    "List",
    "ListItem",
    "Table",
    "TableRow",
    "TableCell",
    "ThematicBreak",
    "Text",
    "Emphasis",
    "Strong",
    "Code",
    "Link",
    "Image",
    "LineBreak",
    "Strikethrough",
    "Superscript",
    "Subscript",
    # Node helpers
    "get_node_children",
    # Visitors
    "NodeVisitor",
    # Builders
    "TableBuilder",
    "DocumentBuilder",
    # Serialization
    "ast_to_dict",
    "dict_to_ast",
    "ast_to_json",
    "json_to_ast",
    # Table queries
    "TableLayout",
    "cell_text",
    "has_special_column",
    "is_special_row",
    "exportable_rows",
    "row_cells",
    "table_dimensions",
    "row_index",
    "column_width_cookie",
    "cell_starts_colgroup",
    # Utilities
    "extract_text",
]
