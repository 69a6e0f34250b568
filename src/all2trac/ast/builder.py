#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/all2trac/ast/builder.py
"""Builder helpers for constructing AST structures.

The builders cover the two structures that are tedious to write out by hand:
tables (rows, rules and marker rows) and whole documents.

Examples
--------
    >>> from all2trac.ast.builder import DocumentBuilder, TableBuilder
    >>> table = TableBuilder().add_row(["Part", "Qty"]).add_rule().add_row(["bolt", "12"])
    >>> doc = (
    ...     DocumentBuilder()
    ...     .add_heading(1, "Inventory")
    ...     .add_table(table.get_table())
    ...     .get_document()
    ... )

"""

from __future__ import annotations

from typing import Sequence, Union

from all2trac.ast.nodes import (
    CodeBlock,
    Document,
    Heading,
    Node,
    Paragraph,
    Table,
    TableCell,
    TableRow,
    Text,
)

InlineSpec = Union[str, Node, Sequence[Node]]


def _to_inline(content: InlineSpec) -> list[Node]:
    """Normalize a string, a node or a sequence of nodes to a list of inline nodes."""
    if isinstance(content, str):
        return [Text(content=content)] if content else []
    if isinstance(content, Node):
        return [content]
    return list(content)


class TableBuilder:
    """Helper for building table structures.

    Rows are appended in source order. Rule rows and marker rows (column
    groups, width cookies) are added the same way they appear in the source.

    Examples
    --------
    >>> table = (
    ...     TableBuilder()
    ...     .add_row(["/", "<", ">"])
    ...     .add_row(["", "Name", "Age"])
    ...     .add_rule()
    ...     .add_row(["#", "Alice", "30"])
    ...     .get_table()
    ... )

    """

    def __init__(self) -> None:
        """Initialize an empty table builder."""
        self.rows: list[TableRow] = []

    def add_row(self, cells: Sequence[InlineSpec]) -> TableBuilder:
        """Add a standard row.

        Parameters
        ----------
        cells : Sequence of str, Node, or Sequence of Node
            Cell contents. Each cell can be a plain string, a single inline
            node, or a sequence of inline nodes.

        Returns
        -------
        TableBuilder
            Self, for chaining

        """
        self.rows.append(TableRow(cells=[TableCell(content=_to_inline(cell)) for cell in cells]))
        return self

    def add_rule(self) -> TableBuilder:
        """Add a horizontal rule row."""
        self.rows.append(TableRow(row_type="rule"))
        return self

    def get_table(self) -> Table:
        """Get the constructed table."""
        return Table(rows=list(self.rows))


class DocumentBuilder:
    """Fluent helper for building documents block by block.

    Examples
    --------
    >>> doc = (
    ...     DocumentBuilder()
    ...     .add_heading(1, "Title")
    ...     .add_paragraph("Some text")
    ...     .add_code_block("print(1)", language="python")
    ...     .get_document()
    ... )

    """

    def __init__(self) -> None:
        """Initialize an empty document builder."""
        self.children: list[Node] = []

    def add_node(self, node: Node) -> DocumentBuilder:
        """Append an arbitrary block node."""
        self.children.append(node)
        return self

    def add_heading(self, level: int, content: InlineSpec) -> DocumentBuilder:
        """Append a heading."""
        return self.add_node(Heading(level=level, content=_to_inline(content)))

    def add_paragraph(self, content: InlineSpec) -> DocumentBuilder:
        """Append a paragraph."""
        return self.add_node(Paragraph(content=_to_inline(content)))

    def add_code_block(self, content: str, language: str | None = None) -> DocumentBuilder:
        """Append a code block (``language=None`` for example blocks)."""
        return self.add_node(CodeBlock(content=content, language=language))

    def add_table(self, table: Table | TableBuilder) -> DocumentBuilder:
        """Append a table, either built or still in a builder."""
        if isinstance(table, TableBuilder):
            table = table.get_table()
        return self.add_node(table)

    def get_document(self) -> Document:
        """Get the constructed document."""
        return Document(children=list(self.children))


__all__ = ["TableBuilder", "DocumentBuilder"]
