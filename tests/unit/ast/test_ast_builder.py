#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the AST builder helpers."""

import pytest

from all2trac.ast import (
    CodeBlock,
    Document,
    DocumentBuilder,
    Emphasis,
    Heading,
    Paragraph,
    Table,
    TableBuilder,
    Text,
    ThematicBreak,
)


@pytest.mark.unit
class TestTableBuilder:
    """Tests for TableBuilder."""

    def test_rows_in_order(self) -> None:
        """Test rows and rules are kept in source order."""
        table = TableBuilder().add_row(["a", "b"]).add_rule().add_row(["c", "d"]).get_table()

        assert isinstance(table, Table)
        assert [row.row_type for row in table.rows] == ["standard", "rule", "standard"]
        assert table.rows[1].cells == []

    def test_string_cells_become_text(self) -> None:
        """Test plain strings are wrapped in Text nodes."""
        table = TableBuilder().add_row(["a", ""]).get_table()
        first, second = table.rows[0].cells

        assert first.content == [Text(content="a")]
        assert second.content == []

    def test_node_cells(self) -> None:
        """Test cells can be given as a node or a list of nodes."""
        emphasis = Emphasis(content=[Text(content="x")])
        table = TableBuilder().add_row([emphasis, [Text(content="y"), Text(content="z")]]).get_table()

        assert table.rows[0].cells[0].content == [emphasis]
        assert len(table.rows[0].cells[1].content) == 2

    def test_get_table_returns_fresh_row_list(self) -> None:
        """Test later additions do not change an already built table."""
        builder = TableBuilder().add_row(["a"])
        table = builder.get_table()
        builder.add_row(["b"])

        assert len(table.rows) == 1


@pytest.mark.unit
class TestDocumentBuilder:
    """Tests for DocumentBuilder."""

    def test_build_document(self) -> None:
        """Test blocks are appended in order."""
        doc = (
            DocumentBuilder()
            .add_heading(2, "Title")
            .add_paragraph("Body")
            .add_code_block("x = 1", language="python")
            .add_table(TableBuilder().add_row(["a"]))
            .add_node(ThematicBreak())
            .get_document()
        )

        assert isinstance(doc, Document)
        assert [type(child) for child in doc.children] == [Heading, Paragraph, CodeBlock, Table, ThematicBreak]
        assert doc.children[0].level == 2
        assert doc.children[2].language == "python"

    def test_invalid_heading_level(self) -> None:
        """Test heading levels outside 1-6 are rejected."""
        with pytest.raises(ValueError):
            DocumentBuilder().add_heading(7, "Too deep")
