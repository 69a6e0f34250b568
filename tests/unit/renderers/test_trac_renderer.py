#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the Trac wiki renderer.

Tests cover:
- Headings and paragraphs
- Code blocks and language aliases
- Inline formatting
- Links and images
- Lists and block quotes
- Tables (alignment, rules, dummy headers, cookies, column groups)
- File output
- Error handling

"""

import time
from io import BytesIO, StringIO
from pathlib import Path
from unittest.mock import patch

import pytest

from all2trac.ast import (
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    DocumentBuilder,
    Emphasis,
    Heading,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Paragraph,
    Strikethrough,
    Strong,
    Subscript,
    Superscript,
    Table,
    TableBuilder,
    TableRow,
    Text,
    ThematicBreak,
)
from all2trac.ast.tables import TableLayout
from all2trac.exceptions import InvalidOptionsError, RenderingError
from all2trac.options import TracRendererOptions
from all2trac.renderers.trac import TracRenderer


def _render(*blocks, options: TracRendererOptions | None = None) -> str:
    return TracRenderer(options).render_to_string(Document(children=list(blocks)))


def _para(*inlines) -> Paragraph:
    return Paragraph(content=list(inlines))


@pytest.mark.unit
class TestTracBlocks:
    """Tests for block-level rendering."""

    @pytest.mark.parametrize("level,expected", [(1, "== Title\n"), (2, "=== Title\n"), (5, "====== Title\n")])
    def test_heading(self, level: int, expected: str) -> None:
        """Test headings use one more ``=`` than their level."""
        assert _render(Heading(level=level, content=[Text(content="Title")])) == expected

    def test_heading_with_formatting(self) -> None:
        """Test inline markup inside headings."""
        heading = Heading(level=1, content=[Text(content="A "), Emphasis(content=[Text(content="b")])])
        assert _render(heading) == "== A ''b''\n"

    def test_paragraph_reflow(self) -> None:
        """Test whitespace runs collapse into single spaces."""
        assert _render(_para(Text(content="a\nb   c"))) == "a b c\n"

    def test_paragraph_preserve_breaks(self) -> None:
        """Test preserve_breaks keeps the paragraph as written."""
        options = TracRendererOptions(preserve_breaks=True)
        assert _render(_para(Text(content="a\nb   c")), options=options) == "a\nb   c\n"

    def test_paragraph_leading_hash_escaped(self) -> None:
        """Test a paragraph starting with ``#`` is escaped."""
        assert _render(_para(Text(content="#1 priority"))) == "!#1 priority\n"

    def test_code_block_with_language(self) -> None:
        """Test source blocks get a processor line."""
        assert _render(CodeBlock(content="x = 1\n", language="python")) == "{{{#!python\nx = 1\n}}}\n"

    def test_code_block_default_alias(self) -> None:
        """Test f90 is rendered as fortran."""
        assert _render(CodeBlock(content="end", language="f90")) == "{{{#!fortran\nend\n}}}\n"

    def test_code_block_custom_alias(self) -> None:
        """Test configured aliases are applied."""
        options = TracRendererOptions(language_aliases={"sh": "bash"})
        output = _render(CodeBlock(content="ls", language="sh"), CodeBlock(content="end", language="f90"), options=options)
        assert output == "{{{#!bash\nls\n}}}\n\n{{{#!f90\nend\n}}}\n"

    def test_example_block(self) -> None:
        """Test blocks without a language use a plain fence."""
        assert _render(CodeBlock(content="example text")) == "{{{\nexample text\n}}}\n"

    def test_empty_code_block(self) -> None:
        """Test an empty block still has both fences."""
        assert _render(CodeBlock(content="", language="c")) == "{{{#!c\n}}}\n"

    def test_thematic_break(self) -> None:
        """Test thematic breaks render as four dashes."""
        assert _render(ThematicBreak()) == "----\n"

    def test_block_quote(self) -> None:
        """Test every quoted line is prefixed."""
        quote = BlockQuote(children=[_para(Text(content="first")), _para(Text(content="second"))])
        assert _render(quote) == "> first\n>\n> second\n"

    def test_document_block_separation(self) -> None:
        """Test blocks are separated by one blank line."""
        doc = DocumentBuilder().add_heading(1, "T").add_paragraph("body").get_document()
        assert TracRenderer().render_to_string(doc) == "== T\n\nbody\n"

    def test_empty_document(self) -> None:
        """Test an empty document renders as a single newline."""
        assert TracRenderer().render_to_string(Document()) == "\n"


@pytest.mark.unit
class TestTracLists:
    """Tests for list rendering."""

    def _item(self, text: str, *extra) -> ListItem:
        return ListItem(children=[_para(Text(content=text)), *extra])

    def test_unordered_list(self) -> None:
        """Test unordered items use ``*`` with one space of indent."""
        lst = List(ordered=False, items=[self._item("one"), self._item("two")])
        assert _render(lst) == " * one\n * two\n"

    def test_ordered_list(self) -> None:
        """Test ordered items use ``1.``."""
        lst = List(ordered=True, items=[self._item("first"), self._item("second")])
        assert _render(lst) == " 1. first\n 1. second\n"

    def test_ordered_list_start(self) -> None:
        """Test the first ordered item carries the list's start number."""
        lst = List(ordered=True, start=4, items=[self._item("fourth"), self._item("fifth")])
        assert _render(lst) == " 4. fourth\n 1. fifth\n"

    def test_start_ignored_for_unordered_list(self) -> None:
        """Test unordered lists keep bullets whatever their start."""
        lst = List(ordered=False, start=3, items=[self._item("one")])
        assert _render(lst) == " * one\n"

    def test_nested_list_start_restored(self) -> None:
        """Test a nested list does not consume the outer list's numbering."""
        inner = List(ordered=True, start=7, items=[self._item("inner")])
        outer = List(ordered=True, start=2, items=[self._item("a", inner), self._item("b")])
        assert _render(outer) == " 2. a\n   7. inner\n 1. b\n"

    def test_nested_list(self) -> None:
        """Test nested items are indented two more spaces."""
        inner = List(ordered=True, items=[self._item("inner")])
        outer = List(ordered=False, items=[self._item("outer", inner), self._item("after")])
        assert _render(outer) == " * outer\n   1. inner\n * after\n"

    def test_item_without_paragraph(self) -> None:
        """Test an item starting with a non-paragraph block."""
        lst = List(ordered=False, items=[ListItem(children=[CodeBlock(content="x")])])
        assert _render(lst) == " *\n{{{\nx\n}}}\n"


@pytest.mark.unit
class TestTracInline:
    """Tests for inline rendering."""

    def test_emphasis_and_strong(self) -> None:
        """Test Trac quote markup."""
        output = _render(
            _para(Emphasis(content=[Text(content="em")]), Text(content=" "), Strong(content=[Text(content="st")]))
        )
        assert output == "''em'' '''st'''\n"

    def test_inline_code(self) -> None:
        """Test inline code uses backticks."""
        assert _render(_para(Code(content="x + 1"))) == "`x + 1`\n"

    def test_strikethrough(self) -> None:
        """Test strikethrough uses tildes."""
        assert _render(_para(Strikethrough(content=[Text(content="gone")]))) == "~~gone~~\n"

    def test_subscript_and_superscript(self) -> None:
        """Test sub- and superscript markers."""
        output = _render(
            _para(
                Text(content="H"),
                Subscript(content=[Text(content="2")]),
                Text(content="O x"),
                Superscript(content=[Text(content="2")]),
            )
        )
        assert output == "H_2O x^2^\n"

    def test_link_with_text(self) -> None:
        """Test links with text."""
        link = Link(url="http://trac.edgewall.org", content=[Text(content="Trac")])
        assert _render(_para(link)) == "[http://trac.edgewall.org Trac]\n"

    @pytest.mark.parametrize("content", [[], [Text(content="http://x.org")]])
    def test_link_without_distinct_text(self, content: list) -> None:
        """Test links whose text adds nothing render as the bare URL."""
        assert _render(_para(Link(url="http://x.org", content=content))) == "[http://x.org]\n"

    def test_image(self) -> None:
        """Test images use the Image macro."""
        assert _render(_para(Image(url="diagram.png", alt_text="d"))) == "[[Image(diagram.png)]]\n"

    def test_hard_line_break(self) -> None:
        """Test hard breaks use the BR macro."""
        output = _render(_para(Text(content="a"), LineBreak(), Text(content="b")))
        assert output == "a[[BR]]b\n"

    def test_soft_line_break(self) -> None:
        """Test soft breaks reflow unless breaks are preserved."""
        paragraph = _para(Text(content="a"), LineBreak(soft=True), Text(content="b"))
        assert _render(paragraph) == "a b\n"
        assert _render(paragraph, options=TracRendererOptions(preserve_breaks=True)) == "a\nb\n"


@pytest.mark.unit
class TestTracTables:
    """Tests for table rendering."""

    def test_columns_aligned(self, two_by_two_table: Table) -> None:
        """Test cells are padded to the widest cell of their column."""
        assert _render(two_by_two_table) == "|| a   || bb ||\n|| ccc || d  ||\n"

    def test_header_rule(self, header_table: Table) -> None:
        """Test a rule in the second row becomes a separator line."""
        assert _render(header_table) == "|| Name || Qty ||\n||----||---||\n|| bolt || 12  ||\n"

    def test_single_row_gets_dummy_header(self) -> None:
        """Test a one-row table gets an empty header and a rule."""
        table = TableBuilder().add_row(["x"]).get_table()
        assert _render(table) == "||   ||\n||---||\n|| x ||\n"

    def test_single_row_dummy_header_uses_column_widths(self) -> None:
        """Test dummy header cells follow wide columns."""
        table = TableBuilder().add_row(["abcde", "f"]).get_table()
        assert _render(table) == "||     ||   ||\n||-----||---||\n|| abcde || f ||\n"

    def test_rule_outside_second_row_dropped(self) -> None:
        """Test rules in other positions leave no line behind."""
        table = TableBuilder().add_rule().add_row(["a"]).add_row(["b"]).add_rule().add_row(["c"]).get_table()
        assert _render(table) == "|| a ||\n|| b ||\n|| c ||\n"

    def test_zero_column_table_renders_nothing(self) -> None:
        """Test an empty table leaves no trace in the document."""
        output = _render(_para(Text(content="a")), Table(), _para(Text(content="b")))
        assert output == "a\n\nb\n"

    def test_cookie_only_table_gets_dummy_header(self) -> None:
        """Test a table with cookies but no content rows still draws a header."""
        table = TableBuilder().add_row(["<5>", "<3>"]).add_rule().get_table()
        assert _render(table) == "||     ||   ||\n||-----||---||\n"

    def test_rule_only_table_renders_nothing(self) -> None:
        """Test rules alone give a table no columns."""
        output = _render(_para(Text(content="a")), TableBuilder().add_rule().get_table())
        assert output == "a\n"

    def test_width_cookie(self) -> None:
        """Test a width cookie overrides the measured width."""
        table = TableBuilder().add_row(["<6>", ""]).add_row(["a", "bb"]).add_row(["ccc", "d"]).get_table()
        assert _render(table) == "|| a      || bb ||\n|| ccc    || d  ||\n"

    def test_special_column_and_rows_not_exported(self) -> None:
        """Test marker columns and marker rows stay out of the output."""
        table = (
            TableBuilder()
            .add_row(["!", "x", "y"])
            .add_row(["", "Name", "Qty"])
            .add_rule()
            .add_row(["#", "bolt", "12"])
            .get_table()
        )
        assert _render(table) == "|| Name || Qty ||\n||----||---||\n|| bolt || 12  ||\n"

    def test_column_group_start(self) -> None:
        """Test a column group start opens a new cell group."""
        table = TableBuilder().add_row(["/", "", "<"]).add_row(["#", "a", "b"]).add_row(["#", "c", "d"]).get_table()
        assert _render(table) == "|| a |||| b ||\n|| c |||| d ||\n"

    def test_wide_characters_measured_by_display_width(self) -> None:
        """Test East Asian wide characters count as two cells."""
        table = TableBuilder().add_row(["日本", "x"]).add_row(["abc", "y"]).get_table()
        assert _render(table) == "|| 日本 || x ||\n|| abc  || y ||\n"

    def test_cell_content_collapsed(self) -> None:
        """Test multi-line cell content is joined on one line."""
        table = TableBuilder().add_row([" a\n b "]).add_row(["cc"]).get_table()
        assert _render(table) == "|| a b ||\n|| cc  ||\n"

    def test_cell_formatting_counts_toward_width(self) -> None:
        """Test widths are measured on the rendered markup."""
        table = TableBuilder().add_row([Strong(content=[Text(content="a")])]).add_row(["b"]).get_table()
        assert _render(table) == "|| '''a''' ||\n|| b       ||\n"

    def test_tables_in_one_document_measured_separately(self) -> None:
        """Test each table gets its own widths."""
        first = TableBuilder().add_row(["a"]).add_row(["b"]).get_table()
        second = TableBuilder().add_row(["long"]).add_row(["x"]).get_table()
        assert _render(first, second) == "|| a ||\n|| b ||\n\n|| long ||\n|| x    ||\n"

    def test_rendering_twice_is_identical(self, header_table: Table) -> None:
        """Test a renderer can be reused for the same document."""
        renderer = TracRenderer()
        doc = Document(children=[header_table])
        assert renderer.render_to_string(doc) == renderer.render_to_string(doc)

    def test_row_outside_table(self) -> None:
        """Test a stray table row is a rendering error."""
        with pytest.raises(RenderingError):
            _render(TableRow())


def _numbered_table(rows: int, columns: int = 5) -> Table:
    builder = TableBuilder().add_row([f"h{column}" for column in range(columns)]).add_rule()
    for row in range(rows):
        builder.add_row([f"r{row}c{column}" for column in range(columns)])
    return builder.get_table()


@pytest.mark.unit
class TestTracTableScaling:
    """Tests that table rendering cost grows linearly with the row count."""

    def test_layout_computed_independently_of_row_count(self) -> None:
        """Test the table layout is not rebuilt per row or per cell."""
        counts = []
        for rows in (10, 300):
            with patch.object(TableLayout, "of", wraps=TableLayout.of) as spy:
                _render(_numbered_table(rows))
            counts.append(spy.call_count)
        assert counts[0] == counts[1]

    @pytest.mark.slow
    def test_large_table(self) -> None:
        """Test a 2000-row table renders quickly and completely."""
        table = _numbered_table(2000)

        start_time = time.perf_counter()
        output = _render(table)
        processing_time = time.perf_counter() - start_time

        assert processing_time < 5.0, f"Rendering took too long: {processing_time:.2f} seconds"
        lines = output.splitlines()
        assert len(lines) == 2002
        assert lines[1] == "||-------||-------||-------||-------||-------||"
        assert lines[-1] == "|| r1999c0 || r1999c1 || r1999c2 || r1999c3 || r1999c4 ||"
        assert lines[2] == "|| r0c0    || r0c1    || r0c2    || r0c3    || r0c4    ||"


@pytest.mark.unit
class TestTracRendererIO:
    """Tests for options handling and output destinations."""

    def test_invalid_options_type(self) -> None:
        """Test the renderer rejects foreign options."""
        with pytest.raises(InvalidOptionsError):
            TracRenderer(options=object())  # type: ignore[arg-type]

    def test_render_to_file_path(self, tmp_path: Path) -> None:
        """Test rendering to a file path."""
        output_file = tmp_path / "page.wiki"
        TracRenderer().render(Document(children=[_para(Text(content="hi"))]), str(output_file))
        assert output_file.read_text(encoding="utf-8") == "hi\n"

    def test_render_to_text_stream(self) -> None:
        """Test rendering to a text stream."""
        output = StringIO()
        TracRenderer().render(Document(children=[ThematicBreak()]), output)
        assert output.getvalue() == "----\n"

    def test_render_to_binary_stream(self) -> None:
        """Test rendering to a binary stream encodes UTF-8."""
        output = BytesIO()
        TracRenderer().render(Document(children=[_para(Text(content="日本"))]), output)
        assert output.getvalue() == "日本\n".encode("utf-8")
