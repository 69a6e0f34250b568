#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/all2trac/renderers/trac.py
"""Trac wiki rendering from AST.

This module provides the TracRenderer class which converts AST nodes to
Trac wiki markup. Most node kinds map to a fixed string pattern. Tables get
more care: every cell in a column is padded to the same display width, a
rule in the second row becomes a dashed separator line, and a table with at
most one row gets an empty header row and separator so Trac still draws it
as a table.

"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import IO, Optional, Union

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
from all2trac.ast.tables import TableLayout
from all2trac.ast.visitors import NodeVisitor
from all2trac.constants import (
    RULE_ROW_INDEX,
    TRAC_BLOCK_QUOTE_PREFIX,
    TRAC_CELL_CLOSER,
    TRAC_CELL_SEPARATOR,
    TRAC_CODE_FENCE_CLOSE,
    TRAC_CODE_FENCE_OPEN,
    TRAC_COLGROUP_OPENER,
    TRAC_COMMENT_TRIGGER,
    TRAC_EMPHASIS,
    TRAC_ESCAPE_CHAR,
    TRAC_HEADING_CHAR,
    TRAC_INLINE_CODE,
    TRAC_LINE_BREAK,
    TRAC_PROCESSOR_PREFIX,
    TRAC_STRIKETHROUGH,
    TRAC_STRONG,
    TRAC_SUBSCRIPT_PREFIX,
    TRAC_SUPERSCRIPT,
    TRAC_THEMATIC_BREAK,
)
from all2trac.exceptions import RenderingError
from all2trac.options.trac import TracRendererOptions
from all2trac.renderers._table_layout import ColumnWidthCache, build_blank_row, build_hline
from all2trac.renderers.base import BaseRenderer, InlineContentMixin
from all2trac.utils.text import collapse_whitespace, display_width, pad_to_width

logger = logging.getLogger(__name__)

_NEWLINE_RUN = re.compile(r"\n{2,}")
_WHITESPACE_RUN = re.compile(r"\s+")


class TracRenderer(NodeVisitor, InlineContentMixin, BaseRenderer):
    """Render AST nodes to Trac wiki markup.

    This class implements the visitor pattern to traverse an AST and
    generate markup for the Trac wiki.

    Parameters
    ----------
    options : TracRendererOptions or None, default = None
        Trac rendering options

    Notes
    -----
    Column widths are cached per renderer while a document renders, so one
    renderer instance must not be shared between threads.

    Examples
    --------
    Basic usage:

        >>> from all2trac.ast import Document, Heading, Text
        >>> from all2trac.renderers.trac import TracRenderer
        >>> doc = Document(children=[
        ...     Heading(level=1, content=[Text(content="Title")])
        ... ])
        >>> print(TracRenderer().render_to_string(doc))
        == Title

    """

    def __init__(self, options: TracRendererOptions | None = None):
        """Initialize the Trac renderer with options."""
        BaseRenderer._validate_options_type(options, TracRendererOptions, "trac")
        options = options or TracRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: TracRendererOptions = options
        self._output: list[str] = []
        self._list_level: int = 0
        self._list_number_stack: list[Optional[int]] = []
        self._current_layout: Optional[TableLayout] = None
        self._width_cache = ColumnWidthCache(self._measure_column)

    def render_to_string(self, document: Document) -> str:
        """Render a document AST to a Trac markup string.

        Parameters
        ----------
        document : Document
            The document node to render

        Returns
        -------
        str
            Trac wiki markup ending with a single newline

        """
        self._output = []
        self._list_level = 0
        self._list_number_stack = []
        self._current_layout = None
        self._width_cache.reset()

        document.accept(self)

        result = "".join(self._output)
        return result.rstrip() + "\n"

    def render(self, document: Document, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render a document to an output destination.

        Parameters
        ----------
        document : Document
            Document to render
        output : str, Path, IO[bytes], or IO[str]
            Output destination (file path or file-like object)

        """
        content = self.render_to_string(document)
        self.write_text_output(content, output)

    def _render_block(self, node: Node) -> str:
        """Render a block node on its own, without trailing newlines."""
        return self._render_inline_content([node]).rstrip("\n")

    def _reflow(self, content: str) -> str:
        if self.options.preserve_breaks:
            return content
        return _WHITESPACE_RUN.sub(" ", content).strip()

    # Block nodes

    def visit_document(self, node: Document) -> None:
        """Render a Document node.

        Blocks are separated by one blank line. Blocks that render to nothing
        (such as tables without columns) are left out.

        """
        blocks = [self._render_block(child) for child in node.children]
        self._output.append("\n\n".join(block for block in blocks if block.strip()))

    def visit_heading(self, node: Heading) -> None:
        """Render a Heading node.

        Trac headings use one more ``=`` than the outline level: ``== Title``.

        """
        content = collapse_whitespace(self._render_inline_content(node.content))
        self._output.append(f"{TRAC_HEADING_CHAR * (node.level + 1)} {content}")

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a Paragraph node.

        Whitespace runs collapse to single spaces unless ``preserve_breaks``
        is set. A leading ``#`` would start a processor block in Trac, so it
        is escaped.

        """
        content = self._reflow(self._render_inline_content(node.content))
        if content.startswith(TRAC_COMMENT_TRIGGER):
            content = TRAC_ESCAPE_CHAR + content
        self._output.append(content)

    def visit_code_block(self, node: CodeBlock) -> None:
        """Render a CodeBlock node.

        Source blocks open with a processor line such as ``{{{#!python``.
        Blocks without a language use a plain ``{{{`` fence.

        Parameters
        ----------
        node : CodeBlock
            Code block to render

        """
        opener = TRAC_CODE_FENCE_OPEN
        if node.language:
            language = self.options.language_aliases.get(node.language, node.language)
            opener += f"{TRAC_PROCESSOR_PREFIX}{language}"
        lines = [opener]
        if node.content:
            lines.append(node.content.rstrip("\n"))
        lines.append(TRAC_CODE_FENCE_CLOSE)
        self._output.append("\n".join(lines))

    def visit_block_quote(self, node: BlockQuote) -> None:
        """Render a BlockQuote node with every line prefixed by ``> ``."""
        blocks = [self._render_block(child) for child in node.children]
        text = "\n\n".join(block for block in blocks if block.strip())
        lines = []
        for line in text.split("\n"):
            lines.append(f"{TRAC_BLOCK_QUOTE_PREFIX}{line}" if line.strip() else TRAC_BLOCK_QUOTE_PREFIX.rstrip())
        self._output.append("\n".join(lines))

    def visit_list(self, node: List) -> None:
        """Render a List node.

        Parameters
        ----------
        node : List
            List to render

        """
        self._list_level += 1
        self._list_number_stack.append(node.start if node.ordered else None)
        for item in node.items:
            item.accept(self)
        self._list_number_stack.pop()
        self._list_level -= 1

    def visit_list_item(self, node: ListItem) -> None:
        """Render a ListItem node.

        Items are indented one space at the top level and two more per
        nesting level. Unordered items use ``*``. The first item of an ordered
        list carries the list's start number and the rest use ``1.``.

        """
        indent = " " + "  " * (self._list_level - 1)
        number = self._list_number_stack[-1] if self._list_number_stack else None
        if number is None:
            marker = "*"
        else:
            marker = f"{number}."
            # Trac numbers the rest of the list from the first item
            self._list_number_stack[-1] = 1

        children = list(node.children)
        text = ""
        if children and isinstance(children[0], Paragraph):
            text = self._reflow(self._render_inline_content(children.pop(0).content))
        self._output.append(f"{indent}{marker} {text}".rstrip() + "\n")

        for child in children:
            if isinstance(child, List):
                child.accept(self)
            else:
                self._output.append(self._render_block(child) + "\n")

    def visit_thematic_break(self, node: ThematicBreak) -> None:
        """Render a ThematicBreak node."""
        self._output.append(TRAC_THEMATIC_BREAK)

    # Tables

    def visit_table(self, node: Table) -> None:
        """Render a Table node.

        Tables with at most one row get a dummy header (an empty row and a
        separator line) first. Rows are then rendered in order, each on its
        own line. Empty lines left by rule rows outside the second position
        are squeezed out.

        Parameters
        ----------
        node : Table
            Table to render

        """
        layout = TableLayout.of(node)
        logger.debug("Rendering table with %d rows and %d columns", layout.row_count, layout.column_count)
        if layout.column_count == 0:
            return

        saved_layout = self._current_layout
        self._current_layout = layout
        try:
            parts: list[str] = []
            if layout.row_count <= 1:
                widths = self._column_widths(layout)
                parts.append(build_blank_row(widths) + "\n")
                parts.append(build_hline(widths) + "\n")
            for row in layout.rows:
                parts.append(self._render_block(row) + "\n")
        finally:
            self._current_layout = saved_layout

        text = _NEWLINE_RUN.sub("\n", "".join(parts)).lstrip("\n")
        self._output.append(text)

    def visit_table_row(self, node: TableRow) -> None:
        """Render a TableRow node.

        A rule row in the second position renders as the separator line.
        Any other row is the concatenation of its cells.

        Raises
        ------
        RenderingError
            If the row is rendered outside of a table

        """
        layout = self._current_layout
        if layout is None:
            raise RenderingError("Table row rendered outside of a table", rendering_stage="table")

        if node.is_rule and layout.row_index(node) == RULE_ROW_INDEX:
            self._output.append(build_hline(self._column_widths(layout)))
            return

        for column, cell in enumerate(layout.cells(node)):
            self._output.append(self._render_table_cell(layout, cell, column))

    def visit_table_cell(self, node: TableCell) -> None:
        """Render the content of a TableCell node, collapsed to one line."""
        self._output.append(collapse_whitespace(self._render_inline_content(node.content)))

    def _cell_content(self, cell: TableCell) -> str:
        return self._render_inline_content([cell])

    def _column_widths(self, layout: TableLayout) -> list[int]:
        return [self._width_cache.width(layout.table, column) for column in range(layout.column_count)]

    def _layout_for(self, table: Table) -> TableLayout:
        layout = self._current_layout
        if layout is not None and layout.table is table:
            return layout
        return TableLayout.of(table)

    def _render_table_cell(self, layout: TableLayout, cell: TableCell, column: int) -> str:
        """Render one cell with its borders and padding.

        Parameters
        ----------
        layout : TableLayout
            Layout of the table the cell belongs to
        cell : TableCell
            Cell to render
        column : int
            Zero-based column index (special column excluded)

        Returns
        -------
        str
            ``"|| "`` or ``" "``, the padded content, and ``" ||"``

        """
        content = pad_to_width(self._cell_content(cell), self._width_cache.width(layout.table, column))
        left = TRAC_COLGROUP_OPENER if layout.starts_colgroup(column) else TRAC_CELL_SEPARATOR
        return f"{left}{content}{TRAC_CELL_CLOSER}"

    def _measure_column(self, table: Table, column: int) -> int:
        """Return the display width of the widest rendered cell in ``column``."""
        layout = self._layout_for(table)
        widest = 0
        for row in layout.rows:
            if row.is_rule:
                continue
            cells = layout.cells(row)
            if column < len(cells):
                widest = max(widest, display_width(self._cell_content(cells[column])))
        return widest

    # Inline nodes

    def visit_text(self, node: Text) -> None:
        """Render a Text node."""
        self._output.append(node.content)

    def visit_emphasis(self, node: Emphasis) -> None:
        """Render an Emphasis node as ``''text''``."""
        content = self._render_inline_content(node.content)
        self._output.append(f"{TRAC_EMPHASIS}{content}{TRAC_EMPHASIS}")

    def visit_strong(self, node: Strong) -> None:
        """Render a Strong node as ``'''text'''``."""
        content = self._render_inline_content(node.content)
        self._output.append(f"{TRAC_STRONG}{content}{TRAC_STRONG}")

    def visit_code(self, node: Code) -> None:
        """Render a Code node."""
        self._output.append(f"{TRAC_INLINE_CODE}{node.content}{TRAC_INLINE_CODE}")

    def visit_link(self, node: Link) -> None:
        """Render a Link node.

        Trac links are ``[url text]``, or just ``[url]`` when the text adds
        nothing.

        Parameters
        ----------
        node : Link
            Link to render

        """
        text = self._render_inline_content(node.content).strip()
        if not text or text == node.url:
            self._output.append(f"[{node.url}]")
        else:
            self._output.append(f"[{node.url} {text}]")

    def visit_image(self, node: Image) -> None:
        """Render an Image node with the Image macro."""
        self._output.append(f"[[Image({node.url})]]")

    def visit_line_break(self, node: LineBreak) -> None:
        """Render a LineBreak node.

        Soft breaks are plain newlines; hard breaks use the ``[[BR]]`` macro.

        """
        self._output.append("\n" if node.soft else TRAC_LINE_BREAK)

    def visit_strikethrough(self, node: Strikethrough) -> None:
        """Render a Strikethrough node as ``~~text~~``."""
        content = self._render_inline_content(node.content)
        self._output.append(f"{TRAC_STRIKETHROUGH}{content}{TRAC_STRIKETHROUGH}")

    def visit_superscript(self, node: Superscript) -> None:
        content = self._render_inline_content(node.content)
        self._output.append(f"{TRAC_SUPERSCRIPT}{content}{TRAC_SUPERSCRIPT}")

    def visit_subscript(self, node: Subscript) -> None:
        content = self._render_inline_content(node.content)
        self._output.append(f"{TRAC_SUBSCRIPT_PREFIX}{content}")
