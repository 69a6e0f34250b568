#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/all2trac/ast/tables.py
"""Read-only queries over table nodes.

Outline-format tables mix content rows with rows that only carry layout
instructions. This module answers the questions renderers ask about a table
without ever modifying it:

- which rows are exported, and at which position
- how many rows and columns the exported table has
- whether the first column is a marker column rather than content
- explicit column widths given by cookies such as ``<10>``
- where column groups start

Conventions
-----------
A table has a *special column* when every non-rule row starts with an empty
cell or one of the markers ``# ! $ * _ ^ /``, and at least one marker is
present. The special column is never exported and is skipped when cells are
addressed by column index.

A row is *special* (and never exported) when the table has a special column
and the row's first cell is one of ``/ ! ^ _ $``, or when every cell of the
row is empty or a cookie and at least one cookie is present. The ``/`` row
defines column groups with ``<``, ``>`` and ``<>`` markers.

Examples
--------
    >>> from all2trac.ast.builder import TableBuilder
    >>> table = TableBuilder().add_row(["Name", "Qty"]).add_rule().add_row(["bolt", "12"]).get_table()
    >>> table_dimensions(table)
    (2, 2)
    >>> row_index(table, table.rows[1])
    1

"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Optional

from all2trac.ast.nodes import Table, TableCell, TableRow
from all2trac.ast.utils import extract_text
from all2trac.constants import (
    COLGROUP_END_MARKERS,
    COLGROUP_ROW_MARKER,
    COLGROUP_START_MARKERS,
    COOKIE_PATTERN,
    SPECIAL_COLUMN_MARKERS,
    SPECIAL_ROW_MARKERS,
)

_COOKIE_RE = re.compile(rf"\A{COOKIE_PATTERN}\Z")


def cell_text(cell: TableCell) -> str:
    """Return the stripped plain text of a cell."""
    return extract_text(cell.content).strip()


def _first_cell_text(row: TableRow) -> str:
    return cell_text(row.cells[0]) if row.cells else ""


def has_special_column(table: Table) -> bool:
    """Return True when the first column of ``table`` holds markers rather than content.

    Parameters
    ----------
    table : Table
        Table to inspect

    Returns
    -------
    bool
        True if every non-rule row starts with an empty cell or a marker,
        and at least one row starts with a marker

    """
    found_marker = False
    for row in table.rows:
        if row.is_rule:
            continue
        value = _first_cell_text(row)
        if value in SPECIAL_COLUMN_MARKERS:
            found_marker = True
        elif value:
            return False
    return found_marker


def _is_cookie_row(row: TableRow) -> bool:
    found_cookie = False
    for cell in row.cells:
        value = cell_text(cell)
        if _COOKIE_RE.match(value):
            found_cookie = True
        elif value:
            return False
    return found_cookie


def _is_special_row(row: TableRow, special_column: bool) -> bool:
    if row.is_rule:
        return False
    if special_column and _first_cell_text(row) in SPECIAL_ROW_MARKERS:
        return True
    return _is_cookie_row(row)


def is_special_row(table: Table, row: TableRow) -> bool:
    """Return True when ``row`` only carries layout instructions and is not exported."""
    return _is_special_row(row, has_special_column(table))


def row_cells(table: Table, row: TableRow, special_column: Optional[bool] = None) -> list[TableCell]:
    """Return the cells of ``row`` addressed by column index (special column dropped).

    Parameters
    ----------
    table : Table
        Table the row belongs to
    row : TableRow
        Row whose cells are wanted
    special_column : bool, optional
        Precomputed ``has_special_column(table)``; computed when omitted

    """
    if special_column is None:
        special_column = has_special_column(table)
    return row.cells[1:] if special_column else list(row.cells)


@dataclass(frozen=True, eq=False)
class TableLayout:
    """Everything a renderer needs to know about a table, computed in one pass.

    The queries below each rescan the table; a renderer touching every cell
    should build one layout per table instead. The layout is a snapshot and
    goes stale if the table is mutated afterwards.

    Attributes
    ----------
    table : Table
        The table the layout describes
    special_column : bool
        Whether the first column holds markers
    rows : list of TableRow
        Exported rows (rule rows included), in source order
    row_count : int
        Number of exported standard rows
    column_count : int
        Cells per row, special column excluded
    cookies : dict
        Explicit width per column index, from the first numeric cookie
    colgroup_markers : list of str
        Cells of the ``/`` row, special column excluded

    """

    table: Table
    special_column: bool
    rows: list[TableRow]
    row_count: int
    column_count: int
    cookies: dict[int, int]
    colgroup_markers: list[str]
    _positions: dict[int, int] = field(repr=False)

    @classmethod
    def of(cls, table: Table) -> TableLayout:
        """Build the layout of ``table``."""
        special_column = has_special_column(table)
        rows: list[TableRow] = []
        special_rows: list[TableRow] = []
        for row in table.rows:
            (special_rows if _is_special_row(row, special_column) else rows).append(row)

        standard_rows = [row for row in rows if not row.is_rule]
        # Without content rows, the layout rows still tell how many columns there are
        shape_row = standard_rows[0] if standard_rows else next(iter(special_rows), None)
        column_count = len(row_cells(table, shape_row, special_column)) if shape_row else 0

        cookies: dict[int, int] = {}
        markers: list[str] = []
        for row in special_rows:
            cells = row_cells(table, row, special_column)
            if special_column and not markers and _first_cell_text(row) == COLGROUP_ROW_MARKER:
                markers = [cell_text(cell) for cell in cells]
            for column, cell in enumerate(cells):
                match = _COOKIE_RE.match(cell_text(cell))
                if match and match.group(1):
                    cookies.setdefault(column, int(match.group(1)))

        positions: dict[int, int] = {}
        for index, row in enumerate(rows):
            positions.setdefault(id(row), index)

        return cls(
            table=table,
            special_column=special_column,
            rows=rows,
            row_count=len(standard_rows),
            column_count=column_count,
            cookies=cookies,
            colgroup_markers=markers,
            _positions=positions,
        )

    def cells(self, row: TableRow) -> list[TableCell]:
        """Return the cells of ``row`` addressed by column index."""
        return row_cells(self.table, row, self.special_column)

    def row_index(self, row: TableRow) -> int:
        """Return the position of ``row`` among the exported rows.

        Raises
        ------
        ValueError
            If ``row`` is not an exported row of the table

        """
        try:
            return self._positions[id(row)]
        except KeyError:
            raise ValueError("Row is not an exported row of the given table") from None

    def starts_colgroup(self, column: int) -> bool:
        """Return True when the cell at ``column`` opens a column group."""
        if column == 0:
            return True
        markers = self.colgroup_markers
        if column < len(markers) and markers[column] in COLGROUP_START_MARKERS:
            return True
        return column - 1 < len(markers) and markers[column - 1] in COLGROUP_END_MARKERS


def exportable_rows(table: Table) -> list[TableRow]:
    """Return the rows of ``table`` that are exported, in source order.

    Rule rows are included; special rows are not.

    """
    special_column = has_special_column(table)
    return [row for row in table.rows if not _is_special_row(row, special_column)]


def table_dimensions(table: Table) -> tuple[int, int]:
    """Return ``(rows, columns)`` of the exported table.

    Rows counts exported standard rows; rule rows and special rows are not
    counted. Columns is the number of cells in the first exported standard
    row, special column excluded. A table without standard rows takes its
    column count from its first special row, so a table holding only
    cookies still has columns.

    """
    layout = TableLayout.of(table)
    return layout.row_count, layout.column_count


def row_index(table: Table, row: TableRow) -> int:
    """Return the position of ``row`` among the exported rows of ``table``.

    Raises
    ------
    ValueError
        If ``row`` is not an exported row of ``table``

    """
    return TableLayout.of(table).row_index(row)


def column_width_cookie(table: Table, column: int) -> Optional[int]:
    """Return the explicit width set by a cookie for ``column``, if any.

    Cookies live in special rows, e.g. ``| <10> | <l5> |``. Cookies without a
    number (``<l>``) only set alignment and are ignored here.

    Parameters
    ----------
    table : Table
        Table to inspect
    column : int
        Zero-based column index (special column excluded)

    Returns
    -------
    int or None
        The first width found in that column, or None

    """
    return TableLayout.of(table).cookies.get(column)


def cell_starts_colgroup(table: Table, column: int) -> bool:
    """Return True when the cell at ``column`` opens a column group.

    The first column always opens a group. Other groups start where the
    ``/`` row has ``<`` or ``<>`` in this column, or ``>`` or ``<>`` in the
    previous one.

    """
    return TableLayout.of(table).starts_colgroup(column)


__all__ = [
    "cell_text",
    "has_special_column",
    "is_special_row",
    "exportable_rows",
    "row_cells",
    "TableLayout",
    "table_dimensions",
    "row_index",
    "column_width_cookie",
    "cell_starts_colgroup",
]
