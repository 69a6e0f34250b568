#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/all2trac/renderers/_table_layout.py
"""Column width bookkeeping and synthesized table lines.

Trac tables are aligned by padding every cell of a column to the widest cell
in that column. Measuring a column means rendering each of its cells, so the
result is cached per column. The cache only remembers the table it was last
asked about; asking about a different table starts over.

"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from all2trac.ast.nodes import Table
from all2trac.ast.tables import column_width_cookie
from all2trac.constants import (
    MIN_RULE_WIDTH,
    TRAC_COLUMN_SEPARATOR,
    TRAC_RULE_CHAR,
    TRAC_TABLE_LEFT_BORDER,
    TRAC_TABLE_RIGHT_BORDER,
)

logger = logging.getLogger(__name__)

ColumnMeasure = Callable[[Table, int], int]


class ColumnWidthCache:
    """Lazily computed column widths for the most recently queried table.

    Parameters
    ----------
    measure : callable
        ``measure(table, column)`` returns the display width of the widest
        cell in ``column``. Called at most once per column until the cache is
        invalidated.

    Notes
    -----
    An explicit width cookie (``<10>``) wins over measuring. Cookies are
    looked up once per column, like measured widths.
    Instances are not thread-safe; use one per renderer.

    """

    def __init__(self, measure: ColumnMeasure):
        self._measure = measure
        self._table: Optional[Table] = None
        self._widths: dict[int, int] = {}

    def width(self, table: Table, column: int) -> int:
        """Return the width of ``column`` in ``table``.

        Parameters
        ----------
        table : Table
            Table being rendered
        column : int
            Zero-based column index (special column excluded)

        Returns
        -------
        int
            Cookie width if present, otherwise the widest cell's display width

        """
        if self._table is not table:
            if self._table is not None:
                logger.debug("Column width cache invalidated for new table (%d cached columns dropped)", len(self._widths))
            self._table = table
            self._widths = {}

        if column not in self._widths:
            cookie = column_width_cookie(table, column)
            self._widths[column] = cookie if cookie is not None else self._measure(table, column)
        return self._widths[column]

    def reset(self) -> None:
        """Forget the cached table and all its widths."""
        self._table = None
        self._widths = {}


def build_hline(widths: Sequence[int]) -> str:
    """Build a horizontal rule line for columns of the given widths.

    >>> build_hline([1, 5])
    '||---||-----||'

    """
    segments = [TRAC_RULE_CHAR * max(MIN_RULE_WIDTH, width) for width in widths]
    return TRAC_TABLE_LEFT_BORDER + TRAC_COLUMN_SEPARATOR.join(segments) + TRAC_TABLE_RIGHT_BORDER


def build_blank_row(widths: Sequence[int]) -> str:
    """Build an empty row for columns of the given widths, used as a dummy header."""
    cells = [" " * max(MIN_RULE_WIDTH, width) for width in widths]
    return TRAC_TABLE_LEFT_BORDER + TRAC_COLUMN_SEPARATOR.join(cells) + TRAC_TABLE_RIGHT_BORDER


__all__ = ["ColumnWidthCache", "build_hline", "build_blank_row"]
