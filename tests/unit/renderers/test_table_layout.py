#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for column width caching and synthesized table lines."""

from unittest.mock import patch

import pytest

from all2trac.ast import Table, TableBuilder, column_width_cookie
from all2trac.renderers._table_layout import ColumnWidthCache, build_blank_row, build_hline


class CountingMeasure:
    """Measure stub returning ``column + 1`` and recording every call."""

    def __init__(self) -> None:
        self.calls: list[tuple[int, int]] = []

    def __call__(self, table: Table, column: int) -> int:
        self.calls.append((id(table), column))
        return column + 1


@pytest.mark.unit
class TestColumnWidthCache:
    """Tests for ColumnWidthCache."""

    def test_width_measured_once(self, two_by_two_table: Table) -> None:
        """Test repeated queries hit the cache."""
        measure = CountingMeasure()
        cache = ColumnWidthCache(measure)

        assert cache.width(two_by_two_table, 1) == 2
        assert cache.width(two_by_two_table, 1) == 2
        assert len(measure.calls) == 1

    def test_columns_measured_lazily(self, two_by_two_table: Table) -> None:
        """Test only queried columns are measured."""
        measure = CountingMeasure()
        cache = ColumnWidthCache(measure)

        cache.width(two_by_two_table, 0)
        assert measure.calls == [(id(two_by_two_table), 0)]

    def test_other_table_invalidates(self, two_by_two_table: Table, header_table: Table) -> None:
        """Test switching tables drops the cached widths."""
        measure = CountingMeasure()
        cache = ColumnWidthCache(measure)

        cache.width(two_by_two_table, 0)
        cache.width(header_table, 0)
        cache.width(two_by_two_table, 0)
        assert len(measure.calls) == 3

    def test_equal_tables_are_distinct(self) -> None:
        """Test tables are told apart by identity, not by value."""
        first = TableBuilder().add_row(["a"]).get_table()
        second = TableBuilder().add_row(["a"]).get_table()
        measure = CountingMeasure()
        cache = ColumnWidthCache(measure)

        cache.width(first, 0)
        cache.width(second, 0)
        assert len(measure.calls) == 2

    def test_cookie_wins(self) -> None:
        """Test an explicit width cookie is returned without measuring."""
        table = TableBuilder().add_row(["<9>"]).add_row(["a"]).get_table()
        measure = CountingMeasure()
        cache = ColumnWidthCache(measure)

        assert cache.width(table, 0) == 9
        assert measure.calls == []

    def test_cookie_looked_up_once_per_column(self) -> None:
        """Test repeated queries do not rescan the table for cookies."""
        table = TableBuilder().add_row(["<9>", ""]).add_row(["a", "b"]).get_table()
        cache = ColumnWidthCache(CountingMeasure())

        with patch(
            "all2trac.renderers._table_layout.column_width_cookie", wraps=column_width_cookie
        ) as lookup:
            for _ in range(5):
                assert cache.width(table, 0) == 9
                assert cache.width(table, 1) == 2
        assert lookup.call_count == 2

    def test_reset(self, two_by_two_table: Table) -> None:
        """Test reset forgets everything."""
        measure = CountingMeasure()
        cache = ColumnWidthCache(measure)

        cache.width(two_by_two_table, 0)
        cache.reset()
        cache.width(two_by_two_table, 0)
        assert len(measure.calls) == 2


@pytest.mark.unit
class TestSynthesizedLines:
    """Tests for rule and blank header lines."""

    def test_hline(self) -> None:
        """Test dash runs follow the column widths."""
        assert build_hline([4, 5]) == "||----||-----||"

    def test_hline_minimum_width(self) -> None:
        """Test narrow columns still get three dashes."""
        assert build_hline([0, 1]) == "||---||---||"

    def test_blank_row(self) -> None:
        """Test blank header cells follow the column widths."""
        assert build_blank_row([0, 4]) == "||   ||    ||"

    def test_single_column(self) -> None:
        """Test a single column has no inner separator."""
        assert build_hline([3]) == "||---||"
        assert build_blank_row([3]) == "||   ||"
