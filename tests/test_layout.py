#!/usr/bin/env python3
"""Unit tests for grid geometry helpers."""

import os
import sys

import pytest

# Ensure project root is on the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from lsgrid.cell import GridCell  # noqa: E402
from lsgrid.layout import (  # noqa: E402
    Dimensions,
    Direction,
    calculate_dimensions,
    cell_index,
    column_index,
    div_ceil,
)


FILES = [
    "file10", "file20", "file3", "file400", "file5",
    "file100", "file2", "file30", "file4", "file500",
    "file1", "file200", "file300", "file40", "file50",
]


def _cells(labels=FILES):
    return [GridCell(label) for label in labels]


@pytest.mark.parametrize("lhs,rhs,expected", [
    (0, 3, 0),
    (1, 3, 1),
    (3, 3, 1),
    (4, 3, 2),
    (15, 4, 4),
    (15, 5, 3),
])
def test_div_ceil(lhs, rhs, expected):
    assert div_ceil(lhs, rhs) == expected


def test_left_to_right_dimensions():
    dims = calculate_dimensions(_cells(), 4, Direction.LEFT_TO_RIGHT)
    assert dims.num_rows == 4
    assert dims.column_widths == (7, 7, 6, 7)
    assert dims.total_width(2) == 33


def test_top_to_bottom_dimensions():
    dims = calculate_dimensions(_cells(), 4, Direction.TOP_TO_BOTTOM)
    assert dims.num_rows == 4
    assert dims.column_widths == (7, 7, 7, 7)
    assert dims.total_width(2) == 34


def test_top_to_bottom_leaves_trailing_column_empty():
    dims = calculate_dimensions(_cells(list("abcdefghi")), 4, Direction.TOP_TO_BOTTOM)
    assert dims.num_rows == 3
    assert dims.column_widths == (1, 1, 1, 0)
    assert dims.last_column_cell_count(9, Direction.TOP_TO_BOTTOM) == 0


@pytest.mark.parametrize("direction", list(Direction))
@pytest.mark.parametrize("num_columns", [1, 2, 3, 4, 5, 7, 15, 20])
def test_every_cell_fits_its_column(direction, num_columns):
    cells = _cells()
    dims = calculate_dimensions(cells, num_columns, direction)
    for index, cell in enumerate(cells):
        column = column_index(index, num_columns, dims.num_rows, direction)
        assert cell.width <= dims.column_widths[column]


@pytest.mark.parametrize("direction", list(Direction))
def test_cell_index_inverts_column_mapping(direction):
    num_columns = 4
    num_rows = div_ceil(len(FILES), num_columns)
    seen = set()
    for row in range(num_rows):
        for column in range(num_columns):
            index = cell_index(row, column, num_columns, num_rows, direction)
            if index < len(FILES):
                assert column_index(index, num_columns, num_rows, direction) == column
                seen.add(index)
    assert seen == set(range(len(FILES)))


@pytest.mark.parametrize("direction,expected", [
    (Direction.LEFT_TO_RIGHT, 3),
    (Direction.TOP_TO_BOTTOM, 3),
])
def test_last_column_cell_count(direction, expected):
    dims = calculate_dimensions(_cells(), 4, direction)
    assert dims.last_column_cell_count(15, direction) == expected


def test_well_packed_requires_fewer_rows():
    dims = calculate_dimensions(_cells(), 4, Direction.LEFT_TO_RIGHT)
    assert dims.is_well_packed(15, 5, Direction.LEFT_TO_RIGHT)
    assert not dims.is_well_packed(15, 4, Direction.LEFT_TO_RIGHT)


def test_well_packed_rejects_empty_last_column():
    dims = calculate_dimensions(_cells(list("abcdefghi")), 4, Direction.TOP_TO_BOTTOM)
    assert not dims.is_well_packed(9, 5, Direction.TOP_TO_BOTTOM)


def test_one_row_uses_cell_widths():
    dims = Dimensions.one_row(_cells(["ab", "cde"]))
    assert dims.num_rows == 1
    assert dims.column_widths == (2, 3)
    assert dims.total_width(2) == 7


def test_zero_columns_have_zero_width():
    assert Dimensions(num_rows=1, column_widths=()).total_width(2) == 0
