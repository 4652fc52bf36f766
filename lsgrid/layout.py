#!/usr/bin/env python3
"""
Grid geometry: traversal directions, cell-to-column mapping and the
packing rules used by the width-fitting search.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Tuple

from .cell import GridCell


class Direction(Enum):
    """Order in which cells are placed into the grid"""
    LEFT_TO_RIGHT = 'across'  # row-major, like a typewriter
    TOP_TO_BOTTOM = 'down'    # column-major, like `ls -C`


def div_ceil(lhs: int, rhs: int) -> int:
    """Integer division rounding towards positive infinity."""
    quotient, remainder = divmod(lhs, rhs)
    return quotient + 1 if remainder > 0 else quotient


def column_index(cell_index: int, num_columns: int, num_rows: int, direction: Direction) -> int:
    if direction == Direction.LEFT_TO_RIGHT:
        return cell_index % num_columns
    return cell_index // num_rows


def cell_index(row: int, column: int, num_columns: int, num_rows: int, direction: Direction) -> int:
    """Inverse of `column_index`: the cell shown at (row, column)."""
    if direction == Direction.LEFT_TO_RIGHT:
        return row * num_columns + column
    return row + num_rows * column


@dataclass(frozen=True)
class Dimensions:
    """Row count and per-column widths of one candidate layout"""

    num_rows: int
    column_widths: Tuple[int, ...]

    @property
    def num_columns(self) -> int:
        return len(self.column_widths)

    def total_width(self, separator_width: int) -> int:
        if not self.column_widths:
            return 0
        return sum(self.column_widths) + (self.num_columns - 1) * separator_width

    def last_column_cell_count(self, cell_count: int, direction: Direction) -> int:
        if direction == Direction.LEFT_TO_RIGHT:
            return cell_count // self.num_columns
        return max(0, cell_count - self.num_rows * (self.num_columns - 1))

    def is_well_packed(self, cell_count: int, previous_num_rows: int, direction: Direction) -> bool:
        """
        A candidate beats the previous best when:
        1. it needs a different (fewer) number of rows; with equal rows the
           previous candidate wins because it has fewer columns
        2. its last column is occupied but not past the row count
        """
        last_column_cells = self.last_column_cell_count(cell_count, direction)
        return 0 < last_column_cells <= self.num_rows and self.num_rows != previous_num_rows

    @classmethod
    def one_row(cls, cells: Sequence[GridCell]) -> 'Dimensions':
        return cls(num_rows=1, column_widths=tuple(cell.width for cell in cells))


def calculate_dimensions(cells: Sequence[GridCell], num_columns: int, direction: Direction) -> Dimensions:
    """Assign every cell to a column and size each column to its widest cell."""
    num_rows = div_ceil(len(cells), num_columns)
    column_widths = [0] * num_columns

    for index, cell in enumerate(cells):
        column = column_index(index, num_columns, num_rows, direction)
        if cell.width > column_widths[column]:
            column_widths[column] = cell.width

    return Dimensions(num_rows=num_rows, column_widths=tuple(column_widths))
