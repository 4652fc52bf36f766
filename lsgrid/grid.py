#!/usr/bin/env python3
"""
Grid layout engine.
Fits a sequence of pre-measured cells into columns, either for a fixed
column count or for the best packing under a maximum display width.
"""

from io import StringIO
from typing import Optional, Sequence, TextIO, Tuple, Union
import logging

from .cell import Alignment, GridCell, display_width
from .layout import Dimensions, Direction, calculate_dimensions, cell_index


class Grid:
    """Formats GridCells in a grid like `ls` does.

    The grid keeps a reference to `cells` rather than a copy; the sequence
    must not change while the grid or any Display built from it is in use.
    """

    def __init__(self, separator: Union[str, int], direction: Direction, cells: Sequence[GridCell]):
        """
        Args:
            separator: Text placed between columns, or a number of spaces
            direction: Order in which cells fill the grid
            cells: Pre-measured cells, in display order
        """
        if isinstance(separator, int):
            separator = ' ' * separator
        self.separator = separator
        self.separator_width = display_width(separator)
        self.direction = Direction(direction)
        self.cells = cells
        self.logger = logging.getLogger('lsgrid.grid')

    @property
    def total_cell_count(self) -> int:
        return len(self.cells)

    def fit_into_columns(self, num_columns: int) -> 'Display':
        """Lay the cells out in exactly `num_columns` columns."""
        return Display(self.calculate_dimensions(num_columns), self)

    def fit_into_width(self, display_width: int) -> Optional['Display']:
        """
        Find a well packed layout no wider than `display_width`.

        Returns:
            The Display, or None when a single cell is at least as wide as
            `display_width` and no column layout can hold it
        """
        if not self.cells:
            return Display(Dimensions(num_rows=1, column_widths=()), self)

        max_cell_width = max(cell.width for cell in self.cells)
        if max_cell_width >= display_width:
            self.logger.debug("Widest cell (%d) does not fit in width %d", max_cell_width, display_width)
            return None

        total_width = (sum(cell.width for cell in self.cells)
                       + (self.total_cell_count - 1) * self.separator_width)
        if total_width <= display_width:
            return Display(Dimensions.one_row(self.cells), self)

        return Display(self._search_dimensions(max_cell_width, display_width), self)

    def _search_dimensions(self, max_cell_width: int, display_width: int) -> Dimensions:
        cell_count = self.total_cell_count

        # start from the column count every cell is guaranteed to fit in
        num_columns = max(1, display_width // (max_cell_width + self.separator_width))
        dimensions = self.calculate_dimensions(num_columns)

        # top-to-bottom can leave trailing columns empty; drop them
        while num_columns > 1 and dimensions.last_column_cell_count(cell_count, self.direction) == 0:
            num_columns -= 1
            dimensions = self.calculate_dimensions(num_columns)

        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug("Seeding search with %d columns, %d rows", num_columns, dimensions.num_rows)

        while True:
            num_columns += 1
            candidate = self.calculate_dimensions(num_columns)

            if candidate.total_width(self.separator_width) > display_width:
                if self.logger.isEnabledFor(logging.DEBUG):
                    self.logger.debug("Stopping at %d columns (width %d > %d)", num_columns,
                                      candidate.total_width(self.separator_width), display_width)
                break
            if candidate.is_well_packed(cell_count, dimensions.num_rows, self.direction):
                if self.logger.isEnabledFor(logging.DEBUG):
                    self.logger.debug("Adopting %d columns, %d rows", num_columns, candidate.num_rows)
                dimensions = candidate

        return dimensions

    def calculate_dimensions(self, num_columns: int) -> Dimensions:
        return calculate_dimensions(self.cells, num_columns, self.direction)


class Display:
    """Renderable result of fitting a Grid"""

    def __init__(self, dimensions: Dimensions, grid: Grid):
        self.dimensions = dimensions
        self.grid = grid

    @property
    def num_rows(self) -> int:
        return self.dimensions.num_rows

    @property
    def num_columns(self) -> int:
        return self.dimensions.num_columns

    @property
    def column_widths(self) -> Tuple[int, ...]:
        return self.dimensions.column_widths

    @property
    def width(self) -> int:
        """Total width of the widest possible row, separators included."""
        return self.dimensions.total_width(self.grid.separator_width)

    def write(self, target: TextIO) -> None:
        """Render the grid into any object with a `write(str)` method."""
        cells = self.grid.cells
        total_cell_count = len(cells)
        if total_cell_count == 0:
            target.write('\n')
            return

        direction = self.grid.direction
        num_rows = self.dimensions.num_rows
        num_columns = self.dimensions.num_columns
        last_column = num_columns - 1
        cells_written = 0

        for row in range(num_rows):
            for column in range(num_columns):
                index = cell_index(row, column, num_columns, num_rows, direction)
                if index >= total_cell_count:
                    continue

                cells_written += 1
                cell = cells[index]

                # left aligned cells in the last column, and the last cell written,
                # get neither padding nor separator
                if ((column == last_column or cells_written == total_cell_count)
                        and cell.alignment == Alignment.LEFT):
                    target.write(str(cell.contents))
                else:
                    cell.write(target, self.dimensions.column_widths[column])
                    target.write(self.grid.separator)
            target.write('\n')

    def __str__(self) -> str:
        buffer = StringIO()
        self.write(buffer)
        return buffer.getvalue()

    def __repr__(self) -> str:
        return f"Display(num_rows={self.num_rows}, column_widths={self.column_widths})"
