"""
Grid of cells and its text rendering.

Example:
    from papergrid import Grid

    grid = Grid(2, 2)
    grid.cell(0, 0).set_content("0-0")
    grid.cell(0, 1).set_content("0-1")
    grid.cell(1, 0).set_content("1-0")
    grid.cell(1, 1).set_content("1-1")
    print(grid.render(), end="")

    +---+---+
    |0-0|0-1|
    +---+---+
    |1-0|1-1|
    +---+---+
"""

from __future__ import annotations

import logging

from .cell import Cell
from .composer import concat_row, join_rows
from .exceptions import AxisIndexError, CellIndexError
from .formatter import CellFormatter
from .models import RenderPlan

logger = logging.getLogger(__name__)


class Grid:
    """A fixed-shape, row-major matrix of cells."""

    def __init__(self, rows: int, columns: int) -> None:
        """
        Allocate a grid of default cells.

        Args:
            rows: Number of rows (may be 0)
            columns: Number of columns (may be 0)

        Raises:
            ValueError: If rows or columns is negative
        """
        if rows < 0 or columns < 0:
            raise ValueError(f"Grid shape must be non-negative, got {rows}x{columns}")
        self._shape = (rows, columns)
        self._cells = [Cell() for _ in range(rows * columns)]

    def __repr__(self) -> str:
        return f"Grid(rows={self._shape[0]}, columns={self._shape[1]})"

    def __str__(self) -> str:
        return self.render()

    def count_rows(self) -> int:
        return self._shape[0]

    def count_columns(self) -> int:
        return self._shape[1]

    def cell(self, i: int, j: int) -> Cell:
        """
        Get the cell at row i, column j for in-place configuration.

        Raises:
            CellIndexError: If (i, j) lies outside the grid
        """
        if not (0 <= i < self.count_rows() and 0 <= j < self.count_columns()):
            raise CellIndexError(i, j, self._shape)
        return self._cells[self.count_columns() * i + j]

    def row(self, i: int) -> list[Cell]:
        """
        Get the cells of row i, in column order.

        Raises:
            AxisIndexError: If i lies outside the grid
        """
        if not 0 <= i < self.count_rows():
            raise AxisIndexError("row", i, self._shape)
        start = self.count_columns() * i
        return self._cells[start : start + self.count_columns()]

    def column(self, j: int) -> list[Cell]:
        """
        Get the cells of column j, in row order.

        Raises:
            AxisIndexError: If j lies outside the grid
        """
        if not 0 <= j < self.count_columns():
            raise AxisIndexError("column", j, self._shape)
        return self._cells[j :: self.count_columns()]

    def row_heights(self) -> list[int]:
        """Tallest cell of each row, in lines."""
        return [
            max((cell.height() for cell in self.row(i)), default=0)
            for i in range(self.count_rows())
        ]

    def column_widths(self) -> list[int]:
        """Widest cell of each column, in characters."""
        return [
            max((cell.weight() for cell in self.column(j)), default=0)
            for j in range(self.count_columns())
        ]

    def render(self) -> str:
        """
        Render the grid as bordered text.

        Every row is followed by a line break. Neighbouring cells share a
        single border.

        Returns:
            The rendered block, or an empty string for an empty grid

        Raises:
            LineCountMismatchError: If the cells of a row cannot be aligned
        """
        if not self.count_rows() or not self.count_columns():
            return ""

        heights = self.row_heights()
        widths = self.column_widths()
        logger.debug(
            "Rendering %dx%d grid (row heights %s, column widths %s)",
            self.count_rows(),
            self.count_columns(),
            heights,
            widths,
        )

        rows: list[str] = []
        for i, height in enumerate(heights):
            formatted = [
                CellFormatter(RenderPlan.for_position(i, j, widths[j], height)).format(cell)
                for j, cell in enumerate(self.row(i))
            ]
            rows.append(concat_row(formatted))

        return join_rows(rows)
