"""
heatgrid/core/layout
~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple

DEFAULT_ROW_LABEL_WIDTH = 300
DEFAULT_COL_LABEL_HEIGHT = 300


@dataclass(frozen=True)
class Box:
    """
    Data class for an axis-aligned rectangle in canvas coordinates (y grows downward).
    """

    top: int
    left: int
    right: int
    bottom: int

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top


@dataclass(frozen=True)
class HeatmapLayout:
    """
    Data class for the canvas partition into label bands and the cells region.
    """

    outer_box: Box
    row_label_box: Box
    column_label_box: Box
    cells_box: Box


def compute_layout(
    width: int,
    height: int,
    *,
    row_label_width: int = DEFAULT_ROW_LABEL_WIDTH,
    col_label_height: int = DEFAULT_COL_LABEL_HEIGHT,
) -> HeatmapLayout:
    """
    Partitions the canvas into the row-label column, the column-label band and the
    cells box. Depends only on canvas size and band sizes, never on grid content.

    Args:
        width (int): Canvas width.
        height (int): Canvas height.

    Kwargs:
        row_label_width (int): Width of the row-label column. Defaults to 300.
        col_label_height (int): Height of the column-label band. Defaults to 300.

    Returns:
        HeatmapLayout: Outer, row-label, column-label and cells boxes.
    """
    outer_box = Box(top=0, left=0, right=int(width), bottom=int(height))
    row_label_box = Box(top=0, left=0, right=int(row_label_width), bottom=outer_box.bottom)
    column_label_box = Box(
        top=0,
        left=row_label_box.right,
        right=outer_box.right,
        bottom=int(col_label_height),
    )
    cells_box = Box(
        top=column_label_box.bottom,
        left=row_label_box.right,
        right=outer_box.right,
        bottom=outer_box.bottom,
    )
    return HeatmapLayout(
        outer_box=outer_box,
        row_label_box=row_label_box,
        column_label_box=column_label_box,
        cells_box=cells_box,
    )


@dataclass(frozen=True)
class Cell:
    """
    Data class pairing one grid value with the box it occupies on screen.
    """

    col: int
    row: int
    value: float
    box: Box


class CellGrid:
    """
    Class for the column-major cell sequence of one render, with typed accessors so
    callers never compute flat offsets themselves.
    """

    def __init__(self, cells: Sequence[Cell], n_cols: int, n_rows: int) -> None:
        """
        Initializes the CellGrid instance.

        Args:
            cells (Sequence[Cell]): Cells in column-major order.
            n_cols (int): Number of grid columns.
            n_rows (int): Number of grid rows.

        Raises:
            ValueError: If the cell count does not equal n_cols * n_rows.
        """
        if len(cells) != n_cols * n_rows:
            raise ValueError(
                f"Expected {n_cols * n_rows} cells for a {n_cols}x{n_rows} grid, got {len(cells)}"
            )
        self._cells: Tuple[Cell, ...] = tuple(cells)
        self.n_cols = n_cols
        self.n_rows = n_rows

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def cell_at(self, col: int, row: int) -> Cell:
        """
        Returns the cell for grid position `grid[col][row]`.

        Args:
            col (int): Column index.
            row (int): Row index.

        Returns:
            Cell: Cell at the requested position.

        Raises:
            IndexError: If either index is out of range.
        """
        if not 0 <= col < self.n_cols:
            raise IndexError(f"column index {col} out of range for {self.n_cols} columns")
        if not 0 <= row < self.n_rows:
            raise IndexError(f"row index {row} out of range for {self.n_rows} rows")
        return self._cells[col * self.n_rows + row]

    def first_cell_of_column(self, col: int) -> Cell:
        """
        Returns the top cell of a column (anchor for column labels).
        """
        return self.cell_at(col, 0)

    def first_cell_of_row(self, row: int) -> Cell:
        """
        Returns the leftmost cell of a row (anchor for row labels).
        """
        return self.cell_at(0, row)


def compute_cell_size(cells_box: Box, n_cols: int, n_rows: int) -> Tuple[int, int]:
    """
    Computes per-cell width and height with truncating division. Leftover pixels on
    the right and bottom edges stay unpainted.

    Args:
        cells_box (Box): Region to subdivide.
        n_cols (int): Number of grid columns.
        n_rows (int): Number of grid rows.

    Returns:
        Tuple[int, int]: (cell_width, cell_height).
    """
    # int() truncates toward zero, also for boxes narrower than the label bands
    cell_width = int(cells_box.width / n_cols)
    cell_height = int(cells_box.height / n_rows)
    return cell_width, cell_height


def compute_cells(grid: Sequence[Sequence[float]], cells_box: Box) -> CellGrid:
    """
    Maps every grid entry to its screen rectangle, outer loop over columns and inner
    loop over rows.

    Args:
        grid (Sequence[Sequence[float]]): Validated column-major grid.
        cells_box (Box): Region holding the heatmap cells.

    Returns:
        CellGrid: Cells in column-major order.
    """
    n_cols = len(grid)
    n_rows = len(grid[0])
    cell_width, cell_height = compute_cell_size(cells_box, n_cols, n_rows)

    cells: List[Cell] = []
    for ci, column in enumerate(grid):
        left = cells_box.left + ci * cell_width
        for ri, value in enumerate(column):
            top = cells_box.top + ri * cell_height
            cells.append(
                Cell(
                    col=ci,
                    row=ri,
                    value=float(value),
                    box=Box(top=top, left=left, right=left + cell_width, bottom=top + cell_height),
                )
            )
    return CellGrid(cells, n_cols, n_rows)
