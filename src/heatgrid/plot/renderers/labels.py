"""
heatgrid/plot/renderers/labels
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from typing import Any, Sequence, Tuple, TYPE_CHECKING

from ...core.colors import Color
from ..style import Style

if TYPE_CHECKING:
    from ...core.layout import Cell, CellGrid
    from ..style import StyleConfig
    from .base import Canvas


def column_label_anchor(top_cell: Cell, offset: int) -> Tuple[int, int]:
    """
    Returns the anchor for a column label: horizontally centered on the column's top
    cell, `offset` units above its top edge.

    Args:
        top_cell (Cell): First cell of the column.
        offset (int): Gap above the cell.

    Returns:
        Tuple[int, int]: (x, y) anchor.
    """
    box = top_cell.box
    return box.left + int(box.width / 2), box.top - offset


def row_label_anchor(left_cell: Cell) -> Tuple[int, int]:
    """
    Returns the anchor for a row label: x=0, vertically centered on the row's
    leftmost cell.

    Args:
        left_cell (Cell): First cell of the row.

    Returns:
        Tuple[int, int]: (x, y) anchor.
    """
    box = left_cell.box
    return 0, box.top + int(box.height / 2)


class ColumnLabelRenderer:
    """
    Class for drawing rotated column labels above the first cell of each column.
    """

    def __init__(self, labels: Sequence[str], font: Any = None) -> None:
        """
        Initializes the ColumnLabelRenderer instance.

        Args:
            labels (Sequence[str]): One label per grid column.
            font (Any): Font handed to the canvas, e.g. FontProperties. Defaults to None.
        """
        self.labels = list(labels)
        self.font = font

    def render(self, canvas: Canvas, cells: CellGrid, style: StyleConfig) -> None:
        """
        Draws one label per column, left to right.

        Args:
            canvas (Canvas): Target canvas.
            cells (CellGrid): Cells of the current render.
            style (StyleConfig): Style configuration.
        """
        text_style = Style(
            font=self.font,
            font_size=float(style["label_fontsize"]),
            font_color=Color.from_any(style["label_color"]),
            text_rotation_degrees=-90.0,
            # Unrotated-frame anchor: the label starts at the anchor and reads upward
            text_halign="left",
            text_valign="center",
        )
        offset = int(style["label_offset"])
        for col, label in enumerate(self.labels):
            x, y = column_label_anchor(cells.first_cell_of_column(col), offset)
            canvas.draw_text(label, x, y, text_style)


class RowLabelRenderer:
    """
    Class for drawing unrotated row labels left-anchored at x=0.
    """

    def __init__(self, labels: Sequence[str], font: Any = None) -> None:
        """
        Initializes the RowLabelRenderer instance.

        Args:
            labels (Sequence[str]): One label per grid row.
            font (Any): Font handed to the canvas, e.g. FontProperties. Defaults to None.
        """
        self.labels = list(labels)
        self.font = font

    def render(self, canvas: Canvas, cells: CellGrid, style: StyleConfig) -> None:
        """
        Draws one label per row, top to bottom.

        Args:
            canvas (Canvas): Target canvas.
            cells (CellGrid): Cells of the current render.
            style (StyleConfig): Style configuration.
        """
        text_style = Style(
            font=self.font,
            font_size=float(style["label_fontsize"]),
            font_color=Color.from_any(style["label_color"]),
            text_halign="left",
            text_valign="center",
        )
        for row, label in enumerate(self.labels):
            x, y = row_label_anchor(cells.first_cell_of_row(row))
            canvas.draw_text(label, x, y, text_style)
