"""
heatgrid/plot/renderers/cells
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ...core.colors import Color, ColorMapper
from ..style import Style

if TYPE_CHECKING:
    from ...core.layout import Cell, CellGrid
    from ..style import StyleConfig
    from .base import Canvas


class CellRenderer:
    """
    Class for painting one filled, outlined rectangle per heatmap cell.
    """

    def __init__(self, color_mapper: ColorMapper) -> None:
        """
        Initializes the CellRenderer instance.

        Args:
            color_mapper (ColorMapper): Value-to-color mapping for this grid.
        """
        self.color_mapper = color_mapper

    def cell_style(self, cell: Cell, style: StyleConfig) -> Style:
        """
        Builds the draw style for one cell.

        Args:
            cell (Cell): Cell to paint.
            style (StyleConfig): Style configuration.

        Returns:
            Style: Fill from the color mapper, stroke from the outline settings.
        """
        return Style(
            fill_color=self.color_mapper.color_for(cell.value),
            stroke_color=Color.from_any(style["cell_outline_color"]),
            stroke_width=float(style["cell_outline_width"]),
        )

    def render(self, canvas: Canvas, cells: CellGrid, style: StyleConfig) -> None:
        """
        Paints every cell in column-major order.

        Args:
            canvas (Canvas): Target canvas.
            cells (CellGrid): Cells of the current render.
            style (StyleConfig): Style configuration.
        """
        for cell in cells:
            canvas.draw_box(cell.box, self.cell_style(cell, style))
