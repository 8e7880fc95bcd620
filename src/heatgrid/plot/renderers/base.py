"""
heatgrid/plot/renderers/base
~~~~~~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from typing import BinaryIO, Callable, Protocol, TYPE_CHECKING, runtime_checkable

if TYPE_CHECKING:
    from ...core.layout import Box, CellGrid
    from ..style import Style, StyleConfig


class Canvas(Protocol):
    """
    Class for defining the drawing surface interface used by heatmap renderers.
    Coordinates are canvas units with the origin at the top-left corner.
    """

    def set_dpi(self, dpi: float) -> None:
        """
        Sets the DPI scale factor.

        Args:
            dpi (float): Dots per inch.
        """
        ...

    def draw_box(self, box: Box, style: Style) -> None:
        """
        Draws a rectangle, filled and/or stroked per `style`.

        Args:
            box (Box): Rectangle to draw.
            style (Style): Fill color, stroke color and stroke width.
        """
        ...

    def draw_text(self, text: str, x: int, y: int, style: Style) -> None:
        """
        Draws text anchored at (x, y).

        Args:
            text (str): Text to draw.
            x (int): Anchor x coordinate.
            y (int): Anchor y coordinate.
            style (Style): Font, font size, font color, rotation and alignment.
        """
        ...

    def save(self, sink: BinaryIO) -> None:
        """
        Serializes the canvas to a writable byte stream.

        Args:
            sink (BinaryIO): Output stream.
        """
        ...

    def close(self) -> None:
        """
        Releases backend resources held by the canvas.
        """
        ...


# Given (width, height), returns a Canvas or raises
CanvasFactory = Callable[[int, int], Canvas]


@runtime_checkable
class Renderer(Protocol):
    """
    Interface shared by the cell and label layers. A layer paints onto the canvas
    using only the cell grid and the style; anything else it needs is bound at
    construction.
    """

    def render(self, canvas: Canvas, cells: CellGrid, style: StyleConfig) -> None:
        ...
