"""
heatgrid/plot/backends/matplotlib_canvas
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from typing import BinaryIO, TYPE_CHECKING

from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure
from matplotlib.font_manager import FontProperties
from matplotlib.patches import Rectangle

if TYPE_CHECKING:
    from ...core.colors import Color
    from ...core.layout import Box
    from ..style import Style

DEFAULT_DPI = 92.0


def _mpl_color(color: Color | None):
    return "none" if color is None else color.to_rgba_float()


class MatplotlibCanvas:
    """
    Class for a pixel-addressed drawing surface backed by a matplotlib Agg figure.

    A single axes spans the whole figure with limits equal to the pixel size and the
    y axis inverted, so data coordinates are canvas pixels from the top-left corner.
    """

    def __init__(self, width: int, height: int, *, dpi: float = DEFAULT_DPI) -> None:
        """
        Initializes the MatplotlibCanvas instance.

        Args:
            width (int): Canvas width in pixels.
            height (int): Canvas height in pixels.

        Kwargs:
            dpi (float): Initial DPI. Defaults to 92.0.

        Raises:
            ValueError: If width, height or dpi is not positive.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")
        if dpi <= 0:
            raise ValueError(f"Canvas dpi must be positive, got {dpi}")
        self.width = int(width)
        self.height = int(height)
        self.dpi = float(dpi)
        self.figure = Figure(figsize=(self.width / self.dpi, self.height / self.dpi), dpi=self.dpi)
        FigureCanvasAgg(self.figure)
        self.ax = self.figure.add_axes((0.0, 0.0, 1.0, 1.0))
        self.ax.set_xlim(0, self.width)
        self.ax.set_ylim(self.height, 0)
        self.ax.set_axis_off()
        self.closed = False

    def set_dpi(self, dpi: float) -> None:
        """
        Sets the DPI while keeping the pixel size fixed. Text sizes are points, so
        the DPI scales labels relative to cells.

        Args:
            dpi (float): Dots per inch.

        Raises:
            ValueError: If dpi is not positive.
        """
        if dpi <= 0:
            raise ValueError(f"Canvas dpi must be positive, got {dpi}")
        self.dpi = float(dpi)
        self.figure.set_dpi(self.dpi)
        self.figure.set_size_inches(self.width / self.dpi, self.height / self.dpi)

    def draw_box(self, box: Box, style: Style) -> None:
        self.ax.add_patch(
            Rectangle(
                (box.left, box.top),
                box.width,
                box.height,
                facecolor=_mpl_color(style.fill_color),
                edgecolor=_mpl_color(style.stroke_color),
                linewidth=style.stroke_width,
            )
        )

    def draw_text(self, text: str, x: int, y: int, style: Style) -> None:
        font = style.font.copy() if isinstance(style.font, FontProperties) else FontProperties()
        if style.font_size:
            font.set_size(style.font_size)
        # Canvas rotation is clockwise with y pointing down; matplotlib's is counterclockwise
        self.ax.text(
            x,
            y,
            text,
            fontproperties=font,
            color=_mpl_color(style.font_color),
            rotation=-style.text_rotation_degrees,
            rotation_mode="anchor",
            ha=style.text_halign,
            va=style.text_valign,
            parse_math=False,
        )

    def save(self, sink: BinaryIO) -> None:
        """
        Writes the canvas as PNG bytes. Metadata that varies between runs is omitted
        so identical draws produce identical bytes.

        Args:
            sink (BinaryIO): Writable binary stream.
        """
        self.figure.savefig(sink, format="png", dpi=self.dpi, metadata={"Software": None})

    def close(self) -> None:
        if not self.closed:
            self.figure.clear()
            self.closed = True


def matplotlib_canvas(width: int, height: int) -> MatplotlibCanvas:
    """
    Canvas factory for MatplotlibCanvas.

    Args:
        width (int): Canvas width in pixels.
        height (int): Canvas height in pixels.

    Returns:
        MatplotlibCanvas: Fresh canvas.
    """
    return MatplotlibCanvas(width, height)
