"""
heatgrid/plot/renderer
~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from enum import Enum
from typing import BinaryIO, Mapping, Optional, Tuple, Union, TYPE_CHECKING

from ..core.colors import Color, ColorMapper
from ..core.layout import HeatmapLayout, compute_cells, compute_layout
from ..core.validation import validate_grid
from ..util.warnings import DegenerateGridWarning, warn
from .fonts import resolve_font
from .renderers.cells import CellRenderer
from .renderers.labels import ColumnLabelRenderer, RowLabelRenderer
from .style import Style, StyleConfig, StyleValue

if TYPE_CHECKING:
    from ..core.heatmap import Heatmap
    from .renderers.base import Canvas, CanvasFactory, Renderer


class RenderState(Enum):
    """
    Stages of a single heatmap render pass.
    """

    VALIDATING = "validating"
    LAYING_OUT = "laying_out"
    PAINTING = "painting"
    FINALIZING = "finalizing"
    DONE = "done"
    FAILED = "failed"


class HeatmapRenderer:
    """
    Single-use render pass for one Heatmap.

    The pass validates the grid, lays out the canvas, paints the background, the
    cells, the label panels, the column labels and the row labels in that order,
    then serializes the canvas. Nothing is drawn if validation fails, and the canvas
    is closed on every path once acquired.
    """

    def __init__(
        self,
        heatmap: Heatmap,
        style: Union[StyleConfig, Mapping[str, StyleValue], None] = None,
    ) -> None:
        self.heatmap = heatmap
        self.style = StyleConfig.resolve(style)
        self.state: Optional[RenderState] = None

    def render(self, canvas_factory: CanvasFactory, sink: BinaryIO) -> None:
        """
        Runs the render pass.

        Args:
            canvas_factory (CanvasFactory): Returns a canvas for (width, height).
            sink (BinaryIO): Writable byte stream receiving the serialized canvas.

        Raises:
            RuntimeError: If this renderer has already run.
            ValidationError: If the grid or labels are malformed.
            FontLoadError: If the label font is missing and `require_font` is set.
            Exception: Canvas factory and sink errors propagate unchanged.
        """
        if self.state is not None:
            raise RuntimeError("HeatmapRenderer runs once; create a new renderer per render")
        try:
            self._run(canvas_factory, sink)
        except Exception:
            self.state = RenderState.FAILED
            raise
        self.state = RenderState.DONE

    def _run(self, canvas_factory: CanvasFactory, sink: BinaryIO) -> None:
        heatmap = self.heatmap
        style = self.style

        self.state = RenderState.VALIDATING
        validate_grid(heatmap.grid, heatmap.row_labels, heatmap.col_labels)

        self.state = RenderState.LAYING_OUT
        layout = compute_layout(
            heatmap.width,
            heatmap.height,
            row_label_width=int(style["row_label_width"]),
            col_label_height=int(style["col_label_height"]),
        )
        cells = compute_cells(heatmap.grid, layout.cells_box)
        color_mapper = ColorMapper.from_grid(
            heatmap.grid,
            low_color=style["low_color"],
            high_color=style["high_color"],
            clamp=bool(style["clamp_channels"]),
        )
        if color_mapper.degenerate:
            warn(
                f"Heatmap maximum is {color_mapper.max_value}; all cells use the low color",
                DegenerateGridWarning,
            )
        font = resolve_font(style["font_family"], required=bool(style["require_font"]))
        cell_layer: Renderer = CellRenderer(color_mapper)
        # Column labels first, then row labels
        label_layers: Tuple[Renderer, ...] = (
            ColumnLabelRenderer(heatmap.col_labels, font),
            RowLabelRenderer(heatmap.row_labels, font),
        )

        canvas = canvas_factory(heatmap.width, heatmap.height)
        try:
            self.state = RenderState.PAINTING
            canvas.set_dpi(self._resolve_dpi())
            self._draw_background(canvas, layout)
            cell_layer.render(canvas, cells, style)
            self._draw_label_panels(canvas, layout)
            for layer in label_layers:
                layer.render(canvas, cells, style)

            self.state = RenderState.FINALIZING
            canvas.save(sink)
        finally:
            canvas.close()

    def _resolve_dpi(self) -> float:
        dpi = self.heatmap.dpi
        if dpi and dpi > 0:
            return float(dpi)
        return float(self.style["default_dpi"])

    def _draw_background(self, canvas: Canvas, layout: HeatmapLayout) -> None:
        color = Color.from_any(self.style["background_color"])
        canvas.draw_box(
            layout.outer_box,
            Style(
                fill_color=color,
                stroke_color=color,
                stroke_width=float(self.style["background_stroke_width"]),
            ),
        )

    def _draw_label_panels(self, canvas: Canvas, layout: HeatmapLayout) -> None:
        # Drawn after the cells so the panels sit on top
        canvas.draw_box(
            layout.column_label_box,
            Style(fill_color=Color.from_any(self.style["col_label_panel_color"])),
        )
        canvas.draw_box(
            layout.row_label_box,
            Style(fill_color=Color.from_any(self.style["row_label_panel_color"])),
        )


def render(
    heatmap: Heatmap,
    canvas_factory: CanvasFactory,
    sink: BinaryIO,
    *,
    style: Union[StyleConfig, Mapping[str, StyleValue], None] = None,
) -> None:
    """
    Renders a heatmap with a fresh HeatmapRenderer.

    Args:
        heatmap (Heatmap): Heatmap to render.
        canvas_factory (CanvasFactory): Returns a canvas for (width, height).
        sink (BinaryIO): Writable byte stream.

    Kwargs:
        style (Union[StyleConfig, Mapping[str, StyleValue], None]): Style config or
            overrides. Defaults to None.
    """
    HeatmapRenderer(heatmap, style).render(canvas_factory, sink)
