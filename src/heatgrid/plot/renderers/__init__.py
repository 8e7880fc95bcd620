"""Heatmap layer renderers."""

from .base import Canvas, CanvasFactory, Renderer
from .cells import CellRenderer
from .labels import ColumnLabelRenderer, RowLabelRenderer

__all__ = [
    "Canvas",
    "CanvasFactory",
    "CellRenderer",
    "ColumnLabelRenderer",
    "Renderer",
    "RowLabelRenderer",
]
