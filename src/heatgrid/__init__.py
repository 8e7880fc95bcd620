"""
heatgrid
~~~~~~~~

Heatmap rendering of column-major numeric grids with row and column labels.
"""

from .core.errors import HeatgridError, ValidationError
from .core.heatmap import Column, Heatmap
from .plot.backends import matplotlib_canvas
from .plot.renderer import HeatmapRenderer, RenderState, render
from .plot.style import StyleConfig

__all__ = [
    "Column",
    "Heatmap",
    "HeatmapRenderer",
    "HeatgridError",
    "RenderState",
    "StyleConfig",
    "ValidationError",
    "matplotlib_canvas",
    "render",
]

__version__ = "0.1.0"
