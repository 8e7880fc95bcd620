"""
heatgrid/core
~~~~~~~~~~~~~
"""

from .colors import Color, ColorMapper, max_value
from .errors import (
    ColLabelCountMismatchError,
    EmptyGridError,
    FontLoadError,
    HeatgridError,
    NonNumericGridError,
    RaggedGridError,
    RowLabelCountMismatchError,
    ValidationError,
)
from .heatmap import Column, Heatmap
from .layout import Box, Cell, CellGrid, HeatmapLayout, compute_cells, compute_layout
from .validation import validate_grid

__all__ = [
    "Box",
    "Cell",
    "CellGrid",
    "ColLabelCountMismatchError",
    "Color",
    "ColorMapper",
    "Column",
    "EmptyGridError",
    "FontLoadError",
    "Heatmap",
    "HeatgridError",
    "HeatmapLayout",
    "NonNumericGridError",
    "RaggedGridError",
    "RowLabelCountMismatchError",
    "ValidationError",
    "compute_cells",
    "compute_layout",
    "max_value",
    "validate_grid",
]
