"""
heatgrid/plot
~~~~~~~~~~~~~
"""

from .renderer import HeatmapRenderer, RenderState, render
from .style import DEFAULT_STYLE, Style, StyleConfig

__all__ = ["DEFAULT_STYLE", "HeatmapRenderer", "RenderState", "Style", "StyleConfig", "render"]
