"""Concrete canvas backends."""

from .matplotlib_canvas import MatplotlibCanvas, matplotlib_canvas

__all__ = ["MatplotlibCanvas", "matplotlib_canvas"]
