"""
heatgrid/core/errors
~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations


class HeatgridError(Exception):
    """
    Base class for all heatgrid errors.
    """


class ValidationError(HeatgridError, ValueError):
    """
    Raised when a heatmap grid or its labels cannot be rendered.
    Detected before any canvas is acquired.
    """


class EmptyGridError(ValidationError):
    """Grid has no columns."""


class RaggedGridError(ValidationError):
    """Grid columns differ in length."""


class RowLabelCountMismatchError(ValidationError):
    """Row label count differs from the column length."""


class ColLabelCountMismatchError(ValidationError):
    """Column label count differs from the number of columns."""


class NonNumericGridError(ValidationError):
    """Grid holds values that cannot be read as floats."""


class FontLoadError(HeatgridError):
    """
    Raised when a label font cannot be resolved.
    """
