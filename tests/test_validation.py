"""
tests/test_validation
~~~~~~~~~~~~~~~~~~~~~
"""

import pytest

from heatgrid.core.errors import (
    ColLabelCountMismatchError,
    EmptyGridError,
    NonNumericGridError,
    RaggedGridError,
    RowLabelCountMismatchError,
    ValidationError,
)
from heatgrid.core.validation import validate_grid


@pytest.mark.unit
def test_validate_grid_accepts_well_formed_grid():
    """
    Ensures a rectangular grid with matching label counts validates.
    """
    validate_grid([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]], ["a", "b", "c"], ["x", "y"])


@pytest.mark.unit
def test_validate_grid_rejects_empty_grid():
    """
    Ensures a grid with no columns raises EmptyGridError.
    """
    with pytest.raises(EmptyGridError):
        validate_grid([], [], [])


@pytest.mark.unit
def test_validate_grid_rejects_columns_without_rows():
    """
    Ensures columns with no rows raise EmptyGridError.
    """
    with pytest.raises(EmptyGridError):
        validate_grid([[], []], [], ["x", "y"])


@pytest.mark.unit
def test_validate_grid_rejects_ragged_grid():
    """
    Ensures a column of length 3 next to one of length 2 raises RaggedGridError.
    """
    with pytest.raises(RaggedGridError, match="column 1"):
        validate_grid([[1, 2, 3], [4, 5]], ["a", "b", "c"], ["x", "y"])


@pytest.mark.unit
def test_validate_grid_rejects_row_label_mismatch():
    """
    Ensures the row label count must equal the column length.
    """
    with pytest.raises(RowLabelCountMismatchError):
        validate_grid([[1, 2], [3, 4]], ["a"], ["x", "y"])


@pytest.mark.unit
def test_validate_grid_rejects_col_label_mismatch():
    """
    Ensures the column label count must equal the number of columns.
    """
    with pytest.raises(ColLabelCountMismatchError):
        validate_grid([[1, 2], [3, 4]], ["a", "b"], ["x", "y", "z"])


@pytest.mark.unit
def test_validate_grid_reports_first_failure_in_order():
    """
    Ensures checks short-circuit: ragged is reported before label mismatches, and row
    labels before column labels.
    """
    with pytest.raises(RaggedGridError):
        validate_grid([[1, 2], [3]], [], [])
    with pytest.raises(RowLabelCountMismatchError):
        validate_grid([[1, 2], [3, 4]], [], [])


@pytest.mark.unit
def test_validate_grid_rejects_non_numeric_values():
    """
    Ensures values that cannot be read as floats raise NonNumericGridError.
    """
    with pytest.raises(NonNumericGridError):
        validate_grid([["x", "y"]], ["a", "b"], ["c"])


@pytest.mark.api
def test_validation_errors_are_value_errors():
    """
    Ensures every validation error can be caught as ValueError.
    """
    for error in (
        EmptyGridError,
        RaggedGridError,
        RowLabelCountMismatchError,
        ColLabelCountMismatchError,
        NonNumericGridError,
    ):
        assert issubclass(error, ValidationError)
        assert issubclass(error, ValueError)


@pytest.mark.unit
def test_validate_grid_rejects_none_values():
    """
    Ensures None entries fail validation instead of slipping through as NaN.
    """
    with pytest.raises(NonNumericGridError, match="column 0, row 1"):
        validate_grid([[1.0, None], [3.0, 4.0]], ["a", "b"], ["x", "y"])
