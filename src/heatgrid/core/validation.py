"""
heatgrid/core/validation
~~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from typing import Sequence

from .errors import (
    ColLabelCountMismatchError,
    EmptyGridError,
    NonNumericGridError,
    RaggedGridError,
    RowLabelCountMismatchError,
)


def validate_grid(
    grid: Sequence[Sequence[float]],
    row_labels: Sequence[str],
    col_labels: Sequence[str],
) -> None:
    """
    Validates grid shape and label counts. Stops at the first failure, checked in
    the order empty, ragged, row labels, column labels, numeric content.

    Args:
        grid (Sequence[Sequence[float]]): Column-major grid, `grid[col][row]`.
        row_labels (Sequence[str]): One label per row.
        col_labels (Sequence[str]): One label per column.

    Raises:
        EmptyGridError: If the grid has no columns, or its columns have no rows.
        RaggedGridError: If any column length differs from the first column.
        RowLabelCountMismatchError: If row label count != column length.
        ColLabelCountMismatchError: If column label count != number of columns.
        NonNumericGridError: If the grid holds values that are not numeric.
    """
    if len(grid) < 1:
        raise EmptyGridError("Heatmap has no data to render")

    column_len = len(grid[0])
    for idx, column in enumerate(grid):
        if len(column) != column_len:
            raise RaggedGridError(
                f"Heatmap columns must all be the same length: column {idx} has "
                f"{len(column)} values, expected {column_len}"
            )
    if column_len == 0:
        # Zero rows leave nothing to subdivide the cells box by
        raise EmptyGridError("Heatmap columns have no rows to render")

    if len(row_labels) != column_len:
        raise RowLabelCountMismatchError(
            f"Number of row labels ({len(row_labels)}) != number of rows ({column_len})"
        )
    if len(col_labels) != len(grid):
        raise ColLabelCountMismatchError(
            f"Number of column labels ({len(col_labels)}) != number of columns ({len(grid)})"
        )

    # Same conversion the cell mapper applies; numpy would turn None into NaN
    for ci, column in enumerate(grid):
        for ri, value in enumerate(column):
            try:
                float(value)
            except (TypeError, ValueError) as exc:
                raise NonNumericGridError(
                    f"Heatmap grid value at column {ci}, row {ri} is not numeric: {value!r}"
                ) from exc
