"""
heatgrid/core/heatmap
~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, BinaryIO, Mapping, Optional, Sequence, TYPE_CHECKING

import numpy as np
import pandas as pd

from .colors import max_value

if TYPE_CHECKING:
    from ..plot.renderers.base import CanvasFactory
    from ..plot.style import StyleConfig


@dataclass(frozen=True)
class Column:
    """
    Data class for one labelled heatmap column.
    """

    label: str
    values: Sequence[float]


@dataclass(frozen=True)
class Heatmap:
    """
    Data class for a heatmap render request.

    `grid` is column-major (`grid[col][row]`): one inner sequence per column, all of
    equal length. `row_labels` has one entry per row and `col_labels` one per column.
    The heatmap is never mutated by rendering.
    """

    grid: Sequence[Sequence[float]]
    row_labels: Sequence[str]
    col_labels: Sequence[str]
    width: int
    height: int
    dpi: float = 0.0
    title: str = ""

    @classmethod
    def from_columns(
        cls,
        columns: Sequence[Column],
        row_labels: Sequence[str],
        *,
        width: int,
        height: int,
        dpi: float = 0.0,
        title: str = "",
    ) -> "Heatmap":
        """
        Builds a Heatmap from labelled columns.

        Args:
            columns (Sequence[Column]): Columns, left to right.
            row_labels (Sequence[str]): One label per row.

        Kwargs:
            width (int): Canvas width.
            height (int): Canvas height.
            dpi (float): DPI; 0 uses the style default. Defaults to 0.0.
            title (str): Chart title. Defaults to "".

        Returns:
            Heatmap: Heatmap with grid and column labels taken from `columns`.
        """
        return cls(
            grid=[list(c.values) for c in columns],
            row_labels=list(row_labels),
            col_labels=[c.label for c in columns],
            width=width,
            height=height,
            dpi=dpi,
            title=title,
        )

    @classmethod
    def from_dataframe(
        cls,
        df: pd.DataFrame,
        *,
        width: int,
        height: int,
        dpi: float = 0.0,
        title: str = "",
    ) -> "Heatmap":
        """
        Builds a Heatmap from a DataFrame laid out like the rendered chart: DataFrame
        columns become heatmap columns and the index supplies the row labels.

        Args:
            df (pd.DataFrame): Numeric DataFrame.

        Kwargs:
            width (int): Canvas width.
            height (int): Canvas height.
            dpi (float): DPI; 0 uses the style default. Defaults to 0.0.
            title (str): Chart title. Defaults to "".

        Returns:
            Heatmap: Heatmap mirroring the DataFrame.
        """
        # Positional access keeps duplicate column names apart
        grid = [df.iloc[:, i].tolist() for i in range(df.shape[1])]
        return cls(
            grid=grid,
            row_labels=[str(label) for label in df.index],
            col_labels=[str(label) for label in df.columns],
            width=width,
            height=height,
            dpi=dpi,
            title=title,
        )

    @property
    def n_cols(self) -> int:
        return len(self.grid)

    @property
    def n_rows(self) -> int:
        return len(self.grid[0]) if len(self.grid) else 0

    @property
    def values(self) -> np.ndarray:
        """
        Grid as a float array of shape (n_cols, n_rows).
        """
        return np.asarray(self.grid, dtype=float)

    def max_value(self) -> float:
        """
        Returns the grid maximum, ignoring NaN.
        """
        return max_value(self.grid)

    def render(
        self,
        canvas_factory: CanvasFactory,
        sink: BinaryIO,
        *,
        style: Optional[StyleConfig | Mapping[str, Any]] = None,
    ) -> None:
        """
        Renders the heatmap onto a canvas from `canvas_factory` and writes it to `sink`.

        Args:
            canvas_factory (CanvasFactory): Returns a canvas for (width, height).
            sink (BinaryIO): Writable byte stream.

        Kwargs:
            style (Optional[StyleConfig | Mapping[str, Any]]): Style config or
                overrides. Defaults to None.

        Raises:
            ValidationError: If the grid or labels are malformed.
        """
        from ..plot.renderer import render

        render(self, canvas_factory, sink, style=style)
