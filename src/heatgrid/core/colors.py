"""
heatgrid/core/colors
~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

import math
from typing import Any, NamedTuple, Sequence, Tuple

import numpy as np
from matplotlib.colors import to_rgba


class Color(NamedTuple):
    """
    RGBA color with 0-255 integer channels.
    """

    red: int
    green: int
    blue: int
    alpha: int = 255

    @classmethod
    def from_any(cls, value: Any) -> "Color":
        """
        Converts a Color, an RGBA int tuple, or any matplotlib color spec to a Color.

        Args:
            value (Any): Color-like value, e.g. "white", "#0000ff", (0, 0, 255, 255).

        Returns:
            Color: Converted color.
        """
        if isinstance(value, Color):
            return value
        if (
            isinstance(value, tuple)
            and len(value) in (3, 4)
            and all(isinstance(c, (int, np.integer)) and not isinstance(c, bool) for c in value)
        ):
            return cls(*(int(c) for c in value))
        r, g, b, a = to_rgba(value)
        return cls(*(_round_half_up(c * 255) for c in (r, g, b, a)))

    def to_rgba_float(self) -> Tuple[float, float, float, float]:
        """
        Returns the color as a matplotlib RGBA float tuple.
        """
        return (self.red / 255.0, self.green / 255.0, self.blue / 255.0, self.alpha / 255.0)


WHITE = Color(255, 255, 255, 255)
BLUE = Color(0, 0, 255, 255)


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def max_value(grid: Sequence[Sequence[float]]) -> float:
    """
    Returns the largest value over the whole grid, ignoring NaN.

    Args:
        grid (Sequence[Sequence[float]]): Column-major grid.

    Returns:
        float: Grid maximum, or NaN if the grid holds no comparable values.
    """
    values = np.asarray(grid, dtype=float).ravel()
    values = values[~np.isnan(values)]
    if values.size == 0:
        return float("nan")
    return float(values.max())


class ColorMapper:
    """
    Class for mapping raw grid values onto a two-color linear ramp, normalized by the
    grid maximum (`t = value / max_value`).
    """

    def __init__(
        self,
        max_value: float,
        *,
        low_color: Any = WHITE,
        high_color: Any = BLUE,
        clamp: bool = True,
    ) -> None:
        """
        Initializes the ColorMapper instance.

        Args:
            max_value (float): Normalization maximum.

        Kwargs:
            low_color (Any): Color at t=0. Defaults to white.
            high_color (Any): Color at t=1. Defaults to blue.
            clamp (bool): Whether to clamp t into [0, 1]. Defaults to True.
        """
        self.max_value = float(max_value)
        self.low_color = Color.from_any(low_color)
        self.high_color = Color.from_any(high_color)
        self.clamp = clamp

    @classmethod
    def from_grid(cls, grid: Sequence[Sequence[float]], **kwargs: Any) -> "ColorMapper":
        """
        Builds a mapper normalized by the maximum of `grid`.

        Args:
            grid (Sequence[Sequence[float]]): Column-major grid.

        Kwargs:
            **kwargs: Forwarded to ColorMapper. Defaults to {}.

        Returns:
            ColorMapper: Mapper for this grid.
        """
        return cls(max_value(grid), **kwargs)

    @property
    def degenerate(self) -> bool:
        """
        True when the maximum is zero or not finite and cannot normalize values.
        """
        return self.max_value == 0 or not math.isfinite(self.max_value)

    def normalize(self, value: float) -> float:
        """
        Normalizes a value against the maximum. Degenerate maxima and non-finite
        values map to 0.

        Args:
            value (float): Raw grid value.

        Returns:
            float: Normalized position on the ramp.
        """
        value = float(value)
        if self.degenerate or not math.isfinite(value):
            return 0.0
        t = value / self.max_value
        if self.clamp:
            t = min(max(t, 0.0), 1.0)
        return t

    def color_for(self, value: float) -> Color:
        """
        Maps a raw value to its ramp color.

        Args:
            value (float): Raw grid value.

        Returns:
            Color: Interpolated color.
        """
        t = self.normalize(value)
        return Color(
            *(
                _lerp_channel(lo, hi, t)
                for lo, hi in zip(self.low_color, self.high_color)
            )
        )


def _lerp_channel(low: int, high: int, t: float) -> int:
    # Round the magnitude so 255 - round(t * 255) holds for falling channels
    delta = high - low
    step = _round_half_up(t * abs(delta))
    return low + step if delta >= 0 else low - step
