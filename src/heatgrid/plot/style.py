"""
heatgrid/plot/style
~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, TypeAlias, TypedDict, Union

from ..core.colors import Color

# Type alias for style values
StyleValue: TypeAlias = Union[str, float, int, bool, None, tuple]


class StyleDefaults(TypedDict):
    """
    Type class for heatmap style defaults.
    """

    row_label_width: int
    col_label_height: int
    label_offset: int
    label_fontsize: float
    label_color: str
    font_family: Optional[str]
    require_font: bool
    background_color: str
    background_stroke_width: float
    cell_outline_color: str
    cell_outline_width: float
    col_label_panel_color: str
    row_label_panel_color: str
    default_dpi: float
    low_color: str
    high_color: str
    clamp_channels: bool


DEFAULT_STYLE: StyleDefaults = {
    # Fixed label bands (canvas units)
    "row_label_width": 300,
    "col_label_height": 300,
    # Gap between a column label and the top of its first cell
    "label_offset": 10,
    "label_fontsize": 18,
    "label_color": "black",
    # None resolves to matplotlib's default sans-serif family
    "font_family": None,
    # If False, an unresolvable font falls back to the built-in default
    "require_font": False,
    "background_color": "black",
    "background_stroke_width": 0.0,
    "cell_outline_color": "black",
    "cell_outline_width": 1.0,
    # Backing panels drawn over the label bands
    "col_label_panel_color": "red",
    "row_label_panel_color": "green",
    # Applied when the Heatmap carries no positive DPI
    "default_dpi": 92.0,
    # Two-color ramp endpoints
    "low_color": "white",
    "high_color": "blue",
    "clamp_channels": True,
}


class StyleConfig:
    """
    Class for storing heatmap style defaults and overrides.
    """

    def __init__(self, defaults: Optional[Mapping[str, StyleValue]] = None) -> None:
        """
        Initializes the StyleConfig instance.

        Args:
            defaults (Optional[Mapping[str, StyleValue]]): Base style defaults. Defaults to None.
        """
        if defaults is None:
            defaults = DEFAULT_STYLE
        self._defaults: Dict[str, StyleValue] = dict(defaults)
        self._overrides: Dict[str, StyleValue] = {}

    @classmethod
    def resolve(
        cls, style: Union["StyleConfig", Mapping[str, StyleValue], None]
    ) -> "StyleConfig":
        """
        Normalizes a style argument to a StyleConfig.

        Args:
            style (Union[StyleConfig, Mapping[str, StyleValue], None]): Existing config,
                mapping of overrides, or None for defaults.

        Returns:
            StyleConfig: Resolved style configuration.

        Raises:
            KeyError: If an override names an unknown style key.
        """
        if isinstance(style, StyleConfig):
            return style
        config = cls()
        if style is not None:
            unknown = sorted(k for k in style if k not in config)
            if unknown:
                raise KeyError(f"Unknown style key(s): {unknown}")
            config.update(style)
        return config

    def get(self, key: str, default: Optional[StyleValue] = None) -> StyleValue:
        """
        Gets a style value with override priority.

        Args:
            key (str): Style key.
            default (Optional[StyleValue]): Default value if key not found. Defaults to None.

        Returns:
            StyleValue: Resolved style value.
        """
        if key in self._overrides:
            return self._overrides[key]
        return self._defaults.get(key, default)

    def set(self, key: str, value: StyleValue) -> None:
        """
        Overrides a style value.

        Args:
            key (str): Style key.
            value (StyleValue): Style value to set.
        """
        self._overrides[key] = value

    def update(self, overrides: Mapping[str, StyleValue]) -> None:
        """
        Applies multiple overrides at once.

        Args:
            overrides (Mapping[str, StyleValue]): Mapping of style keys to values.
        """
        for key, value in overrides.items():
            self._overrides[key] = value

    def as_dict(self) -> Dict[str, StyleValue]:
        """
        Returns a merged view of defaults and overrides.

        Returns:
            Dict[str, StyleValue]: Merged style dictionary.
        """
        merged = dict(self._defaults)
        merged.update(self._overrides)
        return merged

    def __getitem__(self, key: str) -> StyleValue:
        return self.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._overrides or key in self._defaults


@dataclass(frozen=True)
class Style:
    """
    Data class bundling the paint attributes of a single draw call.
    Colors are None when the attribute is not painted.
    """

    fill_color: Optional[Color] = None
    stroke_color: Optional[Color] = None
    stroke_width: float = 0.0
    font: Any = None
    font_size: float = 0.0
    font_color: Optional[Color] = None
    text_rotation_degrees: float = 0.0
    # Anchor of the (x, y) point within the unrotated text extent
    text_halign: str = "left"
    text_valign: str = "baseline"
