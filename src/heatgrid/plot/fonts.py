"""
heatgrid/plot/fonts
~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from typing import Optional

from matplotlib import font_manager
from matplotlib.font_manager import FontProperties

from ..core.errors import FontLoadError
from ..util.warnings import FontFallbackWarning, warn

# Ships with matplotlib, so it always resolves
BUILTIN_FONT_FAMILY = "DejaVu Sans"


def load_font(family: Optional[str] = None) -> FontProperties:
    """
    Loads a font by family name without silently substituting another one.

    Args:
        family (Optional[str]): Font family name, or None for the configured default
            sans-serif family. Defaults to None.

    Returns:
        FontProperties: Font properties resolving to an installed font file.

    Raises:
        FontLoadError: If no installed font matches `family`.
    """
    props = FontProperties(family=family) if family else FontProperties()
    try:
        font_manager.findfont(props, fallback_to_default=False)
    except ValueError as exc:
        raise FontLoadError(f"Font {family!r} could not be found") from exc
    return props


def builtin_font() -> FontProperties:
    """
    Returns the font bundled with matplotlib.
    """
    return FontProperties(family=BUILTIN_FONT_FAMILY)


def resolve_font(family: Optional[str] = None, *, required: bool = False) -> FontProperties:
    """
    Loads a font, falling back to the built-in font unless the font is required.

    Args:
        family (Optional[str]): Font family name. Defaults to None.

    Kwargs:
        required (bool): Whether a missing font is fatal. Defaults to False.

    Returns:
        FontProperties: Requested font, or the built-in font.

    Raises:
        FontLoadError: If the font is missing and `required` is True.
    """
    try:
        return load_font(family)
    except FontLoadError as exc:
        if required:
            raise
        warn(f"{exc}; using {BUILTIN_FONT_FAMILY}", FontFallbackWarning, stacklevel=3)
        return builtin_font()
