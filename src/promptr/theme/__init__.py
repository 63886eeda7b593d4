"""Theme models and style resolution."""

from ._color import (
    Color,
    ColorPair,
    KindTheme,
    PaletteColor,
    RgbColor,
    ThemeDocument,
    color_to_json,
    sgr_color,
)
from ._defaults import BUILTIN_COLORS, BUILTIN_SYMBOLS, UNIVERSAL_GLYPH
from ._resolver import DEFAULT_SUB_STATE, Style, ThemeResolver

__all__ = [
    "BUILTIN_COLORS",
    "BUILTIN_SYMBOLS",
    "DEFAULT_SUB_STATE",
    "UNIVERSAL_GLYPH",
    "Color",
    "ColorPair",
    "KindTheme",
    "PaletteColor",
    "RgbColor",
    "Style",
    "ThemeDocument",
    "ThemeResolver",
    "color_to_json",
    "sgr_color",
]
