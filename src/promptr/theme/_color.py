"""Color values and theme document models.

A color is either an index into the 256-color palette or a 24-bit RGB value.
In the configuration file a palette color is a bare integer and a true color is
an object::

    {"bg": 240}
    {"bg": {"r": 255, "g": 80, "b": 95}}
"""

from typing import Annotated, ClassVar

from pydantic import BaseModel, ConfigDict, Field


class RgbColor(BaseModel):
    """24-bit "true" color."""

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")

    r: Annotated[int, Field(ge=0, le=255)]
    g: Annotated[int, Field(ge=0, le=255)]
    b: Annotated[int, Field(ge=0, le=255)]


PaletteColor = Annotated[int, Field(ge=0, le=255)]

Color = PaletteColor | RgbColor


def sgr_color(color: Color) -> str:
    """Convert a color to the arguments of an SGR 38/48 command.

    Args:
        color: Palette index or RGB color.

    Returns:
        ``5;<n>`` for palette colors, ``2;<r>;<g>;<b>`` for true colors.
    """
    if isinstance(color, RgbColor):
        return f"2;{color.r};{color.g};{color.b}"
    return f"5;{color}"


def color_to_json(color: Color) -> int | dict[str, int]:
    if isinstance(color, RgbColor):
        return color.model_dump()
    return color


class ColorPair(BaseModel):
    """Foreground/background pair. Either channel may be left unset."""

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")

    fg: Color | None = None
    bg: Color | None = None


class KindTheme(BaseModel):
    """User overrides for one segment kind.

    Attributes:
        symbols: Sub-state name to glyph.
        colors: Sub-state name to color pair.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")

    symbols: dict[str, str] = Field(default_factory=dict)
    colors: dict[str, ColorPair] = Field(default_factory=dict)


ThemeDocument = dict[str, KindTheme]
"""Theme document: segment kind to overrides."""
