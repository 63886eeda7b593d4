"""Theme resolution.

Resolves a (segment kind, sub-state) pair to a glyph and a color pair by
layering the user's theme document over the built-in theme.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from promptr.theme._defaults import (
    BUILTIN_COLORS,
    BUILTIN_SYMBOLS,
    UNIVERSAL_BG,
    UNIVERSAL_FG,
    UNIVERSAL_GLYPH,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from promptr.theme._color import Color, KindTheme

DEFAULT_SUB_STATE = "default"


@dataclass(frozen=True, slots=True)
class Style:
    """A resolved style.

    Attributes:
        glyph: Symbol for the sub-state.
        fg: Foreground color.
        bg: Background color.
    """

    glyph: str
    fg: "Color"
    bg: "Color"


class ThemeResolver:
    """Resolve styles from user overrides layered over built-in defaults.

    Each attribute (glyph, foreground, background) is looked up independently:

    1. user override for (kind, sub_state)
    2. user override for (kind, "default")
    3. built-in value for (kind, sub_state)
    4. built-in universal default

    The chain ends in a constant, so resolution cannot fail.
    """

    __slots__: tuple[str, ...] = ("_document",)

    def __init__(self, document: "Mapping[str, KindTheme] | None" = None) -> None:
        """Initialize with an optional user theme document.

        Args:
            document: Segment kind to user overrides.
        """
        self._document: Mapping[str, KindTheme] = document or {}

    def resolve(self, kind: str, sub_state: str = DEFAULT_SUB_STATE) -> Style:
        """Resolve the style for a segment kind and sub-state.

        Args:
            kind: Segment kind, e.g. ``vcs`` or ``paths``.
            sub_state: Sub-state within the kind, e.g. ``ahead``.

        Returns:
            The resolved Style.
        """
        return Style(
            glyph=self._glyph(kind, sub_state),
            fg=self._channel(kind, sub_state, 0),
            bg=self._channel(kind, sub_state, 1),
        )

    def glyph(self, kind: str, sub_state: str = DEFAULT_SUB_STATE) -> str:
        return self._glyph(kind, sub_state)

    @staticmethod
    def kinds() -> tuple[str, ...]:
        """Segment kinds known to the built-in theme."""
        return tuple(BUILTIN_COLORS)

    @staticmethod
    def sub_states(kind: str) -> tuple[str, ...]:
        """Sub-states the built-in theme defines for a kind."""
        return tuple(BUILTIN_COLORS.get(kind, {}))

    def _glyph(self, kind: str, sub_state: str) -> str:
        user = self._document.get(kind)
        if user is not None:
            if sub_state in user.symbols:
                return user.symbols[sub_state]
            if DEFAULT_SUB_STATE in user.symbols:
                return user.symbols[DEFAULT_SUB_STATE]

        builtin = BUILTIN_SYMBOLS.get(kind, {})
        if sub_state in builtin:
            return builtin[sub_state]
        return UNIVERSAL_GLYPH

    def _channel(self, kind: str, sub_state: str, index: int) -> "Color":
        user = self._document.get(kind)
        if user is not None:
            for key in (sub_state, DEFAULT_SUB_STATE):
                pair = user.colors.get(key)
                if pair is None:
                    continue
                value = pair.fg if index == 0 else pair.bg
                if value is not None:
                    return value

        builtin = BUILTIN_COLORS.get(kind, {})
        if sub_state in builtin:
            return builtin[sub_state][index]
        return UNIVERSAL_FG if index == 0 else UNIVERSAL_BG
