"""Rendered fragments."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from rich.cells import cell_len

from promptr.enums import Separator

if TYPE_CHECKING:
    from promptr.theme import Color, Style


@dataclass(frozen=True, slots=True)
class Fragment:
    """One styled piece of the prompt line.

    Attributes:
        text: Text shown between the padding spaces.
        fg: Foreground color.
        bg: Background color.
        separator: Separator preferred after this fragment.
        source: Label identifying the segment that produced it.
    """

    text: str
    fg: "Color"
    bg: "Color"
    separator: Separator = Separator.THICK
    source: str = ""

    @property
    def display_width(self) -> int:
        """Terminal cells taken by the text.

        Wide characters take two cells and combining marks none.
        """
        return cell_len(self.text)

    @classmethod
    def styled(
        cls,
        text: str,
        style: "Style",
        *,
        separator: Separator = Separator.THICK,
        source: str = "",
    ) -> "Fragment":
        """Create a fragment colored by a resolved style."""
        return cls(text, style.fg, style.bg, separator=separator, source=source)
