"""Prompt composition.

Turns the ordered fragments from all segments into one line: a colored band of
padded texts joined by powerline transitions, truncated from the middle when
it does not fit the terminal.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from rich.cells import cell_len

from promptr.enums import Separator, Shell

from ._ansi import escape_text, reset, set_bg, set_fg
from ._fragment import Fragment

if TYPE_CHECKING:
    from collections.abc import Sequence

    from promptr.theme import Color, ThemeResolver

PADDING = 2
"""One space on each side of every fragment."""

TRAILING = 1
"""Space after the closing reset, before the cursor."""

TRUNCATION_SOURCE = "truncation"


@dataclass(frozen=True, slots=True)
class Transition:
    """Separator drawn after a fragment.

    Attributes:
        glyph: Separator glyph.
        fg: Glyph color.
        bg: Background under the glyph. None is the terminal default.
    """

    glyph: str
    fg: "Color"
    bg: "Color | None"

    @property
    def display_width(self) -> int:
        return cell_len(self.glyph)


def transition(left: Fragment, right: Fragment | None, theme: "ThemeResolver") -> Transition:
    """Compute the separator between two fragments.

    The thick arrow continues the left background into the right one. When
    both share a background, or the left fragment asks for it, the thin
    separator is drawn instead in the theme's thin-separator color. After the
    last fragment the band closes onto the terminal default background.

    Args:
        left: Fragment before the separator.
        right: Fragment after it, or None after the last fragment.
        theme: Theme to take separator glyphs from.

    Returns:
        The transition.
    """
    if right is None:
        return Transition(theme.glyph("separator", "thick"), left.bg, None)

    if left.bg == right.bg or left.separator is Separator.THIN:
        thin = theme.resolve("separator", "thin")
        return Transition(thin.glyph, thin.fg, right.bg)

    return Transition(theme.glyph("separator", "thick"), left.bg, right.bg)


def transitions(fragments: "Sequence[Fragment]", theme: "ThemeResolver") -> list[Transition]:
    """Compute the transition after every fragment."""
    return [
        transition(fragment, fragments[i + 1] if i + 1 < len(fragments) else None, theme)
        for i, fragment in enumerate(fragments)
    ]


def measure(fragments: "Sequence[Fragment]", theme: "ThemeResolver") -> int:
    """Width in cells of the rendered line.

    Args:
        fragments: Fragments in display order.
        theme: Theme to take separator glyphs from.

    Returns:
        Padded fragment widths plus separator widths plus the trailing space,
        or 0 for no fragments.
    """
    if not fragments:
        return 0
    texts = sum(fragment.display_width + PADDING for fragment in fragments)
    separators = sum(t.display_width for t in transitions(fragments, theme))
    return texts + separators + TRAILING


def ellipsis_fragment(theme: "ThemeResolver") -> Fragment:
    style = theme.resolve("truncation")
    return Fragment.styled(style.glyph, style, source=TRUNCATION_SOURCE)


def truncate(
    fragments: "Sequence[Fragment]",
    terminal_width: int,
    theme: "ThemeResolver",
) -> list[Fragment]:
    """Elide fragments from the middle until the line fits.

    The elided window starts at the middle fragment and grows one fragment at
    a time, alternating left and right. It never covers the first or last
    fragment and is replaced by a single ellipsis fragment. When even
    first, ellipsis and last do not fit, that shortest form is returned.

    Args:
        fragments: Fragments in display order.
        terminal_width: Available width in cells.
        theme: Theme for separators and the ellipsis.

    Returns:
        The fragments to render.
    """
    count = len(fragments)
    if count <= 2 or measure(fragments, theme) <= terminal_width:
        return list(fragments)

    ellipsis = ellipsis_fragment(theme)
    lo = count // 2
    hi = lo + 1
    grow_left = True

    while True:
        candidate = [*fragments[:lo], ellipsis, *fragments[hi:]]
        exhausted = lo <= 1 and hi >= count - 1
        if exhausted or measure(candidate, theme) <= terminal_width:
            return candidate

        if (grow_left and lo > 1) or hi >= count - 1:
            lo -= 1
        else:
            hi += 1
        grow_left = not grow_left


def render(
    fragments: "Sequence[Fragment]",
    terminal_width: int,
    *,
    theme: "ThemeResolver",
    shell: Shell = Shell.BASH,
) -> str:
    """Render fragments into the prompt string.

    Args:
        fragments: Fragments in display order. Abstaining segments contribute
            none.
        terminal_width: Available width in cells.
        theme: Theme for separators and truncation.
        shell: Shell whose escaping rules apply.

    Returns:
        The prompt string, or an empty string when there are no fragments.
    """
    if not fragments:
        return ""

    shown = truncate(fragments, terminal_width, theme)
    parts: list[str] = []
    for fragment, after in zip(shown, transitions(shown, theme), strict=True):
        parts.append(set_fg(fragment.fg, shell))
        parts.append(set_bg(fragment.bg, shell))
        parts.append(f" {escape_text(fragment.text, shell)} ")
        parts.append(set_bg(after.bg, shell))
        parts.append(set_fg(after.fg, shell))
        parts.append(escape_text(after.glyph, shell))

    parts.append(reset(shell))
    parts.append(" ")
    return "".join(parts)
