"""Built-in theme.

Every segment kind lists all of its sub-states with a color pair, so resolving
any (kind, sub-state) from this table never needs the universal fallback for
colors. Glyphs are listed only for sub-states that draw one; the universal
glyph covers the rest.
"""

from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from promptr.theme._color import Color

UNIVERSAL_GLYPH = "\u2022"
UNIVERSAL_FG: "Color" = 250
UNIVERSAL_BG: "Color" = 237


def _pairs(
    sub_states: tuple[str, ...],
    base: tuple["Color", "Color"],
    **overrides: tuple["Color", "Color"],
) -> dict[str, tuple["Color", "Color"]]:
    pairs = dict.fromkeys(sub_states, base)
    pairs.update(overrides)
    return pairs


_IN_PROGRESS = (15, 208)
_CLEAN = (0, 148)

BUILTIN_COLORS: "Mapping[str, Mapping[str, tuple[Color, Color]]]" = MappingProxyType(
    {
        "username": {"default": (250, 240)},
        "hostname": _pairs(
            ("default", "jail", "macos", "freebsd", "openbsd", "linux"), (250, 238)
        ),
        "command_status": _pairs(
            ("success", "failure", "root", "user"),
            (15, 236),
            failure=(15, 161),
        ),
        "paths": _pairs(
            ("normal", "home", "last", "root", "dir_stack"),
            (250, 237),
            home=(15, 31),
            last=(254, 237),
        ),
        "vcs": _pairs(
            (
                "clean",
                "dirty",
                "detached",
                "unborn",
                "ahead",
                "behind",
                "staged",
                "unstaged",
                "untracked",
                "conflicted",
                "stash",
                "rebase",
                "rebase_interactive",
                "merge",
                "cherry_pick",
                "revert",
                "bisect",
            ),
            _IN_PROGRESS,
            clean=_CLEAN,
            dirty=(15, 161),
            detached=_CLEAN,
            unborn=_CLEAN,
            ahead=(250, 240),
            behind=(250, 240),
            staged=(15, 22),
            unstaged=(15, 130),
            untracked=(15, 52),
            conflicted=(15, 9),
            stash=(0, 221),
        ),
        "battery": _pairs(
            ("normal", "low", "charging", "discharging", "empty", "full"),
            (7, 22),
            low=(7, 197),
            empty=(7, 197),
        ),
        "rvm": _pairs(("default", "mismatch"), (15, 124)),
        "screen": {"default": (250, 238)},
        "truncation": {"default": (250, 236)},
        "separator": {"thick": (250, 237), "thin": (244, 237)},
    }
)

BUILTIN_SYMBOLS: "Mapping[str, Mapping[str, str]]" = MappingProxyType(
    {
        "hostname": {
            # 🔐 lock and key
            "jail": "\U0001f510",
            # 🍎
            "macos": "\U0001f34e",
            # 👺 beastie
            "freebsd": "\U0001f47a",
            # 🐡 puffy
            "openbsd": "\U0001f421",
            # 🐧 tux
            "linux": "\U0001f427",
        },
        "command_status": {"root": "#", "user": "$"},
        "paths": {
            "home": "~",
            "root": "/",
            # 📚 a stack of books
            "dir_stack": "\U0001f4da",
        },
        "vcs": {
            # Powerline branch glyph
            "clean": "\ue0a0",
            "dirty": "\ue0a0",
            "detached": "\u2693",
            "unborn": "(unborn)",
            "ahead": "\u2b06",
            "behind": "\u2b07",
            "staged": "\u2714",
            "unstaged": "\u270e",
            "untracked": "?",
            "conflicted": "\u273c",
            "stash": "\u2398",
            "rebase": "rebase",
            "rebase_interactive": "int rebase",
            "merge": "merging",
            "cherry_pick": "cherry-picking",
            "revert": "reverting",
            "bisect": "bisecting",
        },
        "battery": {
            "charging": "\U0001f50c",
            "discharging": "\u26a1",
            "empty": "\u2757",
            "full": "\U0001f50b",
        },
        # ≠ not equal
        "rvm": {"mismatch": " \u2260"},
        "screen": {"default": "\U0001f4fa"},
        "truncation": {"default": "\u2026"},
        "separator": {"thick": "\ue0b0", "thin": "\ue0b1"},
    }
)
