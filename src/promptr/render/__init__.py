"""Prompt rendering."""

from ._ansi import escape_text, reset, set_bg, set_fg, sgr
from ._engine import (
    PADDING,
    TRAILING,
    Transition,
    ellipsis_fragment,
    measure,
    render,
    transition,
    transitions,
    truncate,
)
from ._fragment import Fragment
from ._terminal import DEFAULT_TERMINAL_WIDTH, terminal_width

__all__ = [
    "DEFAULT_TERMINAL_WIDTH",
    "PADDING",
    "TRAILING",
    "Fragment",
    "Transition",
    "ellipsis_fragment",
    "escape_text",
    "measure",
    "render",
    "reset",
    "set_bg",
    "set_fg",
    "sgr",
    "terminal_width",
    "transition",
    "transitions",
    "truncate",
]
