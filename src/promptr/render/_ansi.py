"""SGR escape sequences and shell-specific quoting.

Prompt strings must tell the shell which bytes take no screen space, or line
editing miscounts the prompt width. Bash wants ``\\[...\\]`` around them and
zsh ``%{...%}``. Plain output is for terminals and tests.
"""

from typing import TYPE_CHECKING

from promptr.enums import Shell
from promptr.theme import sgr_color

if TYPE_CHECKING:
    from promptr.theme import Color

ESC = "\x1b"

RESET = "0"
SET_FG = "38"
SET_BG = "48"
DEFAULT_BG = "49"

# Characters the shell would expand when the prompt is evaluated
_BASH_ESCAPES = str.maketrans({"\\": "\\\\", "$": "\\$", "`": "\\`"})
_ZSH_ESCAPES = str.maketrans({"%": "%%"})


def sgr(params: str, shell: Shell) -> str:
    """Build one SGR sequence, wrapped as non-printing for the shell.

    Args:
        params: SGR parameters, e.g. ``38;5;250``.
        shell: Target shell.

    Returns:
        The escape sequence.
    """
    match shell:
        case Shell.BASH:
            return f"\\[\\e[{params}m\\]"
        case Shell.ZSH:
            return f"%{{{ESC}[{params}m%}}"
        case _:
            return f"{ESC}[{params}m"


def escape_text(text: str, shell: Shell) -> str:
    """Escape characters the shell would expand in a prompt string."""
    match shell:
        case Shell.BASH:
            return text.translate(_BASH_ESCAPES)
        case Shell.ZSH:
            return text.translate(_ZSH_ESCAPES)
        case _:
            return text


def set_fg(color: "Color", shell: Shell) -> str:
    return sgr(f"{SET_FG};{sgr_color(color)}", shell)


def set_bg(color: "Color | None", shell: Shell) -> str:
    """Set the background color. None selects the terminal default."""
    if color is None:
        return sgr(DEFAULT_BG, shell)
    return sgr(f"{SET_BG};{sgr_color(color)}", shell)


def reset(shell: Shell) -> str:
    return sgr(RESET, shell)
