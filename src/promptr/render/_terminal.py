"""Terminal width detection."""

import os
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

DEFAULT_TERMINAL_WIDTH = 80


def terminal_width(environ: "Mapping[str, str] | None" = None) -> int:
    """Determine the terminal width in cells.

    The prompt is rendered inside a command substitution, so standard output
    is usually a pipe. Standard error and standard input are tried first.

    Args:
        environ: Environment to consult. Defaults to the process environment.

    Returns:
        ``$COLUMNS`` when it is a positive integer, else the size of the first
        terminal among stderr, stdin and stdout, else 80.
    """
    env = os.environ if environ is None else environ
    columns = env.get("COLUMNS", "")
    if columns.isdigit() and int(columns) > 0:
        return int(columns)

    for stream in (sys.stderr, sys.stdin, sys.stdout):
        try:
            size = os.get_terminal_size(stream.fileno())
        except (AttributeError, ValueError, OSError):
            continue
        if size.columns > 0:
            return size.columns

    return DEFAULT_TERMINAL_WIDTH
