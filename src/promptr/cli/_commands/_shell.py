"""Shell hook commands.

Use from ``~/.bashrc``::

    eval "$(promptr init)"
"""

from typing import TYPE_CHECKING

from promptr.exceptions import ShellError
from promptr.shell import detect_shell, init_script, load_script, self_executable

from ._shared import ExitCode, get_error_console

if TYPE_CHECKING:
    from collections.abc import Callable

    from promptr.enums import Shell


def _emit(build: "Callable[[Shell, str], str]") -> None:
    try:
        script = build(detect_shell(), self_executable())
    except ShellError as e:
        get_error_console().print(f"[red]Error:[/red] {e}")
        raise SystemExit(ExitCode.SHELL_ERROR) from None
    print(script, end="")


def init() -> None:
    """Print the shell code that saves a default config and installs the hook."""
    _emit(init_script)


def load() -> None:
    """Print the shell code that installs the prompt hook."""
    _emit(load_script)
