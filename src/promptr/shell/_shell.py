"""Shell detection and prompt hook snippets.

The snippets are meant to be evaluated by the shell, e.g.
``eval "$(promptr init)"`` in ``~/.bashrc``.
"""

import os
import shlex
import shutil
import sys
from pathlib import PurePath
from typing import TYPE_CHECKING

from promptr.enums import Shell
from promptr.exceptions import ShellError

from ._process import resolve_process_name

if TYPE_CHECKING:
    from collections.abc import Mapping

_BASH_HOOK = """\
    PROMPT_COMMAND=promptr_prompt
    promptr_prompt() {{
        local code=$?
        PS1="$(code=$code hostname=$HOSTNAME jobs=$(jobs -p | wc -l) dirs="$(dirs -p)" uid=$UID COLUMNS=$COLUMNS {exe} prompt --shell bash)"
    }}
"""

_BASH_INIT = """\
if [[ $- == *i* ]]; then
    promptr_conf_file="$({exe} location --file)"
    promptr_conf_dir="$(dirname "${{promptr_conf_file}}")"

    if [ ! -d "${{promptr_conf_dir}}" ]; then
        echo "Creating default configuration directory"
        mkdir -p "${{promptr_conf_dir}}"
    fi

    if [ ! -f "${{promptr_conf_file}}" ]; then
        echo "Saving default configuration to ${{promptr_conf_file}}"
        {exe} current-config > "${{promptr_conf_file}}"
    else
        echo "Found an existing configuration at ${{promptr_conf_file}}"
    fi

    unset promptr_conf_dir
    unset promptr_conf_file

{hook}else
    echo "*** promptr must be run from an interactive shell ***"
fi
"""

_BASH_LOAD = """\
if [[ $- == *i* ]]; then
    promptr_conf_file="$({exe} location --file)"

    if [ ! -f "${{promptr_conf_file}}" ]; then
        echo "Couldn't find an existing configuration file, using the defaults"
    fi

    unset promptr_conf_file

{hook}fi
"""


def _shell_from_name(name: str) -> Shell:
    base = PurePath(name).name.removeprefix("-")
    try:
        shell = Shell(base)
    except ValueError:
        msg = f"Unsupported shell: {base!r}"
        raise ShellError(msg) from None
    if shell is Shell.PLAIN:
        msg = f"Unsupported shell: {base!r}"
        raise ShellError(msg)
    return shell


def detect_shell(
    environ: "Mapping[str, str] | None" = None,
    *,
    parent_pid: int | None = None,
) -> Shell:
    """Identify the shell that invoked promptr.

    Checks ``$PROMPTR_SHELL``, then ``$SHELL``, then the name of the parent
    process.

    Args:
        environ: Environment to consult. Defaults to the process environment.
        parent_pid: Parent process id. Defaults to ``os.getppid()``.

    Returns:
        The detected shell.

    Raises:
        ShellError: If no shell can be identified or it is not supported.
    """
    env = os.environ if environ is None else environ
    name = env.get("PROMPTR_SHELL") or env.get("SHELL")
    if not name:
        name = resolve_process_name(os.getppid() if parent_pid is None else parent_pid)
    if not name:
        msg = "Cannot determine the current shell; set $PROMPTR_SHELL"
        raise ShellError(msg)
    return _shell_from_name(name)


def self_executable() -> str:
    """Command that runs this promptr installation."""
    argv0 = sys.argv[0] if sys.argv else ""
    if argv0 and PurePath(argv0).name == "promptr":
        return os.path.abspath(argv0)
    return shutil.which("promptr") or "promptr"


def _require_bash(shell: Shell) -> None:
    if shell is not Shell.BASH:
        msg = f"No prompt hook is available for {shell.value}"
        raise ShellError(msg)


def init_script(shell: Shell, executable: str) -> str:
    """Snippet that installs a default config if needed and the prompt hook.

    Raises:
        ShellError: If the shell is not bash.
    """
    _require_bash(shell)
    exe = shlex.quote(executable)
    return _BASH_INIT.format(exe=exe, hook=_BASH_HOOK.format(exe=exe))


def load_script(shell: Shell, executable: str) -> str:
    """Snippet that installs the prompt hook without creating a config.

    Raises:
        ShellError: If the shell is not bash.
    """
    _require_bash(shell)
    exe = shlex.quote(executable)
    return _BASH_LOAD.format(exe=exe, hook=_BASH_HOOK.format(exe=exe))
