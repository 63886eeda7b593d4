"""promptr CLI commands."""
# pyright: reportUnusedCallResult=false

from typing import TYPE_CHECKING

from ._config import current_config, default_config_command, location
from ._context import CLIContext
from ._prompt import prompt, segment
from ._shared import ExitCode, get_error_console
from ._shell import init, load

if TYPE_CHECKING:
    from cyclopts import App

__all__ = [
    "CLIContext",
    "ExitCode",
    "get_error_console",
    "register_commands",
]


def register_commands(app: "App") -> None:
    app.default(prompt)
    app.command(prompt, name="prompt")
    app.command(segment, name="segment")
    app.command(current_config, name="current-config")
    app.command(default_config_command, name="default-config")
    app.command(location, name="location")
    app.command(init, name="init")
    app.command(load, name="load")
