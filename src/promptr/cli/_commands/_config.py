"""Configuration commands."""

from typing import Annotated

from cyclopts import Parameter

from promptr.config import default_config, get_config_path
from promptr.utils import dump_json

from ._context import CLIContext


def current_config() -> None:
    """Print the active configuration as JSON."""
    ctx = CLIContext.get_current()
    print(dump_json(ctx.config.to_json_dict()))


def default_config_command() -> None:
    """Print the default configuration as JSON."""
    print(dump_json(default_config().to_json_dict()))


def location(
    *,
    file: Annotated[
        bool, Parameter(help="Print the configuration file instead of its directory")
    ] = False,
) -> None:
    """Print the configuration directory.

    Args:
        file: Print the full path of the configuration file.
    """
    ctx = CLIContext.get_current()
    path = ctx.config_path if ctx.config_path is not None else get_config_path()
    print(path if file else path.parent)
