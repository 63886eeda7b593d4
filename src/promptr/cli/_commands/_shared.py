"""Shared CLI utilities for commands."""

from enum import IntEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rich.console import Console

__all__ = ["ExitCode", "get_error_console"]


class ExitCode(IntEnum):
    """Standard exit codes for promptr CLI commands."""

    SUCCESS = 0
    LOAD_ERROR = 1
    NOT_FOUND = 3
    SHELL_ERROR = 6


def get_error_console() -> "Console":
    """Get a Rich console configured for error output to stderr."""
    from rich.console import Console

    return Console(stderr=True)
