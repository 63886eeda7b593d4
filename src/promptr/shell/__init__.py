"""Shell integration."""

from ._process import resolve_process_name
from ._shell import detect_shell, init_script, load_script, self_executable

__all__ = [
    "detect_shell",
    "init_script",
    "load_script",
    "resolve_process_name",
    "self_executable",
]
