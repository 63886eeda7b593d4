"""Configuration path discovery.

The configuration lives in a single JSON file inside the platform-specific
user configuration directory. ``PROMPTR_CONFIG`` overrides the file path.
"""

import os
from pathlib import Path
from typing import TYPE_CHECKING

import platformdirs

from ._defaults import CONFIG_FILE_NAME

if TYPE_CHECKING:
    from collections.abc import Mapping


def get_config_dir() -> Path:
    r"""Get the platform-specific configuration directory.

    - Linux: ``~/.config/promptr``
    - macOS: ``~/Library/Application Support/promptr``
    - Windows: ``%APPDATA%\promptr``

    The directory is returned whether or not it exists.

    Returns:
        Path to the configuration directory.
    """
    return platformdirs.user_config_path("promptr")


def get_config_path(environ: "Mapping[str, str] | None" = None) -> Path:
    """Get the configuration file path.

    Args:
        environ: Environment to consult. Defaults to the process environment.

    Returns:
        ``$PROMPTR_CONFIG`` when set, otherwise ``promptr.json`` in the
        configuration directory.
    """
    env = os.environ if environ is None else environ
    override = env.get("PROMPTR_CONFIG")
    if override:
        return Path(override).expanduser()
    return get_config_dir() / CONFIG_FILE_NAME
