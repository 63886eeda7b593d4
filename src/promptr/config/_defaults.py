"""Default configuration values.

DEFAULT_CONFIG is used whenever no configuration file is present or the file
cannot be loaded. It is what ``promptr default-config`` prints and what
``promptr init`` installs.
"""

from typing import Any

CONFIG_MAGIC = 12
"""Required value of the ``promptr_config`` key."""

CONFIG_FILE_NAME = "promptr.json"

DEFAULT_CONFIG: dict[str, Any] = {  # pyright: ignore[reportExplicitAny]
    "promptr_config": CONFIG_MAGIC,
    "segments": [
        {"name": "username"},
        {"name": "paths"},
        {"name": "command_status"},
    ],
    "theme": {},
    "logging": {
        "level": "warning",
        "format": "text",
        "file": "",
    },
}
