import os
import sys
from typing import TYPE_CHECKING

from promptr.exceptions import ConfigError

from ._defaults import DEFAULT_CONFIG
from ._discovery import get_config_path
from ._models import PromptrConfig

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path


def default_config() -> PromptrConfig:
    """Return the built-in configuration."""
    return PromptrConfig.from_dict(DEFAULT_CONFIG, source="default")


def safe_load_config(
    *,
    config_path: "Path | None" = None,
    environ: "Mapping[str, str] | None" = None,
    quiet: bool = False,
) -> tuple[PromptrConfig, str | None]:
    """Load configuration with error handling.

    A missing configuration file is not an error: the defaults are used.
    Other failures are handled based on the PROMPTR_STRICT_CONFIG
    environment variable:
    - If unset or "0": warn to stderr and return the default config
    - If "1": fail fast with sys.exit(1)

    When config_path is provided, the file must exist (explicit user request).

    Args:
        config_path: Explicit path to config file (--config flag).
        environ: Environment to consult. Defaults to the process environment.
        quiet: Suppress the stderr warning in non-strict mode.

    Returns:
        Tuple of (PromptrConfig, error_message). On success, error_message is
        None. On failure (non-strict mode), returns the defaults with the error
        message.
    """
    env = os.environ if environ is None else environ
    strict_mode = env.get("PROMPTR_STRICT_CONFIG", "0") == "1"

    if config_path is not None and not config_path.exists():
        print(f"Error: Config file not found: {config_path}", file=sys.stderr)  # noqa: T201
        sys.exit(1)

    path = config_path if config_path is not None else get_config_path(env)

    try:
        config = PromptrConfig.from_file(path)
    except FileNotFoundError:
        return default_config(), None
    except ConfigError as e:
        error_msg = str(e)
    except OSError as e:
        error_msg = f"Failed to load config: {e}"
    else:
        return config, None

    if strict_mode:
        print(f"Error: {error_msg}", file=sys.stderr)  # noqa: T201
        sys.exit(1)
    if not quiet:
        print(  # noqa: T201
            f"Warning: {error_msg}; using the default configuration",
            file=sys.stderr,
        )
    return default_config(), error_msg
