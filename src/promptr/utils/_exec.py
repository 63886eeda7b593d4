"""Small subprocess helpers used by collectors that need an external tool."""

import subprocess

DEFAULT_TIMEOUT: float = 1.0
"""Seconds to wait for a helper command. The prompt must not hang on one."""


def run_text(cmd: list[str], timeout: float = DEFAULT_TIMEOUT) -> str | None:
    """Run a command and return its stripped standard output.

    Args:
        cmd: Command and arguments.
        timeout: Timeout in seconds.

    Returns:
        The stripped stdout, or None if the command is missing, times out,
        or exits non-zero.
    """
    try:
        result = subprocess.run(  # noqa: S603
            cmd,
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
        )
    except (FileNotFoundError, PermissionError, subprocess.TimeoutExpired):
        return None

    if result.returncode != 0:
        return None
    return result.stdout.strip()
