"""Process name lookup."""

import sys
from pathlib import Path

from promptr.utils import run_text

PROC_DIR = Path("/proc")


def _clean(name: str) -> str | None:
    # Login shells are started as "-bash"; ps may report a full path
    name = name.strip().removeprefix("-")
    name = name.rsplit("/", 1)[-1]
    return name or None


def resolve_process_name(pid: int) -> str | None:
    """Look up the executable name of a process.

    Reads ``/proc/<pid>/comm`` on Linux and asks ``ps`` elsewhere.

    Args:
        pid: Process id.

    Returns:
        The bare executable name, or None if it cannot be determined.
    """
    if sys.platform.startswith("linux"):
        try:
            comm = (PROC_DIR / str(pid) / "comm").read_text(encoding="utf-8")
        except OSError:
            return None
        return _clean(comm)

    output = run_text(["ps", "-o", "comm=", "-p", str(pid)])
    if output is None:
        return None
    return _clean(output)
