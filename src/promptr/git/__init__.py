"""Git repository state detection.

Reads on-disk repository metadata with dulwich. Nothing here writes to the
repository or runs a git client.
"""

from ._detect import detect_repository_state
from ._graph import count_ahead_behind
from ._head import resolve_head
from ._ignore import IgnoreMatcher, load_gitignore_patterns
from ._location import discover_repository, open_repository
from ._models import (
    DEFAULT_OPERATION_PRIORITY,
    DEFAULT_SHORT_ID_LENGTH,
    AheadBehind,
    Branch,
    Detached,
    GitSegmentState,
    HeadState,
    Operation,
    RepoLocation,
    Unborn,
    WorkingTreeStatus,
)
from ._operation import detect_operation
from ._status import collect_status, count_stashes
from ._upstream import map_refspec, resolve_upstream, upstream_ref

__all__ = [
    "DEFAULT_OPERATION_PRIORITY",
    "DEFAULT_SHORT_ID_LENGTH",
    "AheadBehind",
    "Branch",
    "Detached",
    "GitSegmentState",
    "HeadState",
    "IgnoreMatcher",
    "Operation",
    "RepoLocation",
    "Unborn",
    "WorkingTreeStatus",
    "collect_status",
    "count_ahead_behind",
    "count_stashes",
    "detect_operation",
    "detect_repository_state",
    "discover_repository",
    "load_gitignore_patterns",
    "map_refspec",
    "open_repository",
    "resolve_head",
    "resolve_upstream",
    "upstream_ref",
]
