"""Repository state detection.

Ties the individual readers together. A broken repository must never break
the prompt, so every failure past discovery is logged and reported as None.
"""

from typing import TYPE_CHECKING

from promptr.utils import create_null_logger

from ._graph import count_ahead_behind
from ._head import resolve_head
from ._location import open_repository
from ._models import (
    DEFAULT_OPERATION_PRIORITY,
    DEFAULT_SHORT_ID_LENGTH,
    Branch,
    Detached,
    GitSegmentState,
)
from ._operation import detect_operation
from ._status import collect_status
from ._upstream import resolve_upstream

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping
    from pathlib import Path

    from dulwich.repo import Repo
    from structlog.typing import FilteringBoundLogger

    from promptr.enums import OperationKind

    from ._models import AheadBehind, HeadState


def _head_commit(head: "HeadState") -> bytes | None:
    if isinstance(head, (Branch, Detached)):
        return head.commit.encode("ascii")
    return None


def _ahead_behind(repo: "Repo", head: "HeadState") -> "AheadBehind | None":
    if not isinstance(head, Branch):
        return None
    upstream = resolve_upstream(repo, head.name)
    if upstream is None:
        return None
    return count_ahead_behind(
        repo.object_store, head.commit.encode("ascii"), upstream.encode("ascii")
    )


def detect_repository_state(
    start: "Path",
    *,
    short_id_length: int = DEFAULT_SHORT_ID_LENGTH,
    operation_priority: "Iterable[OperationKind]" = DEFAULT_OPERATION_PRIORITY,
    include_untracked: bool = True,
    environ: "Mapping[str, str] | None" = None,
    logger: "FilteringBoundLogger | None" = None,
) -> GitSegmentState | None:
    """Detect the state of the repository containing a directory.

    Args:
        start: Absolute directory to start discovery from.
        short_id_length: Hex digits shown for a detached HEAD.
        operation_priority: Operation kinds in priority order.
        include_untracked: Whether to walk the working tree for untracked
            files.
        environ: Environment used to locate the user's excludes file.
        logger: Diagnostics logger.

    Returns:
        The complete repository state, or None when not inside a repository
        or when the repository metadata cannot be read.
    """
    log = logger if logger is not None else create_null_logger()

    try:
        opened = open_repository(start)
    except Exception as e:  # noqa: BLE001
        log.warning("git_discovery_failed", start=str(start), error=str(e))
        return None

    if opened is None:
        log.debug("git_no_repository", start=str(start))
        return None

    repo, location = opened

    try:
        head = resolve_head(repo, short_id_length)
        return GitSegmentState(
            location=location,
            head=head,
            operation=detect_operation(location.gitdir, operation_priority),
            ahead_behind=_ahead_behind(repo, head),
            status=collect_status(
                repo,
                location,
                _head_commit(head),
                include_untracked=include_untracked,
                environ=environ,
            ),
        )
    except Exception as e:  # noqa: BLE001
        log.warning(
            "git_state_unreadable",
            gitdir=str(location.gitdir),
            error=str(e),
            error_type=type(e).__name__,
        )
        return None
    finally:
        repo.close()
