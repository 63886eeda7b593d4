"""In-progress operation detection.

Git leaves marker files in the per-worktree metadata directory while an
operation is stopped for user input. Several can be present at once, so the
caller supplies a priority order and the first marker found wins.
"""

from typing import TYPE_CHECKING

from promptr.enums import OperationKind
from promptr.exceptions import RepositoryError

from ._models import DEFAULT_OPERATION_PRIORITY, Operation

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable
    from pathlib import Path


def _read_counter(path: "Path") -> int | None:
    if not path.is_file():
        return None
    text = path.read_text(encoding="utf-8").strip()
    try:
        return int(text)
    except ValueError as e:
        msg = f"Malformed rebase counter in {path}: {text!r}"
        raise RepositoryError(msg, path=path) from e


def _rebase(gitdir: "Path") -> Operation | None:
    merge_dir = gitdir / "rebase-merge"
    if merge_dir.is_dir():
        return Operation(
            OperationKind.REBASE,
            step=_read_counter(merge_dir / "msgnum"),
            total=_read_counter(merge_dir / "end"),
            interactive=(merge_dir / "interactive").exists(),
        )

    apply_dir = gitdir / "rebase-apply"
    if apply_dir.is_dir():
        return Operation(
            OperationKind.REBASE,
            step=_read_counter(apply_dir / "next"),
            total=_read_counter(apply_dir / "last"),
        )
    return None


def _marker(kind: OperationKind, name: str) -> "Callable[[Path], Operation | None]":
    def detect(gitdir: "Path") -> Operation | None:
        if (gitdir / name).is_file():
            return Operation(kind)
        return None

    return detect


_DETECTORS: "dict[OperationKind, Callable[[Path], Operation | None]]" = {
    OperationKind.REBASE: _rebase,
    OperationKind.CHERRY_PICK: _marker(OperationKind.CHERRY_PICK, "CHERRY_PICK_HEAD"),
    OperationKind.REVERT: _marker(OperationKind.REVERT, "REVERT_HEAD"),
    OperationKind.MERGE: _marker(OperationKind.MERGE, "MERGE_HEAD"),
    OperationKind.BISECT: _marker(OperationKind.BISECT, "BISECT_LOG"),
}


def detect_operation(
    gitdir: "Path",
    priority: "Iterable[OperationKind]" = DEFAULT_OPERATION_PRIORITY,
) -> Operation | None:
    """Detect the operation in progress.

    Args:
        gitdir: Per-worktree metadata directory.
        priority: Operation kinds to test, highest priority first. Kinds left
            out are never reported.

    Returns:
        The first operation whose markers are present, or None.

    Raises:
        RepositoryError: If a rebase counter file is malformed.
    """
    for kind in priority:
        operation = _DETECTORS[kind](gitdir)
        if operation is not None:
            return operation
    return None
