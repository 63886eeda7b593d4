"""Working tree status collection.

Counts are gathered by comparing three states directly: the HEAD tree, the
index, and the files on disk. Only what the counts need is read, so no diff
is ever materialized.
"""

import os
import stat
from typing import TYPE_CHECKING

from dulwich.index import (
    ConflictedIndexEntry,
    IndexEntry,
    blob_from_path_and_stat,
    cleanup_mode,
)
from dulwich.object_store import iter_tree_contents
from dulwich.objects import S_ISGITLINK, Commit
from dulwich.reflog import read_reflog

from ._ignore import IgnoreMatcher
from ._models import WorkingTreeStatus

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from dulwich.repo import Repo

    from ._models import RepoLocation

# Index sizes are stored truncated to 32 bits
_SIZE_MASK = 0xFFFFFFFF


def _mtime_seconds(entry: IndexEntry) -> int:
    mtime = entry.mtime
    if isinstance(mtime, tuple):
        return int(mtime[0])
    return int(mtime)


def _head_entries(repo: "Repo", head_commit: bytes | None) -> dict[bytes, tuple[int, bytes]]:
    """Map every path in the HEAD tree to its (mode, sha)."""
    if head_commit is None:
        return {}
    commit = repo.object_store[head_commit]
    if not isinstance(commit, Commit):
        return {}
    return {
        entry.path: (entry.mode, entry.sha)
        for entry in iter_tree_contents(repo.object_store, commit.tree)
    }


def _split_index(
    repo: "Repo",
) -> tuple[dict[bytes, IndexEntry], set[bytes]]:
    """Split index entries into merged entries and conflicted paths."""
    entries: dict[bytes, IndexEntry] = {}
    conflicted: set[bytes] = set()
    # Freshly initialized repositories have no index file yet
    if not os.path.exists(repo.index_path()):  # noqa: PTH110
        return entries, conflicted
    for path, entry in repo.open_index().items():
        if isinstance(entry, ConflictedIndexEntry):
            conflicted.add(path)
        else:
            entries[path] = entry
    return entries, conflicted


def count_staged(
    head: "Mapping[bytes, tuple[int, bytes]]",
    entries: "Mapping[bytes, IndexEntry]",
    conflicted: set[bytes],
) -> int:
    """Count paths added, modified or deleted between HEAD and the index."""
    staged = 0
    for path, entry in entries.items():
        if head.get(path) != (entry.mode, entry.sha):
            staged += 1
    for path in head:
        if path not in entries and path not in conflicted:
            staged += 1
    return staged


def _is_modified(full_path: str, entry: IndexEntry, index_mtime: int) -> bool:
    try:
        st = os.lstat(full_path)
    except (FileNotFoundError, NotADirectoryError):
        return True

    if stat.S_ISDIR(st.st_mode):
        return True

    mode = cleanup_mode(st.st_mode)
    if mode != entry.mode:
        return True

    # A file written in the same second as the index is "racily clean":
    # its signature cannot be trusted, so it is hashed like any other.
    if (
        entry.size == st.st_size & _SIZE_MASK
        and _mtime_seconds(entry) == int(st.st_mtime)
        and int(st.st_mtime) < index_mtime
    ):
        return False

    blob = blob_from_path_and_stat(os.fsencode(full_path), st)
    return blob.id != entry.sha


def count_unstaged(worktree: "Path", entries: "Mapping[bytes, IndexEntry]", index_mtime: int) -> int:
    """Count index entries whose working tree file differs.

    A missing file counts as unstaged. Submodules are not descended.
    """
    root = os.fsencode(worktree)
    unstaged = 0
    for path, entry in entries.items():
        if S_ISGITLINK(entry.mode):
            continue
        full_path = os.fsdecode(os.path.join(root, path))  # noqa: PTH118
        if _is_modified(full_path, entry, index_mtime):
            unstaged += 1
    return unstaged


def count_untracked(worktree: "Path", tracked: set[bytes], matcher: IgnoreMatcher) -> int:
    """Count paths that are neither tracked nor ignored.

    Ignored directories are not descended. A nested repository counts as
    one untracked entry. Symbolic links to directories count as files.
    """
    untracked = 0
    for dirpath, dirnames, filenames in os.walk(worktree):
        rel_dir = os.path.relpath(dirpath, worktree).replace(os.sep, "/")
        prefix = "" if rel_dir == "." else rel_dir + "/"

        keep: list[str] = []
        for name in sorted(dirnames):
            if name == ".git":
                continue
            rel = prefix + name
            full = os.path.join(dirpath, name)  # noqa: PTH118
            if os.fsencode(rel) in tracked:
                continue
            if os.path.islink(full):  # noqa: PTH114
                filenames.append(name)
                continue
            if matcher.is_ignored(rel, is_dir=True):
                continue
            if os.path.lexists(os.path.join(full, ".git")):  # noqa: PTH118
                untracked += 1
                continue
            keep.append(name)
        dirnames[:] = keep

        for name in filenames:
            if name == ".git":
                continue
            rel = prefix + name
            if os.fsencode(rel) in tracked:
                continue
            if matcher.is_ignored(rel):
                continue
            untracked += 1
    return untracked


def count_stashes(commondir: "Path") -> int:
    """Count entries in the stash reflog."""
    path = commondir / "logs" / "refs" / "stash"
    try:
        with path.open("rb") as f:
            return sum(1 for _ in read_reflog(f))
    except FileNotFoundError:
        return 0


def collect_status(
    repo: "Repo",
    location: "RepoLocation",
    head_commit: bytes | None,
    *,
    include_untracked: bool = True,
    environ: "Mapping[str, str] | None" = None,
) -> WorkingTreeStatus:
    """Collect working tree counts.

    A conflicted path is only counted as conflicted. A path can be both
    staged and unstaged, as in ``git status``.

    Args:
        repo: The repository.
        location: Where the repository lives.
        head_commit: HEAD commit id, or None for an unborn branch.
        include_untracked: Walk the working tree for untracked files.
        environ: Environment used to locate the user's excludes file.

    Returns:
        The working tree status.
    """
    entries, conflicted = _split_index(repo)
    head = _head_entries(repo, head_commit)

    try:
        index_mtime = int(os.stat(repo.index_path()).st_mtime)  # noqa: PTH116
    except FileNotFoundError:
        index_mtime = 0

    untracked = 0
    if include_untracked:
        matcher = IgnoreMatcher.for_repository(
            location.worktree, location.gitdir, repo.get_config_stack(), environ
        )
        untracked = count_untracked(
            location.worktree, set(entries) | conflicted, matcher
        )

    return WorkingTreeStatus(
        staged=count_staged(head, entries, conflicted),
        unstaged=count_unstaged(location.worktree, entries, index_mtime),
        untracked=untracked,
        conflicted=len(conflicted),
        stash_count=count_stashes(location.commondir),
    )
