"""Repository state models.

Everything the git segment needs to know about a working tree, gathered in one
pass by the detector and discarded after the render.
"""

# ruff: noqa: TC003  # Path needed at runtime for dataclass field
from dataclasses import dataclass, field
from pathlib import Path

from promptr.enums import OperationKind

DEFAULT_OPERATION_PRIORITY: tuple[OperationKind, ...] = (
    OperationKind.REBASE,
    OperationKind.CHERRY_PICK,
    OperationKind.REVERT,
    OperationKind.MERGE,
    OperationKind.BISECT,
)
"""Marker priority when several are present.

A rebase leaves a stale CHERRY_PICK_HEAD behind between picks, so rebase wins.
"""

DEFAULT_SHORT_ID_LENGTH = 7


@dataclass(frozen=True, slots=True)
class RepoLocation:
    """Where a repository's metadata and working tree live.

    Attributes:
        gitdir: Per-worktree metadata directory (HEAD, index, operation markers).
        commondir: Shared metadata directory (objects, refs, config). Same as
            gitdir outside linked worktrees.
        worktree: Root of the working tree.
    """

    gitdir: Path
    commondir: Path
    worktree: Path


@dataclass(frozen=True, slots=True)
class Branch:
    """HEAD is on a branch with at least one commit."""

    name: str
    commit: str = field(default="", compare=False)


@dataclass(frozen=True, slots=True)
class Detached:
    """HEAD points directly at a commit."""

    short_id: str
    commit: str = field(default="", compare=False)


@dataclass(frozen=True, slots=True)
class Unborn:
    """HEAD is on a branch that has no commits yet."""

    name: str


HeadState = Branch | Detached | Unborn


@dataclass(frozen=True, slots=True)
class Operation:
    """An operation in progress.

    Attributes:
        kind: Which operation left its markers behind.
        step: Current step for rebases, if recorded.
        total: Total steps for rebases, if recorded.
        interactive: Whether the rebase is interactive.
    """

    kind: OperationKind
    step: int | None = None
    total: int | None = None
    interactive: bool = False


@dataclass(frozen=True, slots=True)
class AheadBehind:
    """Commit counts relative to the upstream branch."""

    ahead: int
    behind: int


@dataclass(frozen=True, slots=True)
class WorkingTreeStatus:
    """Path counts for the index and working tree.

    Attributes:
        staged: Paths whose index entry differs from HEAD.
        unstaged: Paths whose working tree file differs from the index.
        untracked: Paths neither in the index nor ignored.
        conflicted: Paths with unmerged index entries.
        stash_count: Entries in the stash reflog.
    """

    staged: int = 0
    unstaged: int = 0
    untracked: int = 0
    conflicted: int = 0
    stash_count: int = 0

    @property
    def dirty(self) -> bool:
        """Whether anything differs from HEAD. Stashes do not count."""
        return (self.staged + self.unstaged + self.untracked + self.conflicted) > 0


@dataclass(frozen=True, slots=True)
class GitSegmentState:
    """Everything the git segment renders.

    Attributes:
        location: Where the repository was found.
        head: Branch, detached commit or unborn branch.
        operation: Operation in progress, or None.
        ahead_behind: Counts against the upstream, or None without a
            resolvable upstream. None is distinct from zero counts.
        status: Working tree counts.
    """

    location: RepoLocation
    head: HeadState
    operation: Operation | None
    ahead_behind: AheadBehind | None
    status: WorkingTreeStatus
