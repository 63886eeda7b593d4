"""The git segment.

Renders the repository state as a run of fragments: branch, operation in
progress, ahead, behind, staged, unstaged, untracked, conflicted and stashed.
Counts that are zero are left out.
"""

from typing import TYPE_CHECKING, ClassVar

from pydantic import Field

from promptr.enums import OperationKind, Separator
from promptr.git import (
    DEFAULT_OPERATION_PRIORITY,
    DEFAULT_SHORT_ID_LENGTH,
    Branch,
    Detached,
    GitSegmentState,
    Operation,
    Unborn,
    detect_repository_state,
)
from promptr.render import Fragment

from ._base import Segment, SegmentArgs, SegmentContext

if TYPE_CHECKING:
    from promptr.git import AheadBehind


class GitArgs(SegmentArgs):
    """Arguments for the git segment.

    Attributes:
        short_id_length: Hex digits shown for a detached HEAD.
        operation_priority: Which operation wins when markers for several
            are present, highest first.
        show_untracked: Count untracked files. Walking a large tree is the
            slowest part of the segment.
        show_stash: Show the stash count.
    """

    short_id_length: int = Field(default=DEFAULT_SHORT_ID_LENGTH, ge=4, le=40)
    operation_priority: tuple[OperationKind, ...] = DEFAULT_OPERATION_PRIORITY
    show_untracked: bool = True
    show_stash: bool = True


class GitSegment(Segment[GitArgs]):
    """Git repository status."""

    name: ClassVar[str] = "git"
    kind: ClassVar[str] = "vcs"
    args_model: ClassVar[type[SegmentArgs]] = GitArgs

    def compute(self, context: SegmentContext) -> list[Fragment]:
        state = detect_repository_state(
            context.cwd,
            short_id_length=self.args.short_id_length,
            operation_priority=self.args.operation_priority,
            include_untracked=self.args.show_untracked,
            environ=context.env,
            logger=context.logger,
        )
        if state is None:
            return []

        fragments = [self._head(state, context)]
        if state.operation is not None:
            fragments.append(self._operation(state.operation, context))
        if state.ahead_behind is not None:
            fragments.extend(self._ahead_behind(state.ahead_behind, context))

        status = state.status
        counts = [
            ("staged", status.staged),
            ("unstaged", status.unstaged),
            ("untracked", status.untracked),
            ("conflicted", status.conflicted),
        ]
        if self.args.show_stash:
            counts.append(("stash", status.stash_count))

        for sub_state, count in counts:
            if count > 0:
                style = self.style(context, sub_state)
                fragments.append(
                    Fragment.styled(
                        f"{count}{style.glyph}",
                        style,
                        source=f"Git::{sub_state.capitalize()}",
                    )
                )
        return fragments

    def _head(self, state: GitSegmentState, context: SegmentContext) -> Fragment:
        dirty = state.status.dirty
        head = state.head
        branch_glyph = context.theme.glyph(self.kind, "dirty" if dirty else "clean")

        match head:
            case Branch(name=name):
                sub_state = "clean"
                text = f"{branch_glyph} {name}"
            case Detached(short_id=short_id):
                sub_state = "detached"
                text = f"{context.theme.glyph(self.kind, 'detached')} {short_id}"
            case Unborn(name=name):
                sub_state = "unborn"
                text = f"{branch_glyph} {name} {context.theme.glyph(self.kind, 'unborn')}"

        colors = self.style(context, "dirty" if dirty else sub_state)
        return Fragment(
            text, colors.fg, colors.bg, source=f"Git::{type(head).__name__}"
        )

    def _operation(self, operation: Operation, context: SegmentContext) -> Fragment:
        sub_state = operation.kind.value
        if operation.kind is OperationKind.REBASE and operation.interactive:
            sub_state = "rebase_interactive"

        style = self.style(context, sub_state)
        text = style.glyph
        if operation.step is not None and operation.total is not None:
            text = f"{text} {operation.step}/{operation.total}"
        return Fragment.styled(text, style, source="Git::Operation")

    def _ahead_behind(
        self, counts: "AheadBehind", context: SegmentContext
    ) -> list[Fragment]:
        fragments: list[Fragment] = []
        if counts.ahead > 0:
            style = self.style(context, "ahead")
            fragments.append(
                Fragment.styled(
                    f"{counts.ahead}{style.glyph}",
                    style,
                    separator=Separator.THIN if counts.behind > 0 else Separator.THICK,
                    source="Git::Ahead",
                )
            )
        if counts.behind > 0:
            style = self.style(context, "behind")
            fragments.append(
                Fragment.styled(
                    f"{counts.behind}{style.glyph}", style, source="Git::Behind"
                )
            )
        return fragments
