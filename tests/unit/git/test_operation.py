"""Unit tests for in-progress operation detection."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from promptr.enums import OperationKind
from promptr.exceptions import RepositoryError
from promptr.git import Operation, detect_operation

if TYPE_CHECKING:
    from pyfakefs.fake_filesystem import FakeFilesystem

GITDIR = Path("/repo/.git")


@pytest.fixture
def gitdir(fs: FakeFilesystem) -> Path:
    fs.create_file(GITDIR / "HEAD")
    return GITDIR


class TestDetectOperation:
    def test_nothing_in_progress(self, gitdir: Path) -> None:
        assert detect_operation(gitdir) is None

    def test_interactive_rebase_with_progress(
        self, fs: FakeFilesystem, gitdir: Path
    ) -> None:
        fs.create_file(gitdir / "rebase-merge" / "msgnum", contents="2\n")
        fs.create_file(gitdir / "rebase-merge" / "end", contents="5\n")
        fs.create_file(gitdir / "rebase-merge" / "interactive")

        assert detect_operation(gitdir) == Operation(
            OperationKind.REBASE, step=2, total=5, interactive=True
        )

    def test_apply_rebase(self, fs: FakeFilesystem, gitdir: Path) -> None:
        fs.create_file(gitdir / "rebase-apply" / "next", contents="1")
        fs.create_file(gitdir / "rebase-apply" / "last", contents="3")

        assert detect_operation(gitdir) == Operation(
            OperationKind.REBASE, step=1, total=3
        )

    def test_rebase_without_counters(self, fs: FakeFilesystem, gitdir: Path) -> None:
        fs.create_dir(gitdir / "rebase-merge")

        assert detect_operation(gitdir) == Operation(OperationKind.REBASE)

    def test_rebase_beats_stale_cherry_pick(
        self, fs: FakeFilesystem, gitdir: Path
    ) -> None:
        fs.create_file(gitdir / "rebase-merge" / "msgnum", contents="2")
        fs.create_file(gitdir / "rebase-merge" / "end", contents="5")
        fs.create_file(gitdir / "CHERRY_PICK_HEAD")

        operation = detect_operation(gitdir)

        assert operation is not None
        assert operation.kind is OperationKind.REBASE

    @pytest.mark.parametrize(
        ("marker", "kind"),
        [
            ("CHERRY_PICK_HEAD", OperationKind.CHERRY_PICK),
            ("REVERT_HEAD", OperationKind.REVERT),
            ("MERGE_HEAD", OperationKind.MERGE),
            ("BISECT_LOG", OperationKind.BISECT),
        ],
    )
    def test_marker_files(
        self, fs: FakeFilesystem, gitdir: Path, marker: str, kind: OperationKind
    ) -> None:
        fs.create_file(gitdir / marker)

        assert detect_operation(gitdir) == Operation(kind)

    def test_custom_priority(self, fs: FakeFilesystem, gitdir: Path) -> None:
        fs.create_file(gitdir / "MERGE_HEAD")
        fs.create_file(gitdir / "BISECT_LOG")

        operation = detect_operation(
            gitdir, (OperationKind.BISECT, OperationKind.MERGE)
        )

        assert operation == Operation(OperationKind.BISECT)

    def test_kinds_left_out_are_ignored(self, fs: FakeFilesystem, gitdir: Path) -> None:
        fs.create_file(gitdir / "MERGE_HEAD")

        assert detect_operation(gitdir, (OperationKind.REBASE,)) is None

    def test_malformed_counter(self, fs: FakeFilesystem, gitdir: Path) -> None:
        fs.create_file(gitdir / "rebase-merge" / "msgnum", contents="two")

        with pytest.raises(RepositoryError):
            detect_operation(gitdir)
