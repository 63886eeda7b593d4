"""Unit tests for the username, command status and screen segments."""

from collections.abc import Callable

import pytest
from pytest_mock import MockerFixture

from promptr.exceptions import SegmentError
from promptr.render import Fragment
from promptr.segments import (
    CommandStatusSegment,
    ScreenSegment,
    SegmentContext,
    UsernameSegment,
)

ContextFactory = Callable[..., SegmentContext]


class TestUsernameSegment:
    def test_user(self, make_context: ContextFactory) -> None:
        fragments = UsernameSegment.from_config().compute(make_context(USER="alice"))

        assert fragments == [Fragment("alice", 250, 240, source="Username")]

    def test_logname_fallback(self, make_context: ContextFactory) -> None:
        fragments = UsernameSegment.from_config().compute(make_context(LOGNAME="bob"))

        assert [f.text for f in fragments] == ["bob"]

    def test_abstains_without_user(self, make_context: ContextFactory) -> None:
        assert UsernameSegment.from_config().compute(make_context()) == []

    def test_rejects_arguments(self) -> None:
        with pytest.raises(SegmentError) as exc_info:
            UsernameSegment.from_config({"bogus": True})

        assert exc_info.value.segment == "username"


class TestCommandStatusSegment:
    def test_success_as_user(self, make_context: ContextFactory) -> None:
        fragments = CommandStatusSegment.from_config().compute(
            make_context(code="0", uid="1000")
        )

        assert fragments == [Fragment("$", 15, 236, source="CommandStatus")]

    def test_failure_as_root(self, make_context: ContextFactory) -> None:
        fragments = CommandStatusSegment.from_config().compute(
            make_context(code="1", uid="0")
        )

        assert fragments == [Fragment("#", 15, 161, source="CommandStatus")]

    def test_missing_code_counts_as_success(self, make_context: ContextFactory) -> None:
        (fragment,) = CommandStatusSegment.from_config().compute(make_context(uid="1000"))

        assert fragment.bg == 236

    def test_missing_uid_uses_process_uid(
        self, make_context: ContextFactory, mocker: MockerFixture
    ) -> None:
        mocker.patch("os.geteuid", return_value=0, create=True)

        (fragment,) = CommandStatusSegment.from_config().compute(make_context(code="0"))

        assert fragment.text == "#"

    def test_garbage_uid_uses_process_uid(
        self, make_context: ContextFactory, mocker: MockerFixture
    ) -> None:
        mocker.patch("os.geteuid", return_value=501, create=True)

        (fragment,) = CommandStatusSegment.from_config().compute(
            make_context(code="0", uid="root")
        )

        assert fragment.text == "$"


class TestScreenSegment:
    def test_defaults(self, make_context: ContextFactory) -> None:
        fragments = ScreenSegment.from_config().compute(
            make_context(STY="1234.pts-0.host", WINDOW="1")
        )

        assert [f.text for f in fragments] == ["1[pts-0.host] \U0001f4fa"]

    def test_all_parts(self, make_context: ContextFactory) -> None:
        segment = ScreenSegment.from_config(
            {"show_screen_pid": True, "show_screen_icon": False}
        )

        (fragment,) = segment.compute(make_context(STY="1234.work", WINDOW="3"))

        assert fragment.text == "3[1234.work]"

    def test_name_only(self, make_context: ContextFactory) -> None:
        segment = ScreenSegment.from_config(
            {"show_window_number": False, "show_screen_icon": False}
        )

        (fragment,) = segment.compute(make_context(STY="1234.work", WINDOW="3"))

        assert fragment.text == "work"

    def test_abstains_outside_screen(self, make_context: ContextFactory) -> None:
        assert ScreenSegment.from_config().compute(make_context(WINDOW="1")) == []

    def test_malformed_sty(self, make_context: ContextFactory) -> None:
        with pytest.raises(SegmentError):
            ScreenSegment.from_config().compute(make_context(STY="nodot", WINDOW="1"))
