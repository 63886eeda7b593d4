"""Unit tests for the segment registry."""

from collections.abc import Callable
from pathlib import Path
from typing import ClassVar

import pytest
from pytest_mock import MockerFixture

from promptr.config import SegmentConfig
from promptr.exceptions import SegmentError, UnknownSegmentError
from promptr.render import Fragment
from promptr.segments import (
    SEGMENTS,
    PathsSegment,
    Segment,
    SegmentArgs,
    SegmentContext,
    UsernameSegment,
    build_segment,
    build_segments,
    collect_fragments,
)
from promptr.theme import ThemeResolver

ContextFactory = Callable[..., SegmentContext]


class ExplodingSegment(Segment[SegmentArgs]):
    name: ClassVar[str] = "exploding"
    kind: ClassVar[str] = "username"

    def compute(self, context: SegmentContext) -> list[Fragment]:
        msg = "boom"
        raise SegmentError(msg, segment=self.name)


class TestRegistry:
    def test_known_segments(self) -> None:
        assert sorted(SEGMENTS) == [
            "battery",
            "command_status",
            "git",
            "hostname",
            "paths",
            "rvm",
            "screen",
            "username",
        ]

    def test_registry_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            SEGMENTS["extra"] = UsernameSegment  # type: ignore[index]

    def test_build_segment_with_args(self) -> None:
        segment = build_segment(SegmentConfig(name="paths", args={"show_root": True}))

        assert isinstance(segment, PathsSegment)
        assert segment.args.show_root is True

    def test_unknown_segment(self) -> None:
        with pytest.raises(UnknownSegmentError) as exc_info:
            build_segment(SegmentConfig(name="weather"))

        assert exc_info.value.segment == "weather"
        assert "username" in str(exc_info.value)

    def test_invalid_args(self) -> None:
        with pytest.raises(SegmentError):
            build_segment(SegmentConfig(name="paths", args={"show_root": "sometimes"}))

    def test_build_segments_skips_bad_entries(self, mocker: MockerFixture) -> None:
        logger = mocker.Mock()

        segments = build_segments(
            [
                SegmentConfig(name="username"),
                SegmentConfig(name="weather"),
                SegmentConfig(name="paths", args={"nope": 1}),
                SegmentConfig(name="command_status"),
            ],
            logger,
        )

        assert [s.name for s in segments] == ["username", "command_status"]
        assert logger.warning.call_count == 2


class TestCollectFragments:
    def test_concatenates_in_order(self, make_context: ContextFactory) -> None:
        segments = [UsernameSegment.from_config(), PathsSegment.from_config()]

        fragments = collect_fragments(
            segments, make_context(USER="alice", PWD="/srv", HOME="/home/alice")
        )

        assert [f.text for f in fragments] == ["alice", "srv"]

    def test_failing_segment_is_skipped(self, mocker: MockerFixture) -> None:
        logger = mocker.Mock()
        context = SegmentContext(
            env={"USER": "alice"}, cwd=Path("/"), theme=ThemeResolver(), logger=logger
        )

        fragments = collect_fragments(
            [ExplodingSegment.from_config(), UsernameSegment.from_config()], context
        )

        assert [f.text for f in fragments] == ["alice"]
        logger.warning.assert_called_once()
        assert logger.warning.call_args.kwargs["segment"] == "exploding"

    def test_abstaining_segment_logs_debug(self, mocker: MockerFixture) -> None:
        logger = mocker.Mock()
        context = SegmentContext(env={}, cwd=Path("/"), theme=ThemeResolver(), logger=logger)

        assert collect_fragments([UsernameSegment.from_config()], context) == []
        logger.debug.assert_any_call("segment_abstained", segment="username")
