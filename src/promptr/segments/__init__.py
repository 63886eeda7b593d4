"""Prompt segments."""

from ._base import Segment, SegmentArgs, SegmentContext
from ._battery import BatteryArgs, BatteryReading, BatterySegment, read_battery
from ._command_status import CommandStatusSegment
from ._git import GitArgs, GitSegment
from ._hostname import HostnameArgs, HostnameSegment
from ._paths import PathsArgs, PathsSegment, split_home
from ._registry import SEGMENTS, build_segment, build_segments, collect_fragments
from ._rvm import RubySpec, RvmArgs, RvmSegment, caret_matches, parse_ruby_spec
from ._screen import ScreenArgs, ScreenSegment
from ._username import UsernameSegment

__all__ = [
    "SEGMENTS",
    "BatteryArgs",
    "BatteryReading",
    "BatterySegment",
    "CommandStatusSegment",
    "GitArgs",
    "GitSegment",
    "HostnameArgs",
    "HostnameSegment",
    "PathsArgs",
    "PathsSegment",
    "RubySpec",
    "RvmArgs",
    "RvmSegment",
    "ScreenArgs",
    "ScreenSegment",
    "Segment",
    "SegmentArgs",
    "SegmentContext",
    "UsernameSegment",
    "build_segment",
    "build_segments",
    "caret_matches",
    "collect_fragments",
    "parse_ruby_spec",
    "read_battery",
    "split_home",
]
