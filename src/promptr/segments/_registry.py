"""Segment registry.

Maps configuration names to segment classes and runs the configured segments
in order. A segment that fails is logged and left out of the prompt.
"""

from types import MappingProxyType
from typing import TYPE_CHECKING

from promptr.exceptions import PromptrError, UnknownSegmentError

from ._battery import BatterySegment
from ._command_status import CommandStatusSegment
from ._git import GitSegment
from ._hostname import HostnameSegment
from ._paths import PathsSegment
from ._rvm import RvmSegment
from ._screen import ScreenSegment
from ._username import UsernameSegment

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from structlog.typing import FilteringBoundLogger

    from promptr.config import SegmentConfig
    from promptr.render import Fragment

    from ._base import Segment, SegmentArgs, SegmentContext

SEGMENTS: "Mapping[str, type[Segment[SegmentArgs]]]" = MappingProxyType(
    {
        segment.name: segment
        for segment in (
            BatterySegment,
            CommandStatusSegment,
            GitSegment,
            HostnameSegment,
            PathsSegment,
            RvmSegment,
            ScreenSegment,
            UsernameSegment,
        )
    }
)


def build_segment(config: "SegmentConfig") -> "Segment[SegmentArgs]":
    """Create the segment named by a configuration entry.

    Raises:
        UnknownSegmentError: If no segment has that name.
        SegmentError: If the arguments are invalid.
    """
    segment_cls = SEGMENTS.get(config.name)
    if segment_cls is None:
        available = ", ".join(sorted(SEGMENTS))
        msg = f"Unknown segment '{config.name}' (available: {available})"
        raise UnknownSegmentError(msg, segment=config.name)
    return segment_cls.from_config(config.args)


def build_segments(
    configs: "Iterable[SegmentConfig]", logger: "FilteringBoundLogger"
) -> list["Segment[SegmentArgs]"]:
    """Create all configured segments, skipping entries that fail."""
    segments: list[Segment[SegmentArgs]] = []
    for index, config in enumerate(configs):
        try:
            segments.append(build_segment(config))
        except PromptrError as e:
            logger.warning(
                "segment_config_invalid", index=index, segment=config.name, error=str(e)
            )
    return segments


def collect_fragments(
    segments: "Iterable[Segment[SegmentArgs]]", context: "SegmentContext"
) -> list["Fragment"]:
    """Compute every segment and concatenate the fragments in order.

    Args:
        segments: Segments in configured order.
        context: The render context.

    Returns:
        All fragments. Segments that abstain or fail contribute none.
    """
    fragments: list[Fragment] = []
    for segment in segments:
        try:
            produced = segment.compute(context)
        except Exception as e:  # noqa: BLE001
            context.logger.warning(
                "segment_failed",
                segment=segment.name,
                error=str(e),
                error_type=type(e).__name__,
            )
            continue
        if not produced:
            context.logger.debug("segment_abstained", segment=segment.name)
        fragments.extend(produced)
    return fragments
