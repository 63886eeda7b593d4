"""The command status segment.

Shows whether the previous command succeeded and whether the user is root.
The shell hook passes the exit status as ``code`` and the user id as ``uid``.
"""

import os
from typing import ClassVar

from promptr.render import Fragment

from ._base import Segment, SegmentArgs, SegmentContext

# Treated as an unprivileged user when the uid is unknown
NOBODY_UID = 65535


def _parse_int(value: str | None, default: int) -> int:
    if value is None:
        return default
    try:
        return int(value.strip())
    except ValueError:
        return default


def _process_uid() -> int:
    geteuid = getattr(os, "geteuid", None)
    return geteuid() if geteuid is not None else NOBODY_UID


class CommandStatusSegment(Segment[SegmentArgs]):
    """Root or user indicator, colored by the last exit status."""

    name: ClassVar[str] = "command_status"
    kind: ClassVar[str] = "command_status"

    def compute(self, context: SegmentContext) -> list[Fragment]:
        code = _parse_int(context.env.get("code"), 0)
        uid = _parse_int(context.env.get("uid"), _process_uid())

        colors = self.style(context, "success" if code == 0 else "failure")
        glyph = context.theme.glyph(self.kind, "root" if uid == 0 else "user")
        return [Fragment(glyph, colors.fg, colors.bg, source="CommandStatus")]
