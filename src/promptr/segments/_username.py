"""The username segment."""

from typing import ClassVar

from promptr.render import Fragment

from ._base import Segment, SegmentArgs, SegmentContext


class UsernameSegment(Segment[SegmentArgs]):
    """Shows the logged-in user from ``$USER``, falling back to ``$LOGNAME``."""

    name: ClassVar[str] = "username"
    kind: ClassVar[str] = "username"

    def compute(self, context: SegmentContext) -> list[Fragment]:
        user = context.env.get("USER") or context.env.get("LOGNAME")
        if not user:
            context.logger.debug("username_unset")
            return []
        return [Fragment.styled(user, self.style(context), source="Username")]
