"""The GNU screen segment."""

from typing import ClassVar

from promptr.exceptions import SegmentError
from promptr.render import Fragment

from ._base import Segment, SegmentArgs, SegmentContext


class ScreenArgs(SegmentArgs):
    """Arguments for the screen segment.

    Attributes:
        show_screen_icon: Append the screen glyph.
        show_screen_name: Show the session name.
        show_screen_pid: Show the session's process id.
        show_window_number: Show the window number.
    """

    show_screen_icon: bool = True
    show_screen_name: bool = True
    show_screen_pid: bool = False
    show_window_number: bool = True


class ScreenSegment(Segment[ScreenArgs]):
    """Shows the screen window and session, e.g. ``1[pts-0.host] <glyph>``.

    Abstains outside screen, detected by ``$STY`` and ``$WINDOW``.
    """

    name: ClassVar[str] = "screen"
    kind: ClassVar[str] = "screen"
    args_model: ClassVar[type[SegmentArgs]] = ScreenArgs

    def compute(self, context: SegmentContext) -> list[Fragment]:
        sty = context.env.get("STY")
        window = context.env.get("WINDOW")
        if sty is None or window is None:
            return []

        pid, dot, session = sty.partition(".")
        if not dot:
            msg = f"Cannot parse $STY: {sty!r}"
            raise SegmentError(msg, segment=self.name)

        args = self.args
        bracketed = ""
        if args.show_screen_pid:
            bracketed += f"{pid}."
        if args.show_screen_name:
            bracketed += session

        text = ""
        if args.show_window_number:
            text = window
            if args.show_screen_pid or args.show_screen_name:
                bracketed = f"[{bracketed}]"
        text += bracketed

        style = self.style(context)
        if args.show_screen_icon:
            text += f" {style.glyph}"

        return [Fragment.styled(text, style, source="Screen")]
