"""The hostname segment."""

import socket
import sys
from typing import ClassVar

from promptr.render import Fragment
from promptr.utils import run_text

from ._base import Segment, SegmentArgs, SegmentContext


def current_platform() -> str:
    return sys.platform


def os_sub_state(platform: str) -> str | None:
    """Map a ``sys.platform`` value to the hostname theme sub-state."""
    if platform == "darwin":
        return "macos"
    for name in ("freebsd", "openbsd", "linux"):
        if platform.startswith(name):
            return name
    return None


def is_jailed() -> bool:
    """Whether this process runs inside a FreeBSD jail."""
    return run_text(["sysctl", "-n", "security.jail.jailed"]) == "1"


class HostnameArgs(SegmentArgs):
    """Arguments for the hostname segment.

    Attributes:
        show_domain: Keep the domain part of the hostname.
        show_jail_indicator: Append the jail glyph inside FreeBSD jails.
        show_os_indicator: Append a glyph for the operating system.
    """

    show_domain: bool = False
    show_jail_indicator: bool = True
    show_os_indicator: bool = False


class HostnameSegment(Segment[HostnameArgs]):
    """Shows the host name.

    The shell hook passes ``$HOSTNAME`` as ``hostname``; without it the
    system host name is used.
    """

    name: ClassVar[str] = "hostname"
    kind: ClassVar[str] = "hostname"
    args_model: ClassVar[type[SegmentArgs]] = HostnameArgs

    def compute(self, context: SegmentContext) -> list[Fragment]:
        hostname = (
            context.env.get("hostname")
            or context.env.get("HOSTNAME")
            or socket.gethostname()
        )
        if not self.args.show_domain:
            hostname = hostname.split(".", 1)[0]
        if not hostname:
            return []

        platform = current_platform()
        parts = [hostname]

        if self.args.show_os_indicator:
            sub_state = os_sub_state(platform)
            if sub_state is not None:
                parts.append(context.theme.glyph(self.kind, sub_state))

        if (
            self.args.show_jail_indicator
            and platform.startswith("freebsd")
            and is_jailed()
        ):
            parts.append(context.theme.glyph(self.kind, "jail"))

        return [Fragment.styled("".join(parts), self.style(context), source="Hostname")]
