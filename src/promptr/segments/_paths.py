"""The paths segment.

Shows the working directory as breadcrumbs, one fragment per component. The
home directory collapses into a single home crumb. Breadcrumbs share a
background and are joined by thin separators.
"""

from typing import ClassVar

from promptr.enums import Separator
from promptr.render import Fragment

from ._base import Segment, SegmentArgs, SegmentContext


class PathsArgs(SegmentArgs):
    """Arguments for the paths segment.

    Attributes:
        show_root: Show a crumb for the root directory.
        show_dir_stack: Prefix the depth of the shell directory stack when it
            holds more than one entry.
    """

    show_root: bool = False
    show_dir_stack: bool = True


def split_home(path: str, home: str | None) -> tuple[bool, list[str]]:
    """Split a path into components, collapsing the home directory.

    Args:
        path: Absolute path.
        home: Home directory, if known.

    Returns:
        Whether the path is inside home, and the remaining components.
    """
    if home:
        home = home.rstrip("/") or "/"
        if home != "/" and (path == home or path.startswith(home + "/")):
            return True, [part for part in path[len(home) :].split("/") if part]
    return False, [part for part in path.split("/") if part]


class PathsSegment(Segment[PathsArgs]):
    """Breadcrumbs to the working directory."""

    name: ClassVar[str] = "paths"
    kind: ClassVar[str] = "paths"
    args_model: ClassVar[type[SegmentArgs]] = PathsArgs

    def compute(self, context: SegmentContext) -> list[Fragment]:
        path = context.env.get("PWD") or str(context.cwd)
        in_home, parts = split_home(path, context.env.get("HOME"))

        crumbs: list[Fragment] = []
        if in_home:
            style = self.style(context, "home")
            crumbs.append(Fragment.styled(style.glyph, style, source="Paths::Home"))
        elif self.args.show_root or not parts:
            style = self.style(context, "root")
            crumbs.append(
                Fragment.styled(
                    style.glyph,
                    style,
                    separator=Separator.THIN if parts else Separator.THICK,
                    source="Paths::Root",
                )
            )

        normal = self.style(context, "normal")
        for i, part in enumerate(parts):
            if i == len(parts) - 1:
                style = self.style(context, "last") if crumbs or i > 0 else normal
                crumbs.append(Fragment.styled(part, style, source="Paths::Last"))
            else:
                crumbs.append(
                    Fragment.styled(
                        part, normal, separator=Separator.THIN, source="Paths::Middle"
                    )
                )

        if self.args.show_dir_stack:
            dirs = context.env.get("dirs")
            depth = len(dirs.split("\n")) if dirs else 0
            if depth > 1:
                style = self.style(context, "dir_stack")
                crumbs.insert(
                    0,
                    Fragment.styled(
                        f"{depth} {style.glyph}", style, source="Paths::DirStack"
                    ),
                )

        return crumbs
