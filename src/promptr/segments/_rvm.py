"""The RVM segment.

Shows the active Ruby and gemset when working on a Ruby project managed by
RVM, and flags a mismatch with the project's ``.ruby-version``.
"""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar

from promptr.exceptions import SegmentError
from promptr.render import Fragment

from ._base import Segment, SegmentArgs, SegmentContext

_GEMSET_RE = re.compile(
    r"(?:(?P<interp>\w+)-)?(?P<version>\d+(?:\.\d+){0,2})(?:@(?P<gemset>\w+))?"
)

DEFAULT_INTERPRETER = "ruby"


@dataclass(frozen=True, slots=True)
class RubySpec:
    """An interpreter, version and optional gemset, e.g. ``ruby-3.2.2@app``.

    Attributes:
        interpreter: Interpreter name. Defaults to ``ruby``.
        version: One to three numeric version components.
        gemset: Gemset name, if any.
    """

    interpreter: str
    version: tuple[int, ...]
    gemset: str | None = None

    @property
    def version_string(self) -> str:
        return ".".join(str(part) for part in self.version)


def parse_ruby_spec(text: str) -> RubySpec | None:
    """Parse an RVM ruby string.

    Args:
        text: A string like ``ruby-3.2.2@app``, ``3.2`` or ``jruby-9.4.0``.

    Returns:
        The parsed spec, or None if no version is present.
    """
    match = _GEMSET_RE.search(text)
    if match is None:
        return None
    return RubySpec(
        interpreter=match["interp"] or DEFAULT_INTERPRETER,
        version=tuple(int(part) for part in match["version"].split(".")),
        gemset=match["gemset"],
    )


def caret_matches(requirement: tuple[int, ...], version: tuple[int, ...]) -> bool:
    """Check a version against a caret requirement.

    ``3.2`` accepts any ``3.x`` at or above ``3.2.0``. The leftmost non-zero
    component is held fixed, so ``0.4`` accepts only ``0.4.x``.

    Args:
        requirement: One to three requirement components.
        version: Version components. Missing components count as zero.

    Returns:
        True if the version satisfies the requirement.
    """
    padded = (*version, 0, 0, 0)[:3]
    required = (*requirement, 0, 0, 0)[:3]

    # Number of leading components that must match exactly
    fixed = len(requirement)
    for i, part in enumerate(requirement):
        if part != 0:
            fixed = i + 1
            break

    if padded[:fixed] != required[:fixed]:
        return False
    return padded >= required


def find_upward(name: str, start: Path, skip: set[Path]) -> Path | None:
    """Find a file in a directory or its parents.

    Args:
        name: File name to look for.
        start: Directory to start from.
        skip: Directories not to look in. The search continues past them.

    Returns:
        The first match, or None.
    """
    for directory in (start, *start.parents):
        if directory in skip:
            continue
        candidate = directory / name
        if candidate.exists():
            return candidate
    return None


class RvmArgs(SegmentArgs):
    """Arguments for the RVM segment.

    Attributes:
        force_show: Show the segment even outside projects with a Gemfile.
    """

    force_show: bool = False


class RvmSegment(Segment[RvmArgs]):
    """Shows ``<gemset> (v<version>)`` or ``<version>`` for the active Ruby."""

    name: ClassVar[str] = "rvm"
    kind: ClassVar[str] = "rvm"
    args_model: ClassVar[type[SegmentArgs]] = RvmArgs

    def compute(self, context: SegmentContext) -> list[Fragment]:
        env = context.env
        if "rvm_version" not in env:
            return []

        pwd = Path(env.get("PWD") or context.cwd)
        gems_dir = Path(env.get("rvm_path", "~/.rvm")).expanduser() / "gems"
        skip = {gems_dir}
        if env.get("HOME"):
            skip.add(Path(env["HOME"]))

        if not self.args.force_show and find_upward("Gemfile", pwd, skip) is None:
            return []

        gem_home = env.get("GEM_HOME")
        if not gem_home:
            msg = "$GEM_HOME is not set"
            raise SegmentError(msg, segment=self.name)

        current = parse_ruby_spec(gem_home.removeprefix(f"{gems_dir}/"))
        if current is None:
            msg = f"Cannot parse the active ruby from {gem_home!r}"
            raise SegmentError(msg, segment=self.name)

        text = current.version_string
        if current.gemset:
            text = f"{current.gemset} (v{text})"

        sub_state = "default"
        version_file = find_upward(".ruby-version", pwd, skip)
        if version_file is not None:
            requested = parse_ruby_spec(version_file.read_text(encoding="utf-8").strip())
            if requested is None:
                msg = f"Cannot parse the requested ruby in {version_file}"
                raise SegmentError(msg, segment=self.name)
            if requested.interpreter != current.interpreter or not caret_matches(
                requested.version, current.version
            ):
                sub_state = "mismatch"

        style = self.style(context, sub_state)
        if sub_state == "mismatch":
            text += style.glyph
        return [Fragment.styled(text, style, source="Rvm")]
