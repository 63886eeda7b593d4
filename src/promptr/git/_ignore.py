"""Gitignore-style pattern matching using pathspec.

Patterns come from ``.gitignore`` files at every directory level, the
repository's ``info/exclude`` and the user's ``core.excludesFile``. A
``.gitignore`` closer to the path overrides one further up, and all of them
override the repository and user exclude files.
"""

import os
from pathlib import Path
from typing import TYPE_CHECKING

from pathspec import GitIgnoreSpec


if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from dulwich.config import Config


def load_gitignore_patterns(path: Path) -> list[str]:
    """Load patterns from a gitignore file.

    Comments and blank lines are dropped. Trailing whitespace is kept because
    it can be escaped in gitignore syntax.

    Args:
        path: Path to the gitignore file.

    Returns:
        List of patterns from the file. Returns empty list if file doesn't exist.
    """
    if not path.is_file():
        return []

    patterns: list[str] = []
    content = path.read_text(encoding="utf-8", errors="replace")

    for line in content.splitlines():
        if not line.strip() or line.startswith("#"):
            continue
        patterns.append(line)

    return patterns


def user_excludes_file(
    config: "Config", environ: "Mapping[str, str] | None" = None
) -> Path:
    """Locate the user's global excludes file.

    Args:
        config: Configuration stack to read ``core.excludesFile`` from.
        environ: Environment to consult. Defaults to the process environment.

    Returns:
        The configured file, or ``$XDG_CONFIG_HOME/git/ignore`` (falling back
        to ``~/.config/git/ignore``) when unset.
    """
    try:
        return Path(os.fsdecode(config.get((b"core",), b"excludesfile"))).expanduser()
    except KeyError:
        pass

    env = os.environ if environ is None else environ
    xdg = env.get("XDG_CONFIG_HOME")
    base = Path(xdg) if xdg else Path("~/.config").expanduser()
    return base / "git" / "ignore"


class IgnoreMatcher:
    """Decide whether worktree paths are ignored.

    Paths are worktree-relative, ``/``-separated strings. Per-directory specs
    are loaded lazily and cached for the lifetime of the matcher.
    """

    __slots__: tuple[str, ...] = ("_excludes", "_specs", "_worktree")

    def __init__(self, worktree: Path, exclude_patterns: "Iterable[str]" = ()) -> None:
        """Initialize the matcher.

        Args:
            worktree: Root of the working tree.
            exclude_patterns: Patterns from ``info/exclude`` and the user's
                excludes file, lowest priority last.
        """
        self._worktree: Path = worktree
        self._excludes: GitIgnoreSpec = GitIgnoreSpec.from_lines(exclude_patterns)
        self._specs: dict[str, GitIgnoreSpec | None] = {}

    @classmethod
    def for_repository(
        cls,
        worktree: Path,
        gitdir: Path,
        config: "Config",
        environ: "Mapping[str, str] | None" = None,
    ) -> "IgnoreMatcher":
        """Build a matcher with the repository and user exclude files.

        Within one spec the last matching pattern wins, so the user's global
        patterns go first and ``info/exclude`` overrides them.
        """
        patterns = load_gitignore_patterns(user_excludes_file(config, environ))
        patterns += load_gitignore_patterns(gitdir / "info" / "exclude")
        return cls(worktree, patterns)

    def _spec_for(self, directory: str) -> GitIgnoreSpec | None:
        if directory not in self._specs:
            patterns = load_gitignore_patterns(self._worktree / directory / ".gitignore")
            self._specs[directory] = (
                GitIgnoreSpec.from_lines(patterns) if patterns else None
            )
        return self._specs[directory]

    def is_ignored(self, path: str, *, is_dir: bool = False) -> bool:
        """Check whether a path is ignored.

        The caller is expected to skip the contents of ignored directories, as
        git never re-includes a path below an ignored directory.

        Args:
            path: Worktree-relative path.
            is_dir: Whether the path is a directory. Directory-only patterns
                (``build/``) match only when this is set.

        Returns:
            True if the path is ignored.
        """
        parts = path.split("/")
        candidate = path + "/" if is_dir else path

        # Deepest .gitignore first; the first spec with an opinion decides
        for depth in range(len(parts) - 1, -1, -1):
            directory = "/".join(parts[:depth])
            spec = self._spec_for(directory)
            if spec is None:
                continue
            relative = candidate[len(directory) + 1 :] if directory else candidate
            result = spec.check_file(relative)
            if result.include is not None:
                return result.include

        result = self._excludes.check_file(candidate)
        return bool(result.include)
