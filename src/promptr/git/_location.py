"""Repository discovery.

Discovery only looks at the path it is given and its parents. It never
consults the process working directory, so it can be pointed at any synthetic
directory tree.
"""

import os
from pathlib import Path

from dulwich.errors import NotGitRepository
from dulwich.repo import Repo

from promptr.exceptions import RepositoryError

from ._models import RepoLocation


def _location_of(repo: Repo) -> RepoLocation:
    return RepoLocation(
        gitdir=Path(os.path.normpath(repo.controldir())),
        commondir=Path(os.path.normpath(repo.commondir())),
        worktree=Path(os.path.normpath(repo.path)),
    )


def open_repository(start: Path) -> tuple[Repo, RepoLocation] | None:
    """Open the repository containing a directory.

    The caller owns the returned repository and must close it.

    Args:
        start: Absolute directory to start from.

    Returns:
        The open repository and its location, or None when no repository is
        found. Bare repositories have no working tree and are reported as
        None.

    Raises:
        ValueError: If ``start`` is relative.
        RepositoryError: If a ``.git`` file is malformed or names a directory
            without HEAD.
    """
    if not start.is_absolute():
        msg = f"Repository discovery needs an absolute path, got {start}"
        raise ValueError(msg)

    try:
        repo = Repo.discover(str(start))
    except NotGitRepository:
        return None
    except (ValueError, OSError) as e:
        msg = f"Unreadable git metadata above {start}: {e}"
        raise RepositoryError(msg, path=start) from e

    if repo.bare:
        repo.close()
        return None

    location = _location_of(repo)
    if not (location.gitdir / "HEAD").is_file():
        repo.close()
        msg = f"git directory has no HEAD: {location.gitdir}"
        raise RepositoryError(msg, path=location.gitdir)
    return repo, location


def discover_repository(start: Path) -> RepoLocation | None:
    """Find the repository containing a directory.

    Args:
        start: Absolute directory to start from.

    Returns:
        The repository location, or None when no repository is found.

    Raises:
        ValueError: If ``start`` is relative.
        RepositoryError: If a ``.git`` file is malformed or dangling.
    """
    opened = open_repository(start)
    if opened is None:
        return None
    repo, location = opened
    repo.close()
    return location
