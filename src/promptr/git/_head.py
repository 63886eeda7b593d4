"""HEAD resolution."""

from typing import TYPE_CHECKING

from dulwich.objects import Commit, valid_hexsha
from dulwich.refs import SYMREF

from promptr.exceptions import RepositoryError

from ._models import Branch, Detached, HeadState, Unborn

if TYPE_CHECKING:
    from dulwich.repo import Repo

HEADS_PREFIX = b"refs/heads/"


def _has_commit(repo: "Repo", sha: bytes) -> bool:
    try:
        return isinstance(repo.object_store[sha], Commit)
    except KeyError:
        return False


def resolve_head(repo: "Repo", short_id_length: int) -> HeadState:
    """Determine what HEAD points at.

    A symbolic HEAD on ``refs/heads/<b>`` is a branch when the branch resolves
    to a commit in the object store and unborn otherwise. Anything else is
    detached at the commit HEAD resolves to.

    Args:
        repo: The repository.
        short_id_length: Number of hex digits in detached commit ids.

    Returns:
        The HEAD state.

    Raises:
        RepositoryError: If HEAD is missing or does not resolve.
    """
    raw = repo.refs.read_ref(b"HEAD")
    if raw is None:
        msg = "HEAD is missing"
        raise RepositoryError(msg)

    _, sha = repo.refs.follow(b"HEAD")

    if raw.startswith(SYMREF):
        target = raw[len(SYMREF) :].strip()
        if target.startswith(HEADS_PREFIX):
            name = target[len(HEADS_PREFIX) :].decode("utf-8", errors="replace")
            if sha is None or not _has_commit(repo, sha):
                return Unborn(name)
            return Branch(name, commit=sha.decode("ascii"))

    if sha is None or not valid_hexsha(sha):
        msg = f"HEAD does not resolve: {raw.decode('utf-8', errors='replace')}"
        raise RepositoryError(msg)

    commit = sha.decode("ascii")
    return Detached(commit[:short_id_length], commit=commit)
