"""Upstream resolution.

Reads ``branch.<name>.remote`` and ``branch.<name>.merge`` and maps the merge
ref to the local ref that tracks it.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dulwich.config import Config
    from dulwich.repo import Repo

HEADS_PREFIX = b"refs/heads/"
LOCAL_REMOTE = b"."


def map_refspec(refspec: bytes, ref: bytes) -> bytes | None:
    """Map a remote ref through one fetch refspec.

    Args:
        refspec: A fetch refspec such as ``+refs/heads/*:refs/remotes/origin/*``.
        ref: Ref name on the remote.

    Returns:
        The local ref the remote ref is fetched into, or None if the refspec
        does not cover it.
    """
    spec = refspec.removeprefix(b"+")
    if b":" not in spec:
        return None
    src, dst = spec.split(b":", 1)
    if src.endswith(b"*") and dst.endswith(b"*"):
        prefix = src[:-1]
        if ref.startswith(prefix):
            return dst[:-1] + ref[len(prefix) :]
        return None
    if src == ref:
        return dst
    return None


def _fetch_refspecs(config: "Config", remote: bytes) -> list[bytes]:
    try:
        return list(config.get_multivar((b"remote", remote), b"fetch"))
    except KeyError:
        return []


def upstream_ref(config: "Config", branch: str) -> bytes | None:
    """Find the local ref that tracks a branch's upstream.

    Args:
        config: Repository configuration.
        branch: Local branch name.

    Returns:
        The tracking ref name, or None if no upstream is configured.
    """
    section = (b"branch", branch.encode("utf-8"))
    try:
        remote = config.get(section, b"remote")
        merge = config.get(section, b"merge")
    except KeyError:
        return None

    if remote == LOCAL_REMOTE:
        return merge

    for refspec in _fetch_refspecs(config, remote):
        mapped = map_refspec(refspec, merge)
        if mapped is not None:
            return mapped

    # Without a matching refspec git's default layout is assumed
    return b"refs/remotes/" + remote + b"/" + merge.removeprefix(HEADS_PREFIX)


def resolve_upstream(repo: "Repo", branch: str) -> str | None:
    """Resolve a branch's upstream to a commit id.

    Args:
        repo: The repository.
        branch: Local branch name.

    Returns:
        Hex commit id of the upstream, or None if no upstream is configured
        or the tracking ref does not exist locally.
    """
    ref = upstream_ref(repo.get_config(), branch)
    if ref is None:
        return None
    try:
        return repo.refs[ref].decode("ascii")
    except KeyError:
        return None
