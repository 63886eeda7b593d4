"""Ahead/behind counting.

Walks both histories at once, newest commit first, marking each commit with
the side(s) it is reachable from. A commit that gains a side is queued again
so the side reaches its parents. The walk stops once every queued commit is
reachable from both sides and is older than every commit still marked with
only one side: nothing left in the queue can reach those commits.
"""

import heapq
from itertools import count
from typing import TYPE_CHECKING

from dulwich.objects import Commit

from ._models import AheadBehind

if TYPE_CHECKING:
    from dulwich.object_store import BaseObjectStore

LOCAL = 1
UPSTREAM = 2
BOTH = LOCAL | UPSTREAM


def count_ahead_behind(
    store: "BaseObjectStore", local: bytes, upstream: bytes
) -> AheadBehind:
    """Count commits reachable from only one of two commits.

    Counts are exact whenever no commit is dated later than its children,
    equal dates included. A commit dated before one of its parents (clock
    skew) can end the walk before shared history reaches it. Parents missing
    from the object store (shallow clones) are treated as roots.

    Args:
        store: Object store holding both histories.
        local: Hex id of the local commit.
        upstream: Hex id of the upstream commit.

    Returns:
        Commits only reachable from ``local`` (ahead) and only from
        ``upstream`` (behind).
    """
    if local == upstream:
        return AheadBehind(ahead=0, behind=0)

    flags: dict[bytes, int] = {}
    one_sided: dict[bytes, int] = {}
    queue: list[tuple[int, int, bytes, Commit]] = []
    tiebreak = count()

    def mark(sha: bytes, bits: int) -> None:
        old = flags.get(sha, 0)
        new = old | bits
        if new == old:
            return
        try:
            commit = store[sha]
        except KeyError:
            return
        if not isinstance(commit, Commit):
            return
        flags[sha] = new
        if new == BOTH:
            one_sided.pop(sha, None)
        else:
            one_sided[sha] = commit.commit_time
        heapq.heappush(queue, (-commit.commit_time, next(tiebreak), sha, commit))

    def settled() -> bool:
        if any(flags[entry[2]] != BOTH for entry in queue):
            return False
        newest_queued = -queue[0][0]
        return all(newest_queued < when for when in one_sided.values())

    mark(local, LOCAL)
    mark(upstream, UPSTREAM)

    while queue and not settled():
        _, _, sha, commit = heapq.heappop(queue)
        for parent in commit.parents:
            mark(parent, flags[sha])

    ahead = sum(1 for bits in flags.values() if bits == LOCAL)
    behind = sum(1 for bits in flags.values() if bits == UPSTREAM)
    return AheadBehind(ahead=ahead, behind=behind)
