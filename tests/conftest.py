"""Shared test fixtures for promptr tests."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

import pytest
from dulwich import porcelain
from dulwich.objects import Commit, Tree
from dulwich.repo import Repo
from rich.console import Console

from promptr.segments import SegmentContext
from promptr.theme import ThemeResolver
from promptr.utils import create_null_logger

AUTHOR = b"Test User <test@example.com>"
BASE_TIME = 1_700_000_000


@pytest.fixture(autouse=True)
def isolated_env(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> Path:
    """Point HOME and XDG_CONFIG_HOME at an empty directory.

    Keeps the user's git and promptr configuration out of every test.
    """
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    for name in (
        "PROMPTR_CONFIG",
        "PROMPTR_STRICT_CONFIG",
        "PROMPTR_DEBUG",
        "PROMPTR_LOG_LEVEL",
        "PROMPTR_SHELL",
        "GIT_DIR",
        "GIT_WORK_TREE",
    ):
        monkeypatch.delenv(name, raising=False)
    return home


@pytest.fixture
def console() -> Console:
    return Console(
        width=70,
        force_terminal=True,
        highlight=False,
        color_system=None,
        legacy_windows=False,
    )


@pytest.fixture
def theme() -> ThemeResolver:
    return ThemeResolver()


@pytest.fixture
def make_context(theme: ThemeResolver) -> Callable[..., SegmentContext]:
    """Build a SegmentContext from keyword environment variables.

    The working directory defaults to the filesystem root.
    """

    def _make(cwd: Path | None = None, **env: str) -> SegmentContext:
        return SegmentContext(
            env=env,
            cwd=cwd if cwd is not None else Path("/"),
            theme=theme,
            logger=create_null_logger(),
        )

    return _make


# ---------------------------------------------------------------------------
# Git repository builders
# ---------------------------------------------------------------------------


def make_commit(
    repo: Repo,
    tree: bytes,
    parents: list[bytes],
    timestamp: int,
    message: str = "commit",
) -> bytes:
    """Store a commit object with fixed author data and return its id."""
    commit = Commit()
    commit.tree = tree
    commit.parents = parents
    commit.author = commit.committer = AUTHOR
    commit.author_time = commit.commit_time = timestamp
    commit.author_timezone = commit.commit_timezone = 0
    commit.encoding = b"UTF-8"
    commit.message = message.encode("utf-8")
    repo.object_store.add_object(commit)
    return commit.id


@dataclass
class GitRepo:
    """A real repository in a temporary directory.

    Commits are created directly from the index so their timestamps are
    deterministic.
    """

    path: Path
    repo: Repo
    _clock: int = field(default=BASE_TIME)

    @property
    def gitdir(self) -> Path:
        return self.path / ".git"

    def write(self, name: str, content: str = "content\n") -> Path:
        target = self.path / name
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content)
        return target

    def stage(self, *names: str) -> None:
        porcelain.add(self.repo, paths=[str(self.path / name) for name in names])

    def remove_from_index(self, name: str) -> None:
        index = self.repo.open_index()
        del index[name.encode()]
        index.write()

    def tick(self) -> int:
        self._clock += 60
        return self._clock

    def commit(
        self,
        message: str = "commit",
        *,
        parents: list[bytes] | None = None,
        ref: bytes = b"refs/heads/main",
        timestamp: int | None = None,
    ) -> bytes:
        """Commit the current index onto ``ref`` and return the commit id."""
        tree = self.repo.open_index().commit(self.repo.object_store)
        if parents is None:
            parents = [self.repo.refs[ref]] if ref in self.repo.refs else []
        sha = make_commit(
            self.repo,
            tree,
            parents,
            timestamp if timestamp is not None else self.tick(),
            message,
        )
        self.repo.refs[ref] = sha
        return sha

    def empty_commit(
        self,
        parents: list[bytes],
        *,
        timestamp: int | None = None,
        message: str = "empty",
    ) -> bytes:
        """Store a commit with an empty tree without touching any ref."""
        tree = Tree()
        self.repo.object_store.add_object(tree)
        return make_commit(
            self.repo,
            tree.id,
            parents,
            timestamp if timestamp is not None else self.tick(),
            message,
        )

    def set_upstream(self, branch: str, sha: bytes, remote: str = "origin") -> None:
        config = self.repo.get_config()
        config.set((b"remote", remote.encode()), b"url", b"https://example.com/repo.git")
        config.set(
            (b"remote", remote.encode()),
            b"fetch",
            f"+refs/heads/*:refs/remotes/{remote}/*".encode(),
        )
        config.set((b"branch", branch.encode()), b"remote", remote.encode())
        config.set((b"branch", branch.encode()), b"merge", f"refs/heads/{branch}".encode())
        config.write_to_path()
        self.repo.refs[f"refs/remotes/{remote}/{branch}".encode()] = sha


def init_repo(path: Path) -> GitRepo:
    path.mkdir(parents=True, exist_ok=True)
    repo = Repo.init(str(path))
    repo.refs.set_symbolic_ref(b"HEAD", b"refs/heads/main")
    return GitRepo(path=path, repo=repo)


@pytest.fixture
def git_repo(tmp_path: Path) -> Iterator[GitRepo]:
    """An empty repository on an unborn ``main`` branch."""
    git = init_repo(tmp_path / "repo")
    yield git
    git.repo.close()


@pytest.fixture
def committed_repo(git_repo: GitRepo) -> GitRepo:
    """A repository with one commit of ``README.md`` on ``main``."""
    git_repo.write("README.md", "# readme\n")
    git_repo.stage("README.md")
    git_repo.commit("initial")
    return git_repo


@pytest.fixture
def make_repo(tmp_path: Path) -> Iterator[Callable[[str], GitRepo]]:
    """Factory for additional repositories under ``tmp_path``."""
    created: list[GitRepo] = []

    def _make(name: str) -> GitRepo:
        git = init_repo(tmp_path / name)
        created.append(git)
        return git

    yield _make
    for git in created:
        git.repo.close()
