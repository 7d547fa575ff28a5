"""Shared test fixtures: in-memory directory trees, fake git, real git repos."""

import os
import shutil
import subprocess
from datetime import datetime, timezone
from pathlib import Path

import pytest

from vibe_check.scanning.walker import DirEntry
from vibe_check.temporal.models import GitFailure, GitOutput

# Fixed reference instant so window arithmetic is reproducible
NOW = datetime(2026, 10, 19, 12, 0, 0, tzinfo=timezone.utc)


class Link:
    """Symbolic link node in a fake tree."""

    def __init__(self, target: str):
        self.target = Path(target)


class FakeProvider:
    """In-memory EntryProvider.

    Trees are nested dicts keyed by absolute top-level paths:
        {"/virtual": {"repo": {".git": {}, "main.py": "file"}, "up": Link("/virtual")}}
    Dicts are directories, strings are files, Link instances are symlinks.
    """

    def __init__(self, trees: dict, denied: tuple = ()):
        self.nodes: dict[Path, object] = {}
        for top, node in trees.items():
            self._flatten(Path(top), node)
        self.denied = {Path(p) for p in denied}
        self.listed: list[Path] = []

    def _flatten(self, path: Path, node) -> None:
        self.nodes[path] = node
        if isinstance(node, dict):
            for name, child in node.items():
                self._flatten(path / name, child)

    def resolve(self, path: Path) -> Path:
        parts = Path(path).parts
        current = Path(parts[0])
        hops = 0
        for part in parts[1:]:
            current = current / part
            node = self.nodes.get(current)
            while isinstance(node, Link):
                hops += 1
                if hops > 40:
                    raise OSError(f"Too many levels of symbolic links: {path}")
                current = node.target
                node = self.nodes.get(current)
            if node is None:
                raise FileNotFoundError(str(current))
        return current

    def list_dir(self, path: Path) -> list[DirEntry]:
        self.listed.append(path)
        if path in self.denied:
            raise PermissionError(f"Permission denied: {path}")
        node = self.nodes.get(path)
        if not isinstance(node, dict):
            raise NotADirectoryError(str(path))
        entries = []
        for name in sorted(node):
            child_path = path / name
            try:
                target = self.nodes[self.resolve(child_path)]
            except OSError:
                target = None
            entries.append(
                DirEntry(
                    name=name,
                    path=child_path,
                    is_dir=isinstance(target, dict),
                    is_file=isinstance(target, str),
                    is_symlink=isinstance(node[name], Link),
                )
            )
        return entries

    def exists(self, path: Path) -> bool:
        return Path(path) in self.nodes

    def is_dir(self, path: Path) -> bool:
        try:
            return isinstance(self.nodes[self.resolve(path)], dict)
        except OSError:
            return False


class FakeRunner:
    """GitRunner stand-in answering the analyzer's queries.

    ``history`` maps repo path -> commit unix timestamps in log order; an
    empty list is a repository without commits. ``failures`` maps repo path
    -> reason and makes every query fail with exit status 128. Paths in
    ``detached`` have a HEAD that is neither a commit nor a branch.
    """

    def __init__(self, history: dict, failures: dict = None, detached=()):
        self.history = {Path(k): v for k, v in history.items()}
        self.failures = {Path(k): v for k, v in (failures or {}).items()}
        self.detached = {Path(p) for p in detached}
        self.calls: list[tuple[Path, tuple]] = []

    def run(self, repo_path: Path, args):
        repo_path = Path(repo_path)
        self.calls.append((repo_path, tuple(args)))
        if repo_path in self.failures:
            return GitFailure(reason=self.failures[repo_path], returncode=128)
        timestamps = self.history.get(repo_path)
        if timestamps is None:
            return GitFailure(reason="fatal: not a git repository", returncode=128)
        if args[0] == "symbolic-ref":
            if repo_path in self.detached:
                return GitFailure(reason="", returncode=1)
            return GitOutput("refs/heads/main\n")
        if args[0] == "rev-parse" and "--git-path" in args:
            # never present on disk: the branch is unborn
            return GitOutput(f".git/{args[-1]}\n")
        if args[0] == "rev-parse":
            if not timestamps:
                return GitFailure(reason="", returncode=1)
            return GitOutput("0123456789abcdef0123456789abcdef01234567\n")
        return GitOutput("".join(f"{ts}\n" for ts in timestamps))


@pytest.fixture
def fake_provider():
    """Factory for in-memory directory trees."""
    return FakeProvider


@pytest.fixture
def fake_runner():
    """Factory for canned git histories."""
    return FakeRunner


@pytest.fixture
def link():
    return Link


@pytest.fixture
def now():
    return NOW


def _git(repo: Path, *args: str, env: dict = None) -> None:
    subprocess.run(
        [
            "git",
            "-c",
            "user.name=Test",
            "-c",
            "user.email=test@example.com",
            "-c",
            "commit.gpgsign=false",
            "-C",
            str(repo),
            *args,
        ],
        check=True,
        capture_output=True,
        env=env,
    )


@pytest.fixture
def make_git_repo():
    """Factory creating a real repository with commits at given instants.

    Commits are made oldest first; ``keep_order=True`` commits them in the
    order given, so committer dates can run backwards.

    Skips the test when git is not installed.
    """
    if shutil.which("git") is None:
        pytest.skip("git not found")

    def _make(path: Path, commit_times=(), keep_order: bool = False) -> Path:
        path.mkdir(parents=True, exist_ok=True)
        _git(path, "init", "-q")
        times = list(commit_times) if keep_order else sorted(commit_times)
        for index, when in enumerate(times):
            stamp = f"{int(when.timestamp())} +0000"
            env = dict(os.environ, GIT_AUTHOR_DATE=stamp, GIT_COMMITTER_DATE=stamp)
            _git(path, "commit", "-q", "--allow-empty", "-m", f"commit {index}", env=env)
        return path

    return _make
