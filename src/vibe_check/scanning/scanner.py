"""Repository scanner: finds git repositories under a root directory."""

from pathlib import Path
from typing import Optional

from ..logging_config import get_logger
from .languages import SKIP_DIRECTORIES, VCS_MARKER
from .walker import EntryProvider, TreeWalker, Visit, is_within

logger = get_logger(__name__)


class RepositoryScanner:
    """Finds all repository roots under a directory using breadth-first search.

    A directory containing the marker is recorded and never descended into,
    so repositories nested inside another repository are not reported.
    Unreadable directories are logged as warnings and skipped.
    """

    def __init__(
        self,
        provider: Optional[EntryProvider] = None,
        skip_dirs: frozenset[str] = SKIP_DIRECTORIES,
        marker: str = VCS_MARKER,
    ):
        self.walker = TreeWalker(provider=provider, skip_dirs=skip_dirs)
        self.marker = marker

    def scan(self, root: Path) -> list[Path]:
        """Scan ``root`` for repositories.

        Args:
            root: Directory to start from

        Returns:
            Absolute, resolved repository paths in breadth-first order
        """
        found: list[Path] = []

        def prune(directory: Path) -> bool:
            # A link can lead into a recorded repository from elsewhere
            if any(is_within(directory, repo) for repo in found):
                return True
            if self._is_repository(directory):
                found.append(directory)
                return True
            return False

        visited = 0
        for visit in self.walker.walk(root, prune=prune):
            visited += 1
            if visit.error is not None:
                _report(visit)

        repos = _drop_nested(found)
        logger.debug(f"Scan complete: {len(repos)} repositories, {visited} directories visited")
        return repos

    def _is_repository(self, directory: Path) -> bool:
        # .git is a directory normally, a file for worktrees and submodules
        return self.walker.provider.exists(directory / self.marker)


def _report(visit: Visit) -> None:
    if visit.error == "permission denied":
        logger.warning(f"Permission denied for directory: {visit.path}")
    else:
        logger.warning(f"Error reading directory {visit.path}: {visit.error}")


def _drop_nested(repos: list[Path]) -> list[Path]:
    """Remove any repository that lies inside another one."""
    kept = []
    for repo in repos:
        if not any(other != repo and is_within(repo, other) for other in repos):
            kept.append(repo)
    return kept


def scan_repos(root: Path, provider: Optional[EntryProvider] = None) -> list[Path]:
    """Convenience wrapper around ``RepositoryScanner().scan``."""
    return RepositoryScanner(provider=provider).scan(root)
