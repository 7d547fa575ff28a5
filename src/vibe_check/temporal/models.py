"""Data models for commit activity analysis."""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Optional, Union


@dataclass(frozen=True)
class CommitMetrics:
    """Commit activity of one repository over the analysis window."""

    repo_path: Path
    repo_name: str
    last_commit: Optional[datetime]  # None only when the repository has no commits
    commit_count: int  # commits at or after the window cutoff
    is_active: bool = field(init=False)

    def __post_init__(self) -> None:
        if self.commit_count < 0:
            raise ValueError("commit_count must be non-negative")
        object.__setattr__(self, "is_active", self.commit_count > 0)

    @classmethod
    def empty(cls, repo_path: Path) -> "CommitMetrics":
        """Zero-activity metrics used when a repository cannot be queried."""
        return cls(
            repo_path=repo_path,
            repo_name=repo_path.name,
            last_commit=None,
            commit_count=0,
        )


@dataclass(frozen=True)
class GitOutput:
    """Successful git query: stdout of the command."""

    stdout: str

    def lines(self) -> list[str]:
        return [line.strip() for line in self.stdout.splitlines() if line.strip()]


@dataclass(frozen=True)
class GitFailure:
    """Failed git query with the reason reported by git or the OS."""

    reason: str
    returncode: Optional[int] = None


GitResult = Union[GitOutput, GitFailure]


@dataclass(frozen=True)
class CommitAnalysis:
    """Commit metrics plus the warnings raised while collecting them."""

    metrics: CommitMetrics
    warnings: tuple[str, ...] = ()

    @property
    def degraded(self) -> bool:
        return bool(self.warnings)
