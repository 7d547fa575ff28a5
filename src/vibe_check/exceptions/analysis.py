"""Analysis-related exceptions: repository queries.

These are recoverable. The pipeline never lets them escape once traversal
has started; they are logged and converted into degraded results.
"""

from pathlib import Path
from typing import Optional, Sequence

from .base import VibeCheckError


class AnalysisError(VibeCheckError):
    """Base class for analysis-related errors."""
    pass


class RepositoryQueryError(AnalysisError):
    """Raised when a git query against a repository fails."""

    def __init__(
        self,
        repo_path: Path,
        git_args: Sequence[str],
        reason: str,
        returncode: Optional[int] = None,
    ):
        super().__init__(
            f"git {' '.join(git_args)} failed in {repo_path}",
            details={"repo": str(repo_path), "reason": reason},
        )
        self.repo_path = repo_path
        self.git_args = tuple(git_args)
        self.reason = reason
        self.returncode = returncode
