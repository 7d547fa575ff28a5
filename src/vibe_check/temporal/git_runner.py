"""Run git via subprocess and return a typed outcome instead of raising."""

import subprocess
from pathlib import Path
from typing import Sequence

from ..exceptions import RepositoryQueryError
from ..logging_config import get_logger
from .models import GitFailure, GitOutput, GitResult

logger = get_logger(__name__)


class GitRunner:
    """Execute read-only git commands inside one repository.

    Commands are passed as an argument list (no shell), each with its own
    timeout. ``run`` never raises; failures come back as ``GitFailure``.
    """

    def __init__(self, git_binary: str = "git", timeout_seconds: int = 30):
        self.git_binary = git_binary
        self.timeout_seconds = timeout_seconds

    def run(self, repo_path: Path, args: Sequence[str]) -> GitResult:
        try:
            return GitOutput(self.check_output(repo_path, args))
        except RepositoryQueryError as e:
            return GitFailure(reason=e.reason, returncode=e.returncode)

    def check_output(self, repo_path: Path, args: Sequence[str]) -> str:
        """Run ``git -C repo_path *args`` and return stdout.

        Raises:
            RepositoryQueryError: If git is missing, times out or exits non-zero
        """
        cmd = [self.git_binary, "-C", str(repo_path), *args]
        logger.debug(f"Running {' '.join(cmd)}")
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=self.timeout_seconds,
            )
        except FileNotFoundError as e:
            raise RepositoryQueryError(repo_path, args, f"git executable not found: {e}")
        except subprocess.TimeoutExpired:
            raise RepositoryQueryError(
                repo_path, args, f"timed out after {self.timeout_seconds}s"
            )
        except OSError as e:
            raise RepositoryQueryError(repo_path, args, str(e))

        if result.returncode != 0:
            raise RepositoryQueryError(
                repo_path,
                args,
                result.stderr.strip() or f"exit status {result.returncode}",
                returncode=result.returncode,
            )
        return result.stdout