"""Commit activity per repository: in-window count and most recent commit."""

from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Optional, Union

from ..exceptions import InvalidConfigError
from ..logging_config import get_logger
from .git_runner import GitRunner
from .models import CommitAnalysis, CommitMetrics, GitFailure, GitResult

logger = get_logger(__name__)

# `git rev-parse --verify --quiet HEAD` exits 1 (no message) when HEAD does not
# resolve: an unborn branch, or a branch ref that is missing its object
_UNRESOLVED_HEAD_EXIT = 1


def validate_days(days: int) -> int:
    """Reject anything but a positive integer window length."""
    if isinstance(days, bool) or not isinstance(days, int) or days <= 0:
        raise InvalidConfigError("days", days, "must be a positive integer")
    return days


def window_start(days: int, now: datetime) -> datetime:
    """Cutoff instant: ``now`` minus ``days`` x 24h."""
    return now - timedelta(days=days)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CommitAnalyzer:
    """Reads commit activity from a repository's log.

    Query failures never raise. A repository that cannot be read degrades to
    zero commits and no timestamp, and the reason is logged and returned as
    a warning on the ``CommitAnalysis``.
    """

    def __init__(self, runner: Optional[GitRunner] = None):
        self.runner = runner or GitRunner()

    def analyze(
        self, repo_path: Path, days: int, now: Optional[datetime] = None
    ) -> CommitAnalysis:
        """
        Measure commit activity for one repository.

        Args:
            repo_path: Repository root
            days: Window length in days (positive)
            now: Reference instant, defaults to the current UTC time

        Returns:
            CommitAnalysis with metrics and any warnings
        """
        validate_days(days)
        repo_path = Path(repo_path)
        now = now or utc_now()
        cutoff = window_start(days, now)

        head = self.runner.run(repo_path, ["rev-parse", "--verify", "--quiet", "HEAD"])
        if isinstance(head, GitFailure):
            if head.returncode == _UNRESOLVED_HEAD_EXIT and self._is_unborn(repo_path):
                logger.debug(f"{repo_path} has no commits yet")
                return CommitAnalysis(metrics=CommitMetrics.empty(repo_path))
            return self._degraded(repo_path, head.reason or "HEAD does not resolve to a commit")

        # Every reachable commit; --since stops each line of history at the
        # first older commit and misses out-of-order committer dates
        history = _timestamps(self.runner.run(repo_path, ["log", "--format=%ct", "HEAD"]))
        if isinstance(history, GitFailure):
            return self._degraded(repo_path, history.reason)

        last_commit = (
            datetime.fromtimestamp(max(history), tz=timezone.utc) if history else None
        )
        cutoff_ts = cutoff.timestamp()
        commit_count = sum(1 for ts in history if ts >= cutoff_ts)

        return CommitAnalysis(
            metrics=CommitMetrics(
                repo_path=repo_path,
                repo_name=repo_path.name,
                last_commit=last_commit,
                commit_count=commit_count,
            )
        )

    def _is_unborn(self, repo_path: Path) -> bool:
        """True if HEAD names a branch whose ref does not exist yet.

        A detached HEAD, or a branch ref that exists but points at nothing
        valid, is a broken repository rather than an empty one.
        """
        branch = self.runner.run(repo_path, ["symbolic-ref", "--quiet", "HEAD"])
        if isinstance(branch, GitFailure) or not branch.lines():
            return False
        ref_path = self.runner.run(repo_path, ["rev-parse", "--git-path", branch.lines()[0]])
        if isinstance(ref_path, GitFailure) or not ref_path.lines():
            return False
        # --git-path is relative to the working directory git ran in
        return not (repo_path / ref_path.lines()[0]).exists()

    def _degraded(self, repo_path: Path, reason: str) -> CommitAnalysis:
        message = f"Git command failed in {repo_path}: {reason}"
        logger.warning(message)
        return CommitAnalysis(metrics=CommitMetrics.empty(repo_path), warnings=(message,))


def _timestamps(result: GitResult) -> Union[list[int], GitFailure]:
    """Parse one unix timestamp per line, passing failures through."""
    if isinstance(result, GitFailure):
        return result
    try:
        return [int(line) for line in result.lines()]
    except ValueError as e:
        return GitFailure(reason=f"unparseable git log output: {e}")


def analyze_commits(
    repo_path: Path,
    days: int,
    now: Optional[datetime] = None,
    runner: Optional[GitRunner] = None,
) -> CommitMetrics:
    """Convenience wrapper returning only the metrics."""
    return CommitAnalyzer(runner=runner).analyze(repo_path, days, now=now).metrics
