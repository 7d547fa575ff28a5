"""Tests for pipeline.py - scan, measure, aggregate."""

import logging
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from vibe_check import analyze_work_patterns
from vibe_check.config import AnalysisConfig
from vibe_check.exceptions import InvalidConfigError, InvalidPathError
from vibe_check.models import CommitDistribution, LanguageStat
from vibe_check.pipeline import WorkPatternPipeline, run_pipeline, validate_root

DAY = 86400


class TestValidation:
    """Input checks before traversal."""

    def test_missing_root(self, tmp_path):
        with pytest.raises(InvalidPathError):
            run_pipeline(tmp_path / "missing", 7)

    def test_root_is_file(self, tmp_path):
        target = tmp_path / "file.txt"
        target.write_text("x")
        with pytest.raises(InvalidPathError) as exc_info:
            validate_root(target)
        assert exc_info.value.reason == "is not a directory"

    def test_non_positive_days(self, tmp_path):
        with pytest.raises(InvalidConfigError):
            run_pipeline(tmp_path, 0)

    def test_empty_root_is_valid(self, tmp_path):
        """Zero repositories is a sparse summary, not an error."""
        summary = analyze_work_patterns(tmp_path, 7)
        assert summary.total_repos == 0
        assert summary.commit_distribution == CommitDistribution.SPARSE


class TestWithFakes:
    """Pipeline over an in-memory tree and canned git history."""

    def _fixture(self, fake_provider, fake_runner, now):
        ts = int(now.timestamp())
        provider = fake_provider(
            {
                "/code": {
                    "api": {".git": {}, "a.ts": "f", "b.ts": "f", "c.ts": "f", "d.py": "f"},
                    "web": {".git": {}, "index.js": "f"},
                    "old": {".git": {}, "main.go": "f"},
                }
            }
        )
        runner = fake_runner(
            {
                "/code/api": [ts - i * 3600 for i in range(6)],
                "/code/web": [ts - DAY, ts - 2 * DAY],
                "/code/old": [ts - 90 * DAY],
            }
        )
        return provider, runner

    def test_summary(self, fake_provider, fake_runner, now):
        provider, runner = self._fixture(fake_provider, fake_runner, now)
        result = run_pipeline(Path("/code"), 7, provider=provider, runner=runner, now=now)
        summary = result.summary

        assert summary.total_repos == 3
        assert summary.active_repos == 2
        assert summary.cold_repos == 1
        assert summary.total_commits == 8
        assert summary.most_active_repos == ("api", "web")
        assert summary.time_range.end == now
        assert sum(s.percentage for s in summary.top_languages) <= 100
        assert result.warnings == ()

    def test_reports_follow_scan_order(self, fake_provider, fake_runner, now):
        """Reports come back in scanner order regardless of worker count."""
        provider, runner = self._fixture(fake_provider, fake_runner, now)
        for workers in (1, 4):
            pipeline = WorkPatternPipeline(
                config=AnalysisConfig(workers=workers), provider=provider, runner=runner
            )
            result = pipeline.run(Path("/code"), 7, now=now)
            assert [r.metrics.repo_name for r in result.reports] == ["api", "old", "web"]

    def test_failed_repository_degrades(self, fake_provider, fake_runner, now, caplog):
        """One broken repository does not abort the run."""
        provider, _ = self._fixture(fake_provider, fake_runner, now)
        ts = int(now.timestamp())
        runner = fake_runner(
            {"/code/api": [ts], "/code/web": [ts]},
            failures={"/code/old": "fatal: not a git repository"},
        )
        with caplog.at_level(logging.WARNING, logger="vibe_check"):
            result = run_pipeline(Path("/code"), 7, provider=provider, runner=runner, now=now)
        assert result.summary.total_repos == 3
        assert result.summary.active_repos == 2
        assert len(result.warnings) == 1
        assert "/code/old" in caplog.text

    def test_unexpected_error_contained(self, fake_provider, now, caplog):
        """An exception inside one repository's measurement becomes a warning."""

        class ExplodingRunner:
            def run(self, repo_path, args):
                raise RuntimeError("boom")

        provider = fake_provider({"/code": {"r": {".git": {}}}})
        with caplog.at_level(logging.WARNING, logger="vibe_check"):
            result = run_pipeline(
                Path("/code"), 7, provider=provider, runner=ExplodingRunner(), now=now
            )
        assert result.summary.total_repos == 1
        assert result.summary.cold_repos == 1
        assert result.reports[0].degraded
        assert "boom" in caplog.text


class TestEndToEnd:
    """Real repositories on disk."""

    def test_active_and_empty_repository(self, tmp_path, make_git_repo):
        """A: 10 recent commits, 3 .ts + 1 .py; B: no commits."""
        now = datetime.now(timezone.utc)
        repo_a = make_git_repo(
            tmp_path / "A", [now - timedelta(hours=2 + i) for i in range(10)]
        )
        for name in ("one.ts", "two.ts", "three.ts", "tool.py"):
            (repo_a / name).write_text("")
        make_git_repo(tmp_path / "B")

        summary = run_pipeline(tmp_path, 7, now=now).summary

        assert summary.total_repos == 2
        assert summary.active_repos == 1
        assert summary.cold_repos == 1
        assert summary.total_commits == 10
        assert summary.commit_distribution == CommitDistribution.FOCUSED
        assert summary.top_languages == (
            LanguageStat("TypeScript", 75),
            LanguageStat("Python", 25),
        )
        assert summary.most_active_repos == ("A",)
