"""Tests for the vibe-check exception hierarchy."""

from pathlib import Path

import pytest

from vibe_check.exceptions import (
    AnalysisError,
    ConfigurationError,
    InvalidConfigError,
    InvalidPathError,
    RepositoryQueryError,
    VibeCheckError,
)


class TestHierarchy:
    """Every error derives from VibeCheckError."""

    @pytest.mark.parametrize(
        "cls,base",
        [
            (ConfigurationError, VibeCheckError),
            (InvalidPathError, ConfigurationError),
            (InvalidConfigError, ConfigurationError),
            (AnalysisError, VibeCheckError),
            (RepositoryQueryError, AnalysisError),
        ],
    )
    def test_subclass(self, cls, base):
        assert issubclass(cls, base)


class TestMessages:
    """String rendering includes details."""

    def test_plain_message(self):
        assert str(VibeCheckError("boom")) == "boom"

    def test_details_appended(self):
        err = InvalidPathError(Path("/nope"), "does not exist")
        assert str(err) == "Invalid path: /nope (path=/nope, reason=does not exist)"
        assert err.reason == "does not exist"

    def test_invalid_config(self):
        err = InvalidConfigError("days", 0, "must be a positive integer")
        assert err.key == "days"
        assert "must be a positive integer" in str(err)

    def test_repository_query_error_fields(self):
        err = RepositoryQueryError(Path("/r"), ["log", "-1"], "fatal: bad", returncode=128)
        assert err.git_args == ("log", "-1")
        assert err.returncode == 128
        assert "git log -1 failed in /r" in str(err)
        assert err.args == ("git log -1 failed in /r",)
