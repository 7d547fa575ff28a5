"""Repository discovery and per-repository language census."""

from .census import CensusResult, LanguageCensus, census
from .languages import (
    EXTENSION_LANGUAGES,
    SKIP_DIRECTORIES,
    VCS_MARKER,
    detect_language,
    is_skipped_directory,
)
from .scanner import RepositoryScanner, scan_repos
from .walker import DirEntry, EntryProvider, FilesystemProvider, TreeWalker, Visit, is_within

__all__ = [
    "CensusResult",
    "DirEntry",
    "EXTENSION_LANGUAGES",
    "EntryProvider",
    "FilesystemProvider",
    "LanguageCensus",
    "RepositoryScanner",
    "SKIP_DIRECTORIES",
    "TreeWalker",
    "VCS_MARKER",
    "Visit",
    "census",
    "detect_language",
    "is_skipped_directory",
    "is_within",
    "scan_repos",
]
