"""Language census: file-extension breakdown of one repository."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..logging_config import get_logger
from ..math.apportion import allocate_percentages
from ..models import LanguageStat
from .languages import SKIP_DIRECTORIES, detect_language
from .walker import EntryProvider, TreeWalker

logger = get_logger(__name__)


@dataclass(frozen=True)
class CensusResult:
    """Language shares of one repository and any traversal warnings."""

    languages: tuple[LanguageStat, ...]
    file_counts: dict[str, int]
    warnings: tuple[str, ...] = ()


class LanguageCensus:
    """Counts recognized source files per language.

    Walks the repository on its own, with the same exclusion rules as the
    repository scanner: hidden and deny-listed directories are skipped and
    symlinks must stay inside the repository. Symlinked files are not
    counted; the file they point to is counted where it lives.
    """

    def __init__(
        self,
        provider: Optional[EntryProvider] = None,
        skip_dirs: frozenset[str] = SKIP_DIRECTORIES,
    ):
        self.walker = TreeWalker(provider=provider, skip_dirs=skip_dirs)

    def measure(self, repo_path: Path) -> CensusResult:
        counts: dict[str, int] = {}
        warnings: list[str] = []

        for visit in self.walker.walk(repo_path):
            if visit.error is not None:
                message = f"Error reading directory {visit.path}: {visit.error}"
                logger.warning(message)
                warnings.append(message)
                continue
            for file_path in visit.files:
                language = detect_language(file_path)
                if language is not None:
                    counts[language] = counts.get(language, 0) + 1

        languages = tuple(
            LanguageStat(language=name, percentage=points)
            for name, points in allocate_percentages(counts)
        )
        logger.debug(f"{repo_path}: {sum(counts.values())} source files, {len(languages)} languages")
        return CensusResult(languages=languages, file_counts=counts, warnings=tuple(warnings))

    def census(self, repo_path: Path) -> list[LanguageStat]:
        """
        Percentage breakdown of recognized source files.

        Returns:
            LanguageStat list sorted by percentage descending, summing to at
            most 100; empty if no recognized files exist
        """
        return list(self.measure(repo_path).languages)


def census(repo_path: Path, provider: Optional[EntryProvider] = None) -> list[LanguageStat]:
    """Convenience wrapper around ``LanguageCensus().census``."""
    return LanguageCensus(provider=provider).census(repo_path)
