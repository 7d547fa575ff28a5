"""Breadth-first directory walker shared by the scanner and the census.

The walker never touches the filesystem directly: it asks an
``EntryProvider`` for directory listings and real paths, so traversal can be
exercised against an in-memory tree. It does no logging either. Unreadable
directories and unresolvable links come back as ``Visit`` values carrying an
``error``, and the caller decides how to report them.

Rules applied to every child directory:
    - hidden names (leading ".") and deny-listed names are skipped
    - symbolic links are followed only when their real path stays inside
      the resolved walk root; the resolved target is what gets visited
    - each resolved directory is visited at most once (cycle avoidance)
"""

from __future__ import annotations

import os
from collections import deque
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterator, Optional, Protocol

from .languages import SKIP_DIRECTORIES, is_skipped_directory


@dataclass(frozen=True)
class DirEntry:
    """One child of a directory listing."""

    name: str
    path: Path
    is_dir: bool  # follows symlinks
    is_file: bool  # follows symlinks
    is_symlink: bool


@dataclass(frozen=True)
class Visit:
    """Result of visiting one directory."""

    path: Path
    files: tuple[Path, ...] = ()
    pruned: bool = False
    error: Optional[str] = None


class EntryProvider(Protocol):
    """Source of directory listings and real paths."""

    def list_dir(self, path: Path) -> list[DirEntry]: ...

    def resolve(self, path: Path) -> Path: ...

    def exists(self, path: Path) -> bool: ...

    def is_dir(self, path: Path) -> bool: ...


class FilesystemProvider:
    """EntryProvider backed by ``os.scandir``."""

    def list_dir(self, path: Path) -> list[DirEntry]:
        entries = []
        with os.scandir(path) as it:
            for entry in it:
                entries.append(
                    DirEntry(
                        name=entry.name,
                        path=path / entry.name,
                        is_dir=_entry_check(entry.is_dir),
                        is_file=_entry_check(entry.is_file),
                        is_symlink=_entry_check(entry.is_symlink),
                    )
                )
        # scandir order is arbitrary; sort for repeatable traversal
        entries.sort(key=lambda e: e.name)
        return entries

    def resolve(self, path: Path) -> Path:
        return path.resolve(strict=True)

    def exists(self, path: Path) -> bool:
        return os.path.lexists(path)

    def is_dir(self, path: Path) -> bool:
        return os.path.isdir(path)


def _entry_check(check: Callable[[], bool]) -> bool:
    # DirEntry.is_dir() raises on symlink loops and permission problems
    try:
        return check()
    except OSError:
        return False


def is_within(path: Path, root: Path) -> bool:
    """True if ``path`` is ``root`` or one of its descendants."""
    return path == root or path.is_relative_to(root)


class TreeWalker:
    """Breadth-first walk yielding one ``Visit`` per directory reached."""

    def __init__(
        self,
        provider: Optional[EntryProvider] = None,
        skip_dirs: frozenset[str] = SKIP_DIRECTORIES,
    ):
        self.provider = provider or FilesystemProvider()
        self.skip_dirs = frozenset(skip_dirs)

    def resolve_root(self, root: Path) -> Path:
        """Resolve the walk root; raises OSError if it cannot be resolved."""
        try:
            return self.provider.resolve(Path(root))
        except RuntimeError as e:
            # symlink loop on Python < 3.13
            raise OSError(str(e)) from e

    def walk(
        self,
        root: Path,
        prune: Optional[Callable[[Path], bool]] = None,
    ) -> Iterator[Visit]:
        """Walk ``root`` breadth-first.

        Args:
            root: Directory to start from (resolved before walking)
            prune: Called with each directory before it is listed; when it
                returns True the directory is yielded with ``pruned=True``
                and its children are never visited

        Yields:
            Visit per directory, in breadth-first order
        """
        try:
            base = self.resolve_root(root)
        except OSError as e:
            yield Visit(path=Path(root), error=f"cannot resolve root: {e}")
            return

        queue: deque[Path] = deque([base])
        seen = {base}

        while queue:
            current = queue.popleft()

            if prune is not None and prune(current):
                yield Visit(path=current, pruned=True)
                continue

            try:
                entries = self.provider.list_dir(current)
            except PermissionError:
                yield Visit(path=current, error="permission denied")
                continue
            except OSError as e:
                yield Visit(path=current, error=str(e))
                continue

            files: list[Path] = []
            for entry in entries:
                if entry.is_dir:
                    if is_skipped_directory(entry.name, self.skip_dirs):
                        continue
                    child = entry.path
                    if entry.is_symlink:
                        try:
                            child = self.resolve_root(entry.path)
                        except OSError as e:
                            yield Visit(path=entry.path, error=f"cannot resolve symlink: {e}")
                            continue
                        if not is_within(child, base):
                            continue
                    if child not in seen:
                        seen.add(child)
                        queue.append(child)
                elif entry.is_file and not entry.is_symlink:
                    files.append(entry.path)

            yield Visit(path=current, files=tuple(files))
