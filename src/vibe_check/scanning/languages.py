"""Extension table and skip rules shared by the scanner and the census.

Adding a language:
  1. Add its extensions to EXTENSION_LANGUAGES below.
  2. That's it. The census picks them up automatically.
"""

from pathlib import PurePath
from typing import Optional

# Dependency caches, build output and virtual environments.
SKIP_DIRECTORIES = frozenset(
    {
        "node_modules",
        ".venv",
        "venv",
        "target",
        "build",
        "dist",
        ".next",
        ".nuxt",
        "vendor",
        "__pycache__",
    }
)

# Marker that identifies the top of a tracked repository.
VCS_MARKER = ".git"

# Suffixes are matched case-sensitively (".C" is not ".c").
EXTENSION_LANGUAGES = {
    ".ts": "TypeScript",
    ".tsx": "TypeScript",
    ".js": "JavaScript",
    ".jsx": "JavaScript",
    ".py": "Python",
    ".java": "Java",
    ".go": "Go",
    ".rs": "Rust",
    ".rb": "Ruby",
    ".php": "PHP",
    ".c": "C",
    ".cpp": "C++",
    ".cc": "C++",
    ".cxx": "C++",
    ".cs": "C#",
    ".swift": "Swift",
    ".kt": "Kotlin",
    ".kts": "Kotlin",
    ".scala": "Scala",
    ".sh": "Shell",
    ".bash": "Shell",
    ".zsh": "Shell",
    ".html": "HTML",
    ".css": "CSS",
    ".scss": "SCSS",
    ".sass": "Sass",
    ".vue": "Vue",
    ".svelte": "Svelte",
    ".sql": "SQL",
    ".r": "R",
    ".m": "Objective-C",
    ".mm": "Objective-C++",
    ".dart": "Dart",
    ".lua": "Lua",
    ".pl": "Perl",
    ".ex": "Elixir",
    ".exs": "Elixir",
    ".erl": "Erlang",
    ".hrl": "Erlang",
    ".clj": "Clojure",
    ".cljs": "ClojureScript",
    ".hs": "Haskell",
    ".ml": "OCaml",
    ".fs": "F#",
    ".fsx": "F#",
}


def detect_language(path: PurePath) -> Optional[str]:
    """Return the language for a file path, or None if unrecognized."""
    return EXTENSION_LANGUAGES.get(path.suffix)


def is_skipped_directory(name: str, skip_dirs: frozenset[str] = SKIP_DIRECTORIES) -> bool:
    """Hidden directories and deny-listed build/dependency directories."""
    return name.startswith(".") or name in skip_dirs
