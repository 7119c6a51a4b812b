"""
CodeBoard Backend: Fenced-Code Override
========================================

What:  Detects an author-declared language on a fenced code block
       (```py, ```rust, ...) and turns it into a canonical identifier.
How:   A fence only counts at the start of a line (leading spaces or tabs
       allowed) with the tag written directly after the backticks. The
       first tagged fence in the text wins. Tags are lowercased and passed
       through LANGUAGE_ALIASES; anything not in the table is returned
       as-is, lowercased.

A declared tag is never second-guessed by the scorer.
"""

import re
from typing import Dict, List, Optional

# Short tags (and a few common spellings) to canonical identifiers.
# Identifiers that are already canonical ("python", "rust") need no entry.
LANGUAGE_ALIASES: Dict[str, str] = {
    "js": "javascript",
    "ts": "typescript",
    "py": "python",
    "python3": "python",
    "rb": "ruby",
    "php": "php",
    "cs": "csharp",
    "c#": "csharp",
    "cpp": "cpp",
    "c++": "cpp",
    "c": "c",
    "go": "go",
    "golang": "go",
    "rs": "rust",
    "java": "java",
    "kt": "kotlin",
    "swift": "swift",
    "html": "html",
    "css": "css",
    "scss": "scss",
    "sql": "sql",
    "sh": "shell",
    "zsh": "shell",
    "bash": "bash",
    "ps": "powershell",
    "ps1": "powershell",
    "md": "markdown",
    "json": "json",
    "yaml": "yaml",
    "yml": "yaml",
    "xml": "xml",
    "jsx": "react",
    "fortran": "fortran",
    "f90": "fortran",
    "f": "fortran",
}

_FENCE_TAG = re.compile(r"^[ \t]*```([\w+#.-]+)", re.MULTILINE)


def normalize_language(tag: str) -> str:
    """Lowercase a language tag and map it through the alias table."""
    key = tag.strip().lower()
    return LANGUAGE_ALIASES.get(key, key)


def aliases_for(language: str) -> List[str]:
    """Short tags that resolve to `language`, excluding the identifier itself."""
    return sorted(
        tag for tag, target in LANGUAGE_ALIASES.items()
        if target == language and tag != language
    )


def resolve_override(text: str) -> Optional[str]:
    """Return the declared language of the first tagged fence, or None."""
    if not text:
        return None
    match = _FENCE_TAG.search(text)
    if match is None:
        return None
    return normalize_language(match.group(1))
