"""
CodeBoard Backend: Language Rule Table
=======================================

What:  Static, ordered configuration describing how each supported language
       is recognised: signature patterns (positive signals), exclusion
       patterns (negative signals) and a priority weight.
How:   `LanguageRule` records are collected into an immutable `RuleTable`
       once, at import time. Nothing in here evaluates text; scoring lives in
       `codeboard.classifier.scorer`.

Ordering:
    The order of DEFAULT_RULES is significant. When two languages end up
    with the same final score, the one listed first wins. Entries are
    therefore listed from the most distinctive language to the least.

Invariants (checked when a table is built):
    - every rule name is unique
    - every priority is a positive integer

Patterns:
    Every pattern must run in linear time on near-miss input of up to
    `max_content_length` characters. Never put two unbounded quantifiers
    over overlapping character classes next to each other (`\s+.*\s+`).
    A "head ... tail on one line" signal bounds its gap with `[^\n]` and
    stops it at the next head, as the SELECT/FROM and `if [ ... ];` rules do.
"""

import re
from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Sequence, Tuple

from codeboard.classifier.patterns import TextPattern, regex


@dataclass(frozen=True)
class LanguageRule:
    """
    Detection rule for one language.

    Attributes:
        name:                Canonical lowercase identifier ("python", "cpp").
        signature_patterns:  Each pattern that matches adds one point.
        exclusion_patterns:  Each pattern that matches costs two points.
        priority:            Multiplier applied to a positive raw score.
    """

    name: str
    signature_patterns: Tuple[TextPattern, ...]
    exclusion_patterns: Tuple[TextPattern, ...] = ()
    priority: int = 1


class RuleTable:
    """
    Immutable, ordered collection of LanguageRule records.

    Iteration order is the order the rules were given in and never changes,
    which is what makes tie-breaking in the scorer deterministic.
    """

    __slots__ = ("_rules", "_by_name")

    def __init__(self, rules: Sequence[LanguageRule]):
        by_name: Dict[str, LanguageRule] = {}
        for rule in rules:
            if rule.name in by_name:
                raise ValueError(f"Duplicate language rule '{rule.name}'")
            if rule.priority <= 0:
                raise ValueError(
                    f"Language rule '{rule.name}' has non-positive priority {rule.priority}"
                )
            if not rule.signature_patterns:
                raise ValueError(f"Language rule '{rule.name}' has no signature patterns")
            by_name[rule.name] = rule
        self._rules: Tuple[LanguageRule, ...] = tuple(rules)
        self._by_name = by_name

    def __iter__(self) -> Iterator[LanguageRule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def get(self, name: str) -> Optional[LanguageRule]:
        return self._by_name.get(name)

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(rule.name for rule in self._rules)


def _rule(
    name: str,
    priority: int,
    signatures: Sequence[str],
    exclusions: Sequence[str] = (),
    flags: int = re.IGNORECASE,
) -> LanguageRule:
    return LanguageRule(
        name=name,
        signature_patterns=tuple(regex(s, flags) for s in signatures),
        exclusion_patterns=tuple(regex(s, flags) for s in exclusions),
        priority=priority,
    )


# ══════════════════════════════════════════════════════════════════════════
# Default rule set
# ══════════════════════════════════════════════════════════════════════════

DEFAULT_RULES: Tuple[LanguageRule, ...] = (
    _rule(
        "fortran",
        10,
        [
            r"program\s+\w+",
            r"subroutine\s+\w+",
            r"implicit none",
            r"end program",
            r"end subroutine",
            r"integer\s*::",
            r"real\s*::",
            r"character\s*::",
            r"write\(\*,\*\)",
            r"read\(\*,\*\)",
            r"\bdo\s+\d+",
            r"\bcontinue\b",
            r"format\(",
        ],
    ),
    _rule(
        "rust",
        9,
        [
            r"fn\s+\w+\s*\(",
            r"let\s+mut\s+\w+",
            r"impl\s+\w+",
            r"use\s+std::",
            r"pub\s+struct",
            r"pub\s+enum",
            r"#!\[(?:(?!#!\[)[^\n])+?\]",
        ],
    ),
    _rule(
        "go",
        9,
        [
            r"func\s+\w+\s*\(",
            r"package\s+main",
            r"import\s+\(",
            r'import\s+"[^"]+"',
            r"type\s+\w+\s+struct",
        ],
    ),
    _rule(
        "java",
        9,
        [
            r"public\s+class",
            r"class\s+\w+\s+extends",
            r"class\s+\w+\s+implements",
            r"public\s+static\s+void\s+main",
            r"System\.out\.println",
            r"import\s+java\.",
        ],
    ),
    _rule(
        "kotlin",
        8,
        [
            r"fun\s+\w+",
            r"val\s+\w+:",
            r"var\s+\w+:",
            r"suspend\s+fun",
            r"companion\s+object",
            r"data\s+class",
        ],
    ),
    _rule(
        "swift",
        8,
        [
            r"import\s+Foundation",
            r"func\s+\w+\(\)",
            r"var\s+\w+\s*:\s*\w+",
            r"let\s+\w+\s*:\s*\w+",
            r"class\s+\w+\s*:\s*\w+",
            r"struct\s+\w+",
        ],
    ),
    _rule(
        "python",
        7,
        [
            r"def\s+\w+\s*\(",
            r"from\s+\w+\s+import",
            r"import\s+\w+",
            r"if\s+__name__\s*==\s*[\"']__main__[\"']",
            r"print\s*\(",
            r"elif\s+",
            r"^[^\S\n]*#.*python",
        ],
        exclusions=[r"public\s+class"],
        flags=re.IGNORECASE | re.MULTILINE,
    ),
    _rule(
        "cpp",
        7,
        [
            r"#include\s*<iostream>",
            r"#include\s*<vector>",
            r"std::",
            r"cout\s*<<",
            r"cin\s*>>",
            r"namespace\s+\w+",
            r"template\s*<",
            r"class\s+\w+\s*\{",
        ],
    ),
    _rule(
        "c",
        6,
        [
            r"#include\s*<stdio\.h>",
            r"#include\s*<stdlib\.h>",
            r"printf\s*\(",
            r"scanf\s*\(",
            r"malloc\s*\(",
            r"void\s+\w+\s*\(",
        ],
        exclusions=[r"std::", r"class\s+\w+", r"template"],
    ),
    _rule(
        "sql",
        7,
        [
            r"SELECT\s+\S(?:(?:(?!SELECT\s)[^\n])*?\S)?\s+FROM",
            r"INSERT\s+INTO",
            r"UPDATE\s+\w+\s+SET",
            r"DELETE\s+FROM",
            r"CREATE\s+TABLE",
            r"ALTER\s+TABLE",
            r"DROP\s+TABLE",
            r"JOIN\s+\w+\s+ON",
            r"GROUP\s+BY",
            r"ORDER\s+BY",
        ],
    ),
    _rule(
        "html",
        5,
        [
            r"<!DOCTYPE\s+html>",
            r"<html[>\s]",
            r"<head[>\s]",
            r"<body[>\s]",
            r"<div[>\s]",
            r"<script[>\s]",
            r"<a\s+href",
        ],
    ),
    _rule(
        "css",
        5,
        [
            r"\b\w+\s*\{\s*[\w-]+\s*:",
            r"@media",
            r"@keyframes",
            r"@import",
            r"margin\s*:",
            r"padding\s*:",
            r"font-family\s*:",
            r"background-color\s*:",
        ],
        exclusions=[r"<html"],
    ),
    _rule(
        "typescript",
        6,
        [
            r"interface\s+\w+\s*\{",
            r"type\s+\w+\s*=\s*\{",
            r"type\s+\w+\s*=",
            r":\s*string\b",
            r":\s*number\b",
            r":\s*boolean\b",
            r"as\s+const\b",
            r"readonly\s+",
        ],
    ),
    _rule(
        "react",
        7,
        [
            r"import\s+\S(?:(?:(?!import\s)[^\n])*?\S)?\s+from\s+['\"]react['\"]",
            r"React\.useState",
            r"React\.useEffect",
            r"useEffect\(",
            r"useState\(",
            r"<\w+\s(?:[^\S\n]*\n)*(?:(?!<\w)[^\n])*?/>",
            r"className\s*=",
            r"onClick\s*=\s*\{",
        ],
    ),
    _rule(
        "javascript",
        4,
        [
            r"function\s+\w+\s*\(",
            r"const\s+\w+\s*=",
            r"let\s+\w+\s*=",
            r"var\s+\w+\s*=",
            r"=>\s*\{",
            r"console\.log\(",
            r"document\.getElementById",
            r"window\.",
        ],
    ),
    # Anchored at the very start of the input, not at every line.
    _rule(
        "json",
        3,
        [r'^\s*\{\s*"\w+"\s*:', r'^\s*\[\s*\{\s*"\w+"\s*:'],
    ),
    _rule(
        "shell",
        5,
        [
            r"^\s*#!",
            r"\becho\s+[\"']",
            r"export\s+\w+=",
            r"\$\(\w+\)",
            r"if\s+\[\s(?:\s*\S(?:(?:(?!\bif\s+\[)[^\n])*?\S)?)?\s+\]\s*;",
        ],
    ),
)

DEFAULT_RULE_TABLE = RuleTable(DEFAULT_RULES)
