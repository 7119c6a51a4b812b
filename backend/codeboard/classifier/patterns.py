"""
CodeBoard Backend: Text Patterns
=================================

What:  The matching abstraction used by the rule table.
How:   A rule only ever asks one question of a pattern: does it occur anywhere
       in the input? `TextPattern` captures that as `matches(text) -> bool`,
       and `RegexPattern` answers it with a precompiled regular expression.

The rule table depends on the protocol, not on `re`, so a rule can be backed
by any other matcher (literal substring, tokenizer, ...) without touching the
scorer.
"""

import re
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class TextPattern(Protocol):
    """Anything that can say whether it occurs in a block of text."""

    def matches(self, text: str) -> bool:
        ...


@dataclass(frozen=True)
class RegexPattern:
    """
    A precompiled regular expression evaluated with `search` semantics.

    Patterns are case-insensitive by default; snippets are pasted from many
    editors and keyword case is not a reliable signal.
    """

    regex: re.Pattern

    def matches(self, text: str) -> bool:
        return self.regex.search(text) is not None

    @property
    def source(self) -> str:
        return self.regex.pattern

    def __repr__(self) -> str:
        return f"RegexPattern({self.regex.pattern!r})"


def regex(source: str, flags: int = re.IGNORECASE) -> RegexPattern:
    """Compile `source` once and wrap it as a TextPattern."""
    return RegexPattern(re.compile(source, flags))
