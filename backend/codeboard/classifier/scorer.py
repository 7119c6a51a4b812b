"""
CodeBoard Backend: Language Scorer
===================================

What:  Weighted, exclusion-adjusted pattern scoring over the rule table.
How:   For every rule, in table order:

           raw   = number of signature patterns found in the text
           raw  -= EXCLUSION_PENALTY for every exclusion pattern found
           score = raw * priority   if raw > 0
                   raw              otherwise

       The highest score wins; on a tie the rule listed first wins. When no
       rule scores above zero the text is labelled with a sentinel: "code"
       if it contains code-like punctuation, "text" if it does not.

EXCLUSION_PENALTY and the priority multiplier decide which language wins a
close call, which users see as the label on their snippet. Retune them only
against a snippet corpus.
"""

from dataclasses import dataclass
from typing import List

from codeboard.classifier.rules import DEFAULT_RULE_TABLE, LanguageRule, RuleTable

TEXT_SENTINEL = "text"
CODE_SENTINEL = "code"
SENTINELS = frozenset({TEXT_SENTINEL, CODE_SENTINEL})

EXCLUSION_PENALTY = 2

CODE_MARKERS = ("{", "}", "(", ")", ";")


@dataclass(frozen=True)
class CandidateScore:
    """Score of one language for one input; `raw_score` is before weighting."""

    language: str
    raw_score: int
    score: int


def score_rule(rule: LanguageRule, text: str) -> CandidateScore:
    raw = sum(1 for pattern in rule.signature_patterns if pattern.matches(text))
    raw -= EXCLUSION_PENALTY * sum(
        1 for pattern in rule.exclusion_patterns if pattern.matches(text)
    )
    score = raw * rule.priority if raw > 0 else raw
    return CandidateScore(language=rule.name, raw_score=raw, score=score)


def rank(text: str, table: RuleTable = DEFAULT_RULE_TABLE) -> List[CandidateScore]:
    """
    Score every language and return candidates best-first.

    `sorted` is stable, so languages with equal scores keep their table
    order and the first of them is the deterministic winner.
    """
    candidates = [score_rule(rule, text) for rule in table]
    return sorted(candidates, key=lambda c: c.score, reverse=True)


def fallback(text: str) -> str:
    if any(marker in text for marker in CODE_MARKERS):
        return CODE_SENTINEL
    return TEXT_SENTINEL


def classify(text: str, table: RuleTable = DEFAULT_RULE_TABLE) -> str:
    """
    Return the most likely language identifier for `text`.

    Never raises: empty input, unmatched input and ambiguous input all
    degrade to one of the sentinels.
    """
    if not text or not text.strip():
        return TEXT_SENTINEL

    ranked = rank(text, table)
    if ranked and ranked[0].score > 0:
        return ranked[0].language
    return fallback(text)
