"""
CodeBoard Backend: Code-Language Classifier
============================================

What:  Guesses the programming language of a pasted snippet.
How:   Pure, synchronous, in-memory. Each call runs

           resolve_override ──▶ (no fence tag) classify ──▶ format_label

       and reads nothing but the immutable rule table, so it is safe to call
       from any number of requests at once.

The result is a suggestion for the snippet's "language" field. Callers
must let the user edit it, and must not treat the "text"/"code" sentinels
as errors.
"""

from codeboard.classifier.labels import EMOJI, LABEL_STYLES, PLAIN, format_label
from codeboard.classifier.models import ClassificationResult, DetectionMethod
from codeboard.classifier.overrides import normalize_language, resolve_override
from codeboard.classifier.rules import DEFAULT_RULE_TABLE, LanguageRule, RuleTable
from codeboard.classifier.scorer import (
    CODE_SENTINEL,
    SENTINELS,
    TEXT_SENTINEL,
    CandidateScore,
    classify,
    rank,
)


def detect_language(
    text: str,
    style: str = PLAIN,
    table: RuleTable = DEFAULT_RULE_TABLE,
) -> ClassificationResult:
    """Run the full override → scorer → label pipeline on `text`."""
    language = resolve_override(text)
    if language is not None:
        method = DetectionMethod.OVERRIDE
    else:
        language = classify(text, table)
        method = DetectionMethod.FALLBACK if language in SENTINELS else DetectionMethod.SCORER
    return ClassificationResult(
        language=language,
        display_label=format_label(language, style),
        method=method,
    )


__all__ = [
    "CODE_SENTINEL",
    "DEFAULT_RULE_TABLE",
    "EMOJI",
    "LABEL_STYLES",
    "PLAIN",
    "SENTINELS",
    "TEXT_SENTINEL",
    "CandidateScore",
    "ClassificationResult",
    "DetectionMethod",
    "LanguageRule",
    "RuleTable",
    "classify",
    "detect_language",
    "format_label",
    "normalize_language",
    "rank",
    "resolve_override",
]
