"""
CodeBoard Backend: Language Service
====================================

What:  Business layer between the language routes and the classifier.
How:   Validates request-level limits, applies the declared-language rule,
       runs the classifier and shapes rule-table entries for the API.
Who:   Called by routes/languages.py; usable directly from the notes store
       when a snippet is saved without a language.

Declared-language rule:
    A snippet that already has a language keeps it. The value is only
    normalized ("py" → "python") so it lines up with detected identifiers.
"""

import logging
from typing import Optional

from codeboard.classifier import (
    DEFAULT_RULE_TABLE,
    LABEL_STYLES,
    ClassificationResult,
    DetectionMethod,
    RuleTable,
    detect_language,
    format_label,
    normalize_language,
)
from codeboard.classifier.overrides import aliases_for
from codeboard.config import settings
from codeboard.exceptions import NotFoundError, ValidationError
from codeboard.schemas.language import LanguageInfo, LanguageListResponse

logger = logging.getLogger(__name__)


class LanguageService:
    """
    Language detection and rule-table lookups.

    Stateless apart from the immutable rule table it is given; one shared
    instance serves every request.
    """

    def __init__(self, table: RuleTable = DEFAULT_RULE_TABLE):
        self.table = table

    def _resolve_style(self, label_style: Optional[str]) -> str:
        style = label_style or settings.label_style
        if style not in LABEL_STYLES:
            raise ValidationError(
                message=f"Unknown label style '{style}'. Use one of: {sorted(LABEL_STYLES)}",
                field="label_style",
            )
        return style

    def detect(
        self,
        content: str,
        declared_language: Optional[str] = None,
        label_style: Optional[str] = None,
    ) -> ClassificationResult:
        """
        Suggest a language for a snippet body.

        Args:
            content:            Snippet text, any size up to max_content_length
            declared_language:  Language the user already set, if any
            label_style:        "plain" or "emoji"; None uses the configured default

        Raises:
            ValidationError: content too long, or unknown label style
        """
        style = self._resolve_style(label_style)

        if len(content) > settings.max_content_length:
            raise ValidationError(
                message=(
                    f"Content exceeds the maximum of {settings.max_content_length} characters"
                ),
                field="content",
                context={"max_length": settings.max_content_length, "length": len(content)},
            )

        if declared_language and declared_language.strip():
            language = normalize_language(declared_language)
            result = ClassificationResult(
                language=language,
                display_label=format_label(language, style),
                method=DetectionMethod.DECLARED,
            )
        else:
            result = detect_language(content, style=style, table=self.table)

        # Never log the snippet body itself.
        logger.debug(
            "Detected language=%s method=%s chars=%d",
            result.language,
            result.method.value,
            len(content),
        )
        return result

    def _info(self, name: str) -> LanguageInfo:
        rule = self.table.get(name)
        return LanguageInfo(
            name=rule.name,
            display_label=format_label(rule.name, settings.label_style),
            priority=rule.priority,
            signature_count=len(rule.signature_patterns),
            exclusion_count=len(rule.exclusion_patterns),
            aliases=aliases_for(rule.name),
        )

    def list_languages(self) -> LanguageListResponse:
        """Every language of the rule table, in table (tie-break) order."""
        items = [self._info(name) for name in self.table.names]
        return LanguageListResponse(languages=items, total_count=len(items))

    def get_language(self, name: str) -> LanguageInfo:
        """
        Look up one language by identifier or alias.

        Raises:
            NotFoundError: no detection rule exists for the language
        """
        canonical = normalize_language(name)
        if canonical not in self.table:
            raise NotFoundError(resource="language", resource_id=name)
        return self._info(canonical)


# Module-level singleton, imported by routes
language_service = LanguageService()
