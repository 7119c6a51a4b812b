"""
CodeBoard Backend: Pydantic Request/Response Schemas
=====================================================

What:  The API contract of the language detection endpoints.
How:   FastAPI validates request bodies against these models, serializes
       responses from them and builds the OpenAPI docs out of them.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class DetectRequest(BaseModel):
    """
    What:  Body of POST /api/languages/detect.
    Who:   Sent by the snippet editor whenever the user pastes or edits code.

    declared_language:
        The language the user already chose for the snippet, if any. A
        non-blank value wins over detection.
    """
    content: str = Field(description="Raw snippet or note body to classify")
    declared_language: Optional[str] = Field(
        default=None,
        max_length=50,
        description="Language already set on the snippet; skips detection when non-blank",
    )
    label_style: Optional[str] = Field(
        default=None,
        description="'plain' or 'emoji'; defaults to the server's configured style",
    )

    @field_validator("label_style")
    @classmethod
    def normalize_label_style(cls, v: Optional[str]) -> Optional[str]:
        return v.lower() if v is not None else v


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class DetectResponse(BaseModel):
    """
    What:  Result of one detection.

    method:
        override  fenced-code tag in the content
        declared  declared_language from the request
        scorer    a language rule matched
        fallback  nothing matched; language is "text" or "code"
    """
    language: str = Field(description="Machine identifier, e.g. 'python'")
    display_label: str = Field(description="Human-facing label, e.g. 'Python'")
    method: str = Field(description="override, declared, scorer or fallback")


class LanguageInfo(BaseModel):
    """One entry of the detection rule table."""
    name: str = Field(description="Canonical language identifier")
    display_label: str = Field(description="Label shown for this language")
    priority: int = Field(description="Weight applied to a positive match count")
    signature_count: int = Field(description="Number of positive signature patterns")
    exclusion_count: int = Field(description="Number of exclusion patterns")
    aliases: List[str] = Field(default_factory=list, description="Fence tags that map here")


class LanguageListResponse(BaseModel):
    """Every detectable language, in tie-break order."""
    languages: List[LanguageInfo]
    total_count: int


# ══════════════════════════════════════════════════════════════════════════
# Error & Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    What:  Error body shared by every endpoint.

    Example:
        {
            "error": "validation_error",
            "message": "Content exceeds the maximum of 100000 characters",
            "details": {"field": "content", "max_length": 100000},
            "request_id": "1f2e3d4c"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health."""
    status: str = Field(description="Overall service status: healthy or unhealthy")
    version: str = Field(description="Application version")
    languages: int = Field(description="Number of languages in the detection rule table")
    uptime_seconds: float = Field(description="Seconds since service started")
