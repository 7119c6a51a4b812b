"""
CodeBoard Backend: Language Route Handlers
===========================================

What:  Server-side language detection and the supported-language listing.
How:   Thin handlers; all logic lives in LanguageService.
Who:   The snippet editor calls /detect on paste and edit; the language
       picker calls GET /api/languages.

Routes:
    POST /api/languages/detect    classify a snippet body
    GET  /api/languages           list detectable languages
    GET  /api/languages/{name}    one language (identifier or alias)
"""

import logging

from fastapi import APIRouter, Response

from codeboard.schemas.language import (
    DetectRequest,
    DetectResponse,
    ErrorResponse,
    LanguageInfo,
    LanguageListResponse,
)
from codeboard.services.language_service import language_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/languages", tags=["Languages"])


@router.post(
    "/detect",
    response_model=DetectResponse,
    responses={
        200: {"description": "Suggested language for the content", "model": DetectResponse},
        400: {"description": "Content too long or unknown label style", "model": ErrorResponse},
    },
    summary="Detect the programming language of a snippet",
    description=(
        "Returns a suggested language identifier and display label for the given "
        "content. A fenced-code tag in the content, or a declared language, takes "
        "precedence over pattern scoring. Unrecognised content is labelled 'text' "
        "or 'code'; that is a normal result, not an error."
    ),
)
def detect(body: DetectRequest) -> DetectResponse:
    """Plain `def`: FastAPI runs the CPU-bound scan in its threadpool."""
    result = language_service.detect(
        content=body.content,
        declared_language=body.declared_language,
        label_style=body.label_style,
    )
    return DetectResponse(
        language=result.language,
        display_label=result.display_label,
        method=result.method.value,
    )


@router.get(
    "",
    response_model=LanguageListResponse,
    summary="List detectable languages",
    description="Languages of the detection rule table, in tie-break order.",
)
async def list_languages(response: Response) -> LanguageListResponse:
    """
    The rule table is fixed for the life of the process, so clients may
    cache the listing.
    """
    result = language_service.list_languages()
    response.headers["X-Total-Count"] = str(result.total_count)
    response.headers["Cache-Control"] = "public, max-age=3600"
    return result


@router.get(
    "/{name}",
    response_model=LanguageInfo,
    responses={404: {"description": "No detection rule for this language", "model": ErrorResponse}},
    summary="Get one detectable language",
)
async def get_language(name: str) -> LanguageInfo:
    return language_service.get_language(name)
