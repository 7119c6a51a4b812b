"""
CodeBoard Backend: Exception Hierarchy
=======================================

What:  Application-specific exceptions raised by the service layer.
How:   Each exception carries a user-facing message and a context dict.
       Handlers registered in main.py turn them into structured JSON errors.

Exception Hierarchy:
    CodeBoardError (base)   → 500 Internal Server Error
    ├── ValidationError     → 400 Bad Request
    └── NotFoundError       → 404 Not Found

The classifier never raises any of these. An unrecognisable snippet is
labelled "text" or "code"; only malformed requests are errors.
"""

from typing import Any, Dict, Optional


class CodeBoardError(Exception):
    """
    Base exception for all CodeBoard application errors.

    Attributes:
        message:  User-facing error description (safe to return to clients)
        context:  Extra details for the response `details` field and logs
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(CodeBoardError):
    """
    Raised when a request is well-formed JSON but breaks a business rule.

    When:  Snippet content over the configured size limit, unknown label style.
    HTTP:  400 Bad Request (schema-level problems stay FastAPI's 422)
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(CodeBoardError):
    """
    Raised when a requested resource does not exist.

    When:  GET /api/languages/{name} for a language with no detection rule.
    HTTP:  404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
