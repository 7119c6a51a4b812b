"""Result types for language detection."""

from dataclasses import dataclass
from enum import Enum


class DetectionMethod(str, Enum):
    """How a ClassificationResult was reached."""

    OVERRIDE = "override"
    DECLARED = "declared"
    SCORER = "scorer"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class ClassificationResult:
    """Language identifier and display label produced by one detection."""

    language: str
    display_label: str
    method: DetectionMethod
