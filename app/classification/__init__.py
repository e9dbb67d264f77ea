"""Keyword classification of Arabic news updates into aid locations."""

from app.classification.classifier import classify, should_include
from app.classification.types import Category, ExtractionResult, Severity, Status

__all__ = [
    "Category",
    "ExtractionResult",
    "Severity",
    "Status",
    "classify",
    "should_include",
]
