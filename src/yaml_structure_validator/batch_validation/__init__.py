"""Batch validation domain exports."""

from .batch_validator import check_document, summarize_outcomes, validate_documents
from .validation_outcomes import (
    DocumentOutcome,
    MessageLevel,
    ReportMessage,
    ValidationReport,
    ValidationResult,
)

__all__ = [
    "DocumentOutcome",
    "MessageLevel",
    "ReportMessage",
    "ValidationReport",
    "ValidationResult",
    "check_document",
    "summarize_outcomes",
    "validate_documents",
]
