"""Results writing entities."""

from __future__ import annotations

from enum import Enum

SUMMARY_SHEET_NAME = "Summary"
DOCUMENTS_SHEET_NAME = "Documents"

DOCUMENT_COLUMNS: tuple[str, ...] = (
    "Path",
    "Status",
    "Parse errors",
    "Missing keys",
    "Structure mismatches",
    "Type match",
    "JSON copy",
)


class DocumentStatus(str, Enum):
    """Rendered status in the report workbook status column."""

    OK = "OK"
    FAILED = "FAILED"
