"""Validation report workbook writer service."""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from yaml_structure_validator.batch_validation.validation_outcomes import (
    DocumentOutcome,
    ValidationReport,
)

from .report_models import (
    DOCUMENT_COLUMNS,
    DOCUMENTS_SHEET_NAME,
    SUMMARY_SHEET_NAME,
    DocumentStatus,
)


def write_report_workbook(report: ValidationReport, output_path: Path | str) -> Path:
    """Write the batch summary and one row per document to an Excel workbook."""
    workbook = Workbook()
    sheet = workbook.active
    if sheet is None:
        raise RuntimeError("Workbook active sheet is not available.")
    assert isinstance(sheet, Worksheet)
    sheet.title = SUMMARY_SHEET_NAME
    _write_summary_sheet(sheet, report)
    _write_documents_sheet(workbook.create_sheet(DOCUMENTS_SHEET_NAME), report)

    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(output)
    return output


def _write_summary_sheet(sheet: Worksheet, report: ValidationReport) -> None:
    entries = (
        ("generated_at", datetime.now(UTC).isoformat()),
        ("total_files", report.total_files),
        ("files_with_errors", report.files_with_errors),
        ("total_missing_keys", report.total_missing_keys),
        ("files_with_type_mismatch", len(report.files_with_type_mismatch)),
    )
    for row, (key, value) in enumerate(entries, start=1):
        sheet.cell(row=row, column=1, value=key)
        sheet.cell(row=row, column=2, value=value)


def _write_documents_sheet(sheet: Worksheet, report: ValidationReport) -> None:
    for column_index, name in enumerate(DOCUMENT_COLUMNS, start=1):
        sheet.cell(row=1, column=column_index, value=name).style = "Headline 3"
        sheet.column_dimensions[get_column_letter(column_index)].width = max(
            12, min(len(name) + 6, 40)
        )
    for row, outcome in enumerate(report.outcomes, start=2):
        for column_index, value in enumerate(_document_row(outcome), start=1):
            sheet.cell(row=row, column=column_index, value=value)


def _document_row(outcome: DocumentOutcome) -> tuple[object, ...]:
    status = DocumentStatus.FAILED if outcome.has_error else DocumentStatus.OK
    return (
        str(outcome.path),
        status.value,
        "\n".join(outcome.parse_errors),
        ", ".join(outcome.result.missing_keys),
        ", ".join(outcome.result.structure_mismatches),
        "yes" if outcome.result.type_match else "no",
        str(outcome.json_path) if outcome.json_path else "",
    )
