"""Results writing domain exports."""

from .document_export import json_output_path, write_json_document
from .log_writer import write_log
from .report_models import DocumentStatus

__all__ = [
    "DocumentStatus",
    "json_output_path",
    "write_json_document",
    "write_log",
]
