"""Document loading exports."""

from .document_loader import DocumentParseError, LoadedDocument, load_document

__all__ = [
    "DocumentParseError",
    "LoadedDocument",
    "load_document",
]
