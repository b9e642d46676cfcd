"""Batch validation entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class MessageLevel(str, Enum):
    """Severity of one reported message."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class ReportMessage:
    """One line of the validation message log."""

    level: MessageLevel
    text: str
    is_word_list: bool = False

    @staticmethod
    def error(text: str) -> ReportMessage:
        return ReportMessage(level=MessageLevel.ERROR, text=text)

    @staticmethod
    def warning(text: str) -> ReportMessage:
        return ReportMessage(level=MessageLevel.WARNING, text=text)

    @staticmethod
    def info(text: str) -> ReportMessage:
        return ReportMessage(level=MessageLevel.INFO, text=text)

    @staticmethod
    def word_list(words: tuple[str, ...]) -> ReportMessage:
        return ReportMessage(level=MessageLevel.ERROR, text=", ".join(words), is_word_list=True)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of the configured checks for one document."""

    missing_keys: tuple[str, ...] = ()
    structure_mismatches: tuple[str, ...] = ()
    type_match: bool = True


@dataclass(frozen=True)
class DocumentOutcome:
    """Everything reported for one document of the batch."""

    path: Path
    result: ValidationResult
    parse_errors: tuple[str, ...]
    messages: tuple[ReportMessage, ...]
    json_path: Path | None = None

    @property
    def has_error(self) -> bool:
        """Return True when parsing or any configured check failed."""
        return bool(
            self.parse_errors
            or self.result.missing_keys
            or self.result.structure_mismatches
            or not self.result.type_match
        )

    @property
    def failure_flag(self) -> int:
        return 1 if self.has_error else 0


@dataclass(frozen=True)
class ValidationReport:
    """Aggregate outcome of one batch, in input order."""

    total_files: int
    files_with_errors: int
    total_missing_keys: int
    files_with_type_mismatch: tuple[Path, ...]
    outcomes: tuple[DocumentOutcome, ...]
    summary: tuple[ReportMessage, ...]

    @property
    def has_failures(self) -> bool:
        """Return True when at least one document failed."""
        return self.files_with_errors > 0

    @property
    def messages(self) -> tuple[ReportMessage, ...]:
        """Return document messages in input order followed by the summary."""
        return (
            tuple(message for outcome in self.outcomes for message in outcome.messages)
            + self.summary
        )

    @property
    def log_lines(self) -> tuple[str, ...]:
        """Return every message text in reporting order."""
        return tuple(message.text for message in self.messages)
