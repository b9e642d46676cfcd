"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from yaml_structure_validator.batch_validation.validation_outcomes import ValidationReport


@dataclass(frozen=True)
class RunRequest:  # pylint: disable=too-many-instance-attributes
    """Input contract for executing one run.

    Values given here take precedence over the configuration file.
    """

    config_path: str | None = None
    document_paths: tuple[str, ...] = ()
    keys: tuple[str, ...] = ()
    structure_path: str | None = None
    types_path: str | None = None
    write_json: bool = False
    log_path: str | None = None
    report_workbook_path: str | None = None
    workers: int | None = None
    allow_duplicate_keys: bool = False


@dataclass(frozen=True)
class RunOutcome:
    """Output contract for one completed run."""

    report: ValidationReport
    skipped_paths: tuple[Path, ...]
    log_path: Path | None
    report_workbook_path: Path | None

    @property
    def has_failures(self) -> bool:
        return self.report.has_failures
