"""Run execution use-case service."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace
from pathlib import Path

from yaml_structure_validator.batch_validation import (
    ReportMessage,
    ValidationReport,
    validate_documents,
)
from yaml_structure_validator.configuration import (
    ConfigurationError,
    ValidatorOptions,
    load_configuration,
    load_structure_file,
    load_types_file,
    resolve_document_patterns,
)
from yaml_structure_validator.results_writing import write_log
from yaml_structure_validator.results_writing.report_workbook_writer import (
    write_report_workbook,
)

from .run_contracts import RunOutcome, RunRequest

logger = logging.getLogger(__name__)

MessageCallback = Callable[[ReportMessage], None]


class RunExecutionError(Exception):
    """Raised when a run use case cannot be completed."""


def execute_validation_run(
    request: RunRequest,
    *,
    on_message: MessageCallback | None = None,
) -> RunOutcome:
    """Execute one validation run and persist the configured outputs."""
    options, configured_documents = _resolve_run_inputs(request)
    documents, skipped_paths = _select_existing_documents(
        (*configured_documents, *resolve_document_patterns(request.document_paths)),
        on_message=on_message,
    )

    try:
        report = validate_documents(documents, options, on_message=on_message)
    except OSError as exc:
        raise RunExecutionError(str(exc)) from exc

    log_path = _persist_log(report, options.log_path)
    workbook_path = _persist_workbook(report, options.report_workbook_path)
    return RunOutcome(
        report=report,
        skipped_paths=skipped_paths,
        log_path=log_path,
        report_workbook_path=workbook_path,
    )


def _resolve_run_inputs(request: RunRequest) -> tuple[ValidatorOptions, tuple[Path, ...]]:
    try:
        if request.config_path:
            configuration = load_configuration(request.config_path)
            options, documents = configuration.options, configuration.documents
        else:
            options, documents = ValidatorOptions(), ()
        return _apply_overrides(options, request), documents
    except ConfigurationError as exc:
        raise RunExecutionError(str(exc)) from exc


def _apply_overrides(options: ValidatorOptions, request: RunRequest) -> ValidatorOptions:
    yaml_options = options.yaml
    if request.allow_duplicate_keys:
        yaml_options = replace(yaml_options, allow_duplicate_keys=True)
    return replace(
        options,
        keys=request.keys or options.keys,
        structure=(
            load_structure_file(request.structure_path)
            if request.structure_path
            else options.structure
        ),
        types=load_types_file(request.types_path) if request.types_path else options.types,
        write_json=request.write_json or options.write_json,
        log_path=Path(request.log_path) if request.log_path else options.log_path,
        report_workbook_path=(
            Path(request.report_workbook_path)
            if request.report_workbook_path
            else options.report_workbook_path
        ),
        workers=request.workers or options.workers,
        yaml=yaml_options,
    )


def _select_existing_documents(
    candidates: tuple[Path, ...],
    *,
    on_message: MessageCallback | None,
) -> tuple[tuple[Path, ...], tuple[Path, ...]]:
    documents: list[Path] = []
    skipped: list[Path] = []
    seen: set[Path] = set()
    for candidate in candidates:
        if candidate in seen:
            continue
        seen.add(candidate)
        if candidate.is_file():
            documents.append(candidate)
            continue
        skipped.append(candidate)
        logger.debug('Source file "%s" not found.', candidate)
        if on_message:
            on_message(ReportMessage.warning(f'Source file "{candidate}" not found.'))
    return tuple(documents), tuple(skipped)


def _persist_log(report: ValidationReport, log_path: Path | None) -> Path | None:
    if log_path is None:
        return None
    try:
        return write_log(log_path, report.log_lines)
    except OSError as exc:
        raise RunExecutionError(f"Failed to write log file {log_path}: {exc}") from exc


def _persist_workbook(report: ValidationReport, workbook_path: Path | None) -> Path | None:
    if workbook_path is None:
        return None
    try:
        return write_report_workbook(report, workbook_path)
    except OSError as exc:
        raise RunExecutionError(f"Failed to write report workbook {workbook_path}: {exc}") from exc
