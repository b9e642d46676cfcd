"""Batch validation service."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Sequence
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from pathlib import Path

from yaml_structure_validator.configuration.runtime_settings import ValidatorOptions
from yaml_structure_validator.document_loading import (
    DocumentParseError,
    LoadedDocument,
    load_document,
)
from yaml_structure_validator.document_model import DocumentNode
from yaml_structure_validator.results_writing.document_export import write_json_document
from yaml_structure_validator.structure_checks import check_keys, check_types, validate_structure

from .validation_outcomes import DocumentOutcome, ReportMessage, ValidationReport, ValidationResult

logger = logging.getLogger(__name__)

DocumentLoader = Callable[..., LoadedDocument]
DocumentWriter = Callable[[Path, DocumentNode], Path]
MessageCallback = Callable[[ReportMessage], None]


def validate_documents(
    paths: Sequence[Path | str],
    options: ValidatorOptions,
    *,
    document_loader: DocumentLoader | None = None,
    document_writer: DocumentWriter | None = None,
    on_message: MessageCallback | None = None,
) -> ValidationReport:
    """Validate every document against the configured requirement sets.

    Documents are independent: a failing or unparsable document never stops the
    batch. Messages reach ``on_message`` document by document in input order,
    including when ``options.workers`` validates documents concurrently.
    """
    check = partial(
        check_document,
        options=options,
        document_loader=document_loader,
        document_writer=document_writer,
    )
    document_paths = [Path(path) for path in paths]

    outcomes: list[DocumentOutcome] = []
    for outcome in _run_checks(check, document_paths, options.workers):
        outcomes.append(outcome)
        if on_message:
            for message in outcome.messages:
                on_message(message)

    report = summarize_outcomes(outcomes)
    if on_message:
        for message in report.summary:
            on_message(message)
    return report


def _run_checks(
    check: Callable[[Path], DocumentOutcome], paths: list[Path], workers: int
) -> Iterator[DocumentOutcome]:
    if workers <= 1 or len(paths) <= 1:
        for path in paths:
            yield check(path)
        return
    with ThreadPoolExecutor(max_workers=workers) as executor:
        # map() yields in submission order regardless of completion order
        yield from executor.map(check, paths)


def check_document(
    path: Path,
    *,
    options: ValidatorOptions,
    document_loader: DocumentLoader | None = None,
    document_writer: DocumentWriter | None = None,
) -> DocumentOutcome:
    """Load one document and run the configured checks on it."""
    resolved_loader = document_loader or load_document
    resolved_writer = document_writer or write_json_document
    messages: list[ReportMessage] = []

    logger.info("Reading %s", path)
    try:
        loaded = resolved_loader(path, allow_duplicate_keys=options.yaml.allow_duplicate_keys)
    except DocumentParseError as exc:
        messages.append(ReportMessage.error(f"{path} could not be parsed: {exc.message}"))
        return DocumentOutcome(
            path=path,
            result=ValidationResult(),
            parse_errors=(exc.message,),
            messages=tuple(messages),
        )

    for warning in loaded.warnings:
        messages.append(ReportMessage.error(f"{path}: {warning}"))
        if options.yaml.on_warning is not None:
            options.yaml.on_warning(warning, path)

    json_path = resolved_writer(path, loaded.node) if options.write_json else None
    result = _check_node(path, loaded.node, options, messages)
    return DocumentOutcome(
        path=path,
        result=result,
        parse_errors=loaded.warnings,
        messages=tuple(messages),
        json_path=json_path,
    )


def _check_node(
    path: Path,
    node: DocumentNode,
    options: ValidatorOptions,
    messages: list[ReportMessage],
) -> ValidationResult:
    structure_mismatches: tuple[str, ...] = ()
    if options.structure is not None:
        structure_mismatches = tuple(validate_structure(node, options.structure))
        if structure_mismatches:
            messages.append(
                ReportMessage.error(f"{path} is not following the correct structure, missing:")
            )
            messages.append(ReportMessage.word_list(structure_mismatches))

    missing_keys: tuple[str, ...] = ()
    if options.keys:
        missing_keys = tuple(check_keys(node, options.keys))
        if missing_keys:
            messages.append(ReportMessage.error(f"{path} is missing the following keys: "))
            messages.append(ReportMessage.word_list(missing_keys))

    type_match = True
    if options.types is not None:
        type_match = check_types(node, options.types)
        if not type_match:
            messages.append(ReportMessage.error(f"{path} is not matching the type requirements"))

    return ValidationResult(
        missing_keys=missing_keys,
        structure_mismatches=structure_mismatches,
        type_match=type_match,
    )


def summarize_outcomes(outcomes: Iterable[DocumentOutcome]) -> ValidationReport:
    """Fold per-document outcomes into the batch report; an empty batch has no failures."""
    collected = tuple(outcomes)
    files_with_errors = sum(outcome.failure_flag for outcome in collected)
    total_missing_keys = sum(len(outcome.result.missing_keys) for outcome in collected)
    mismatched_types = tuple(outcome.path for outcome in collected if not outcome.result.type_match)

    summary = _summary_messages(
        total_files=len(collected),
        files_with_errors=files_with_errors,
        total_missing_keys=total_missing_keys,
        type_mismatch_count=len(mismatched_types),
    )
    return ValidationReport(
        total_files=len(collected),
        files_with_errors=files_with_errors,
        total_missing_keys=total_missing_keys,
        files_with_type_mismatch=mismatched_types,
        outcomes=collected,
        summary=summary,
    )


def _summary_messages(
    *,
    total_files: int,
    files_with_errors: int,
    total_missing_keys: int,
    type_mismatch_count: int,
) -> tuple[ReportMessage, ...]:
    messages: list[ReportMessage] = []
    if type_mismatch_count > 0:
        messages.append(
            ReportMessage.error(f"Type mismatching found in total of {type_mismatch_count} files")
        )
    else:
        messages.append(ReportMessage.info("No mismatching type requirements found."))

    if total_missing_keys == 0:
        messages.append(ReportMessage.info("All done. No missing keys found. Thank you."))
    else:
        messages.append(ReportMessage.error(f"Found missing keys, total of: {total_missing_keys}"))

    messages.append(
        ReportMessage.info(
            f"Out of {total_files} files, {files_with_errors} have validation errors"
        )
    )
    return tuple(messages)
