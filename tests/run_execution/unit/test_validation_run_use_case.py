"""Tests for run execution use-case service."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from openpyxl import load_workbook
from yaml_structure_validator.batch_validation import MessageLevel, ReportMessage
from yaml_structure_validator.run_execution.run_contracts import RunRequest
from yaml_structure_validator.run_execution.validation_run_use_case import (
    RunExecutionError,
    execute_validation_run,
)


def _write_file(path: Path, contents: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(contents, encoding="utf-8")
    return path


def _write_config(tmp_path: Path, **overrides: object) -> Path:
    config = {
        "documents": ["data/*.yml"],
        "keys": ["name", "version"],
        "structure": {"owner": {"email": "string"}},
        "log": "out/validation.log",
    }
    config.update(overrides)
    return _write_file(tmp_path / "config.json", json.dumps(config))


def _write_documents(tmp_path: Path) -> tuple[Path, Path]:
    good = _write_file(
        tmp_path / "data" / "good.yml", "name: svc\nversion: 1\nowner:\n  email: a@b.c\n"
    )
    bad = _write_file(tmp_path / "data" / "bad.yml", "name: svc\n")
    return good, bad


def test_run_validates_configured_documents_and_writes_log(tmp_path: Path) -> None:
    _write_documents(tmp_path)
    config_path = _write_config(tmp_path)
    streamed: list[ReportMessage] = []

    outcome = execute_validation_run(
        RunRequest(config_path=str(config_path)), on_message=streamed.append
    )

    report = outcome.report
    assert report.total_files == 2
    assert report.files_with_errors == 1
    assert report.total_missing_keys == 1
    assert outcome.has_failures is True
    assert outcome.skipped_paths == ()
    assert outcome.log_path == (tmp_path / "out" / "validation.log").resolve()
    assert outcome.log_path.read_text(encoding="utf-8") == "\n".join(report.log_lines)
    assert tuple(streamed) == report.messages


def test_request_values_override_configuration(tmp_path: Path) -> None:
    _write_documents(tmp_path)
    config_path = _write_config(tmp_path)
    override_log = tmp_path / "override.log"

    outcome = execute_validation_run(
        RunRequest(config_path=str(config_path), keys=("name",), log_path=str(override_log))
    )

    assert outcome.report.total_missing_keys == 0
    assert outcome.log_path == override_log
    assert override_log.exists()


def test_run_without_configuration_uses_request_only(tmp_path: Path) -> None:
    good, bad = _write_documents(tmp_path)
    structure_path = _write_file(tmp_path / "shape.yaml", "owner:\n  email: string\n")
    types_path = _write_file(tmp_path / "types.yaml", "version: number\n")

    outcome = execute_validation_run(
        RunRequest(
            document_paths=(str(good), str(bad)),
            structure_path=str(structure_path),
            types_path=str(types_path),
        )
    )

    bad_outcome = outcome.report.outcomes[1]
    assert bad_outcome.result.structure_mismatches == ("owner.email",)
    assert bad_outcome.result.type_match is False
    assert outcome.report.files_with_type_mismatch == (bad,)
    assert outcome.log_path is None


def test_missing_documents_are_skipped_with_warning(tmp_path: Path) -> None:
    good, _ = _write_documents(tmp_path)
    absent = tmp_path / "data" / "absent.yml"
    streamed: list[ReportMessage] = []

    outcome = execute_validation_run(
        RunRequest(document_paths=(str(good), str(absent), str(good))),
        on_message=streamed.append,
    )

    assert outcome.skipped_paths == (absent,)
    assert outcome.report.total_files == 1
    assert streamed[0] == ReportMessage(
        level=MessageLevel.WARNING, text=f'Source file "{absent}" not found.'
    )
    assert streamed[0].text not in outcome.report.log_lines


def test_run_writes_report_workbook_and_json_copies(tmp_path: Path) -> None:
    good, bad = _write_documents(tmp_path)
    config_path = _write_config(tmp_path, write_json=True, report_workbook="out/report.xlsx")

    outcome = execute_validation_run(RunRequest(config_path=str(config_path), workers=2))

    assert outcome.report_workbook_path == (tmp_path / "out" / "report.xlsx").resolve()
    assert "Documents" in load_workbook(outcome.report_workbook_path).sheetnames
    assert good.with_suffix(".json").exists()
    assert bad.with_suffix(".json").exists()


def test_configuration_errors_become_run_errors(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "config.yaml", "workers: 0\n")

    with pytest.raises(RunExecutionError, match="workers must be greater than zero"):
        execute_validation_run(RunRequest(config_path=str(config_path)))


def test_missing_structure_file_becomes_run_error(tmp_path: Path) -> None:
    with pytest.raises(RunExecutionError, match="Structure file not found"):
        execute_validation_run(RunRequest(structure_path=str(tmp_path / "absent.yaml")))


def test_unwritable_log_becomes_run_error(tmp_path: Path) -> None:
    good, _ = _write_documents(tmp_path)
    blocker = _write_file(tmp_path / "blocker", "")

    with pytest.raises(RunExecutionError, match="Failed to write log file"):
        execute_validation_run(
            RunRequest(document_paths=(str(good),), log_path=str(blocker / "validation.log"))
        )


def test_empty_run_has_no_failures() -> None:
    outcome = execute_validation_run(RunRequest())

    assert outcome.report.total_files == 0
    assert outcome.has_failures is False
