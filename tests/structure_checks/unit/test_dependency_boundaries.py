"""Boundary tests for the validation core."""

from __future__ import annotations

from pathlib import Path


def _project_root() -> Path:
    return Path(__file__).resolve().parents[3]


def test_validation_core_does_not_import_output_libraries() -> None:
    package_dir = _project_root() / "src" / "yaml_structure_validator"
    core_modules = (
        *sorted((package_dir / "structure_checks").glob("*.py")),
        *sorted((package_dir / "document_model").glob("*.py")),
        package_dir / "batch_validation" / "batch_validator.py",
        package_dir / "batch_validation" / "validation_outcomes.py",
    )
    forbidden_import_fragments = ("import click", "from click", "print(")

    for module_path in core_modules:
        text = module_path.read_text(encoding="utf-8")
        for fragment in forbidden_import_fragments:
            assert fragment not in text, f"Forbidden core dependency in {module_path}: {fragment}"
