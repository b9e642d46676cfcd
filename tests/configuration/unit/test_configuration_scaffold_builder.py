"""Configuration scaffold builder tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from yaml_structure_validator.configuration.config_scaffold_builder import (
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from yaml_structure_validator.configuration.loader import load_configuration


def test_build_placeholder_configuration_contains_all_supported_sections() -> None:
    scaffold = build_placeholder_configuration()

    assert "Validation configuration" in scaffold
    for section in ("documents:", "keys:", "structure:", "types:", "write_json:", "log:"):
        assert section in scaffold
    assert "report_workbook:" in scaffold
    assert "workers:" in scaffold
    assert "allow_duplicate_keys:" in scaffold


def test_write_placeholder_configuration_writes_loadable_file(tmp_path: Path) -> None:
    output_path = tmp_path / "yaml-validator.yaml"

    written_path = write_placeholder_configuration(output_path)
    configuration = load_configuration(written_path)

    assert written_path == output_path.resolve()
    assert configuration.options.keys == ("name", "version")
    assert configuration.options.structure is not None
    assert configuration.options.types is None
    assert configuration.documents == ()


def test_write_placeholder_configuration_fails_when_file_exists(tmp_path: Path) -> None:
    output_path = tmp_path / "yaml-validator.yaml"
    output_path.write_text("existing", encoding="utf-8")

    with pytest.raises(FileExistsError):
        write_placeholder_configuration(output_path)
