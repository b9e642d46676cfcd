"""Configuration loader tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from yaml_structure_validator.configuration.loader import (
    ConfigurationError,
    load_configuration,
    load_structure_file,
    resolve_document_patterns,
)
from yaml_structure_validator.document_model import TypeTag
from yaml_structure_validator.structure_checks import MapTemplate, TypeLeaf


def _write_file(path: Path, contents: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(contents, encoding="utf-8")
    return path


def test_loads_yaml_configuration_with_defaults(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "config.yaml",
        """
keys: name
structure:
  name: string
  owner:
    email: string
""",
    )

    configuration = load_configuration(config_path)
    options = configuration.options

    assert configuration.path == config_path
    assert configuration.documents == ()
    assert options.keys == ("name",)
    assert options.structure is not None
    assert [key for key, _ in options.structure.entries] == ["name", "owner"]
    assert options.types is None
    assert options.write_json is False
    assert options.log_path is None
    assert options.report_workbook_path is None
    assert options.workers == 1
    assert options.yaml.allow_duplicate_keys is False
    assert options.yaml.on_warning is None


def test_loads_json_configuration_with_all_sections(tmp_path: Path) -> None:
    _write_file(tmp_path / "data" / "a.yml", "a: 1\n")
    _write_file(tmp_path / "data" / "nested" / "b.yml", "b: 1\n")
    _write_file(tmp_path / "data" / "ignored.txt", "")
    config_path = _write_file(
        tmp_path / "config.json",
        json.dumps(
            {
                "documents": ["data/**/*.yml", "extra/listed.yml"],
                "keys": ["name", "version"],
                "types": {"name": "string", "version": "number"},
                "write_json": True,
                "log": "out/validation.log",
                "report_workbook": "out/report.xlsx",
                "workers": 3,
                "yaml": {"allow_duplicate_keys": True},
            }
        ),
    )

    configuration = load_configuration(config_path)
    options = configuration.options
    base = tmp_path.resolve()

    assert configuration.documents == (
        base / "data" / "a.yml",
        base / "data" / "nested" / "b.yml",
        base / "extra" / "listed.yml",
    )
    assert options.keys == ("name", "version")
    assert options.types == {"name": TypeTag.STRING, "version": TypeTag.NUMBER}
    assert options.write_json is True
    assert options.log_path == base / "out" / "validation.log"
    assert options.report_workbook_path == base / "out" / "report.xlsx"
    assert options.workers == 3
    assert options.yaml.allow_duplicate_keys is True


def test_structure_and_types_can_reference_files(tmp_path: Path) -> None:
    _write_file(tmp_path / "shape.yaml", "name: string\n")
    _write_file(tmp_path / "types.json", json.dumps({"name": "string"}))
    config_path = _write_file(
        tmp_path / "config.yaml", "structure: shape.yaml\ntypes: types.json\n"
    )

    options = load_configuration(config_path).options

    assert options.structure == MapTemplate(entries=(("name", TypeLeaf(tag=TypeTag.STRING)),))
    assert options.types == {"name": TypeTag.STRING}


def test_empty_configuration_disables_every_check(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "config.yaml", "")

    options = load_configuration(config_path).options

    assert options.keys is None
    assert options.structure is None
    assert options.types is None


def test_false_values_disable_checks(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "config.yaml", "keys: false\nstructure: false\ntypes: false\nlog: false\n"
    )

    options = load_configuration(config_path).options

    assert options.keys is None
    assert options.structure is None
    assert options.types is None
    assert options.log_path is None


def test_missing_configuration_file_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Configuration file not found"):
        load_configuration(tmp_path / "absent.yaml")


def test_malformed_configuration_file_is_rejected(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "config.yaml", "keys: [name\n")

    with pytest.raises(ConfigurationError, match="Failed to parse configuration file"):
        load_configuration(config_path)


def test_non_mapping_root_is_rejected(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "config.yaml", "- name\n")

    with pytest.raises(ConfigurationError, match="Configuration root must be a mapping"):
        load_configuration(config_path)


@pytest.mark.parametrize(
    ("contents", "message"),
    [
        ("keys: [1]\n", "keys entries must be strings"),
        ("keys: 5\n", "keys must be a string or list of strings"),
        ("structure:\n  tags: [string, number]\n", "structure.tags"),
        ("structure:\n  name: text\n", "Unknown type name"),
        ("types:\n  name: text\n", "types.name"),
        ("types: [name]\n", "must be a mapping"),
        ("write_json: yes please\n", "write_json must be a boolean"),
        ("workers: 0\n", "workers must be greater than zero"),
        ("workers: true\n", "workers must be an integer"),
        ("log: 3\n", "log must be a file path"),
        ("yaml: strict\n", "Configuration section 'yaml' must be a mapping"),
        ("structure: absent.yaml\n", "Structure file not found"),
    ],
)
def test_invalid_entries_are_rejected(tmp_path: Path, contents: str, message: str) -> None:
    config_path = _write_file(tmp_path / "config.yaml", contents)

    with pytest.raises(ConfigurationError, match=message):
        load_configuration(config_path)


def test_structure_file_root_must_be_mapping(tmp_path: Path) -> None:
    structure_path = _write_file(tmp_path / "shape.yaml", "- string\n")

    with pytest.raises(ConfigurationError, match="Structure root must be a mapping"):
        load_structure_file(structure_path)


def test_resolve_document_patterns_keeps_relative_paths_without_base(tmp_path: Path) -> None:
    assert resolve_document_patterns(["docs/a.yml", "b.yml"]) == (
        Path("docs/a.yml"),
        Path("b.yml"),
    )
