"""Configuration loader service."""

from __future__ import annotations

import glob
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from yaml_structure_validator.structure_checks import (
    MapTemplate,
    ShapeTemplateError,
    TypeSchema,
    TypeSchemaError,
    parse_shape_template,
    parse_type_schema,
)

from .runtime_settings import ValidatorConfiguration, ValidatorOptions, YamlParserOptions

_GLOB_CHARACTERS = frozenset("*?[")


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> ValidatorConfiguration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    parsed = _read_mapping_file(path, "Configuration")
    base_path = path.resolve().parent

    documents = _parse_documents(parsed.get("documents"), base_path)
    options = ValidatorOptions(
        keys=_parse_keys(parsed.get("keys")),
        structure=_parse_structure(parsed.get("structure"), base_path),
        types=_parse_types(parsed.get("types"), base_path),
        write_json=_optional_bool(parsed.get("write_json"), "write_json"),
        log_path=_optional_path(parsed.get("log"), "log", base_path),
        report_workbook_path=_optional_path(
            parsed.get("report_workbook"), "report_workbook", base_path
        ),
        workers=_require_positive_int(parsed.get("workers", 1), "workers"),
        yaml=_parse_yaml_section(parsed.get("yaml")),
    )
    return ValidatorConfiguration(path=path, documents=documents, options=options)


def load_structure_file(structure_path: Path | str) -> MapTemplate:
    """Load a shape template from a standalone YAML/JSON file."""
    return _parse_structure_value(_read_mapping_file(Path(structure_path), "Structure"))


def load_types_file(types_path: Path | str) -> TypeSchema:
    """Load a type schema from a standalone YAML/JSON file."""
    return _parse_types_value(_read_mapping_file(Path(types_path), "Types"))


def _read_mapping_file(path: Path, label: str) -> Mapping[str, Any]:
    if not path.exists():
        raise ConfigurationError(f"{label} file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse {label.lower()} file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError(f"{label} root must be a mapping.")
    return parsed


def _parse_documents(value: Any, base_path: Path) -> tuple[Path, ...]:
    return resolve_document_patterns(_normalize_string_sequence(value, "documents"), base_path)


def resolve_document_patterns(
    patterns: Sequence[str], base_path: Path | None = None
) -> tuple[Path, ...]:
    """Expand glob patterns; plain paths are kept even when absent.

    Relative patterns are resolved against base_path, or left relative when it is None.
    """
    documents: list[Path] = []
    for pattern in patterns:
        candidate = Path(pattern) if base_path is None else _resolve_path(base_path, pattern)
        if _GLOB_CHARACTERS.isdisjoint(pattern):
            documents.append(candidate)
            continue
        matches = sorted(glob.glob(str(candidate), recursive=True))
        documents.extend(Path(match) for match in matches)
    return tuple(documents)


def _parse_keys(value: Any) -> tuple[str, ...] | None:
    if value is None or value is False:
        return None
    keys = _normalize_string_sequence(value, "keys")
    return keys or None


def _parse_structure(value: Any, base_path: Path) -> MapTemplate | None:
    if value is None or value is False:
        return None
    if isinstance(value, str):
        return load_structure_file(_resolve_path(base_path, value))
    return _parse_structure_value(value)


def _parse_structure_value(value: Any) -> MapTemplate:
    try:
        return parse_shape_template(value)
    except ShapeTemplateError as exc:
        raise ConfigurationError(str(exc)) from exc


def _parse_types(value: Any, base_path: Path) -> TypeSchema | None:
    if value is None or value is False:
        return None
    if isinstance(value, str):
        return load_types_file(_resolve_path(base_path, value))
    return _parse_types_value(value)


def _parse_types_value(value: Any) -> TypeSchema:
    try:
        return parse_type_schema(value)
    except TypeSchemaError as exc:
        raise ConfigurationError(str(exc)) from exc


def _parse_yaml_section(value: Any) -> YamlParserOptions:
    if value is None or value is False:
        return YamlParserOptions()
    section = _require_mapping(value, "yaml")
    return YamlParserOptions(
        allow_duplicate_keys=_optional_bool(
            section.get("allow_duplicate_keys"), "yaml.allow_duplicate_keys"
        ),
    )


def _normalize_string_sequence(value: Any, field_name: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        stripped = value.strip()
        return (stripped,) if stripped else ()
    if isinstance(value, Sequence):
        normalized = []
        for item in value:
            if not isinstance(item, str):
                raise ConfigurationError(f"{field_name} entries must be strings.")
            stripped = item.strip()
            if stripped:
                normalized.append(stripped)
        return tuple(normalized)
    raise ConfigurationError(f"{field_name} must be a string or list of strings.")


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _optional_bool(value: Any, field_name: str) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a boolean.")
    return value


def _optional_path(value: Any, field_name: str, base_path: Path) -> Path | None:
    if value is None or value is False:
        return None
    if not isinstance(value, str) or not value.strip():
        raise ConfigurationError(f"{field_name} must be a file path.")
    return _resolve_path(base_path, value.strip())


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
