"""Configuration domain entities."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from yaml_structure_validator.structure_checks import MapTemplate, TypeSchema

WarningCallback = Callable[[str, Path], None]


@dataclass(frozen=True)
class YamlParserOptions:
    """Options passed through to document parsing."""

    on_warning: WarningCallback | None = None
    allow_duplicate_keys: bool = False


@dataclass(frozen=True)
class ValidatorOptions:  # pylint: disable=too-many-instance-attributes
    """Requirement sets and output switches for one validation run.

    Every requirement set is optional; ``None`` disables the matching check.
    """

    keys: tuple[str, ...] | None = None
    structure: MapTemplate | None = None
    types: TypeSchema | None = None
    write_json: bool = False
    log_path: Path | None = None
    report_workbook_path: Path | None = None
    workers: int = 1
    yaml: YamlParserOptions = field(default_factory=YamlParserOptions)


@dataclass(frozen=True)
class ValidatorConfiguration:
    """Top-level configuration aggregate loaded from a configuration file."""

    path: Path
    documents: tuple[Path, ...]
    options: ValidatorOptions
