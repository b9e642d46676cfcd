"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import (
    ConfigurationError,
    load_configuration,
    load_structure_file,
    load_types_file,
    resolve_document_patterns,
)
from .runtime_settings import (
    ValidatorConfiguration,
    ValidatorOptions,
    WarningCallback,
    YamlParserOptions,
)

__all__ = [
    "ValidatorConfiguration",
    "ValidatorOptions",
    "WarningCallback",
    "YamlParserOptions",
    "ConfigurationError",
    "load_configuration",
    "load_structure_file",
    "load_types_file",
    "resolve_document_patterns",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
