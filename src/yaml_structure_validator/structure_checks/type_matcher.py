"""Pass/fail type matching of documents against a type schema."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeAlias

from yaml_structure_validator.document_model import (
    DocumentNode,
    TypeTag,
    UnknownTypeNameError,
    child_of,
    key_text,
    parse_type_tag,
    type_name_of,
)

TypeSchema: TypeAlias = Mapping[str, "TypeTag | TypeSchema"]


class TypeSchemaError(Exception):
    """Raised when type configuration is not a mapping of key to type name."""


def parse_type_schema(raw: Any, *, path: str = "types") -> TypeSchema:
    """Build a type schema from configuration data, resolving every type name."""
    if not isinstance(raw, Mapping):
        raise TypeSchemaError(f"{path} must be a mapping of key to type name.")
    schema: dict[str, TypeTag | TypeSchema] = {}
    for key, value in raw.items():
        child_path = f"{path}.{key}"
        if isinstance(value, Mapping):
            schema[key_text(key)] = parse_type_schema(value, path=child_path)
            continue
        try:
            schema[key_text(key)] = parse_type_tag(value)
        except UnknownTypeNameError as exc:
            raise TypeSchemaError(f"{child_path}: {exc}") from exc
    return schema


def check_types(doc: DocumentNode, schema: TypeSchema) -> bool:
    """Return True when every key of schema is present in doc with the declared type.

    A nested schema mapping requires an object value that matches it in turn.
    An empty schema declares nothing, so any document passes it.
    """
    if not schema:
        return True
    if type_name_of(doc) is not TypeTag.OBJECT:
        return False
    for key, expected in schema.items():
        value = child_of(doc, key)
        if isinstance(expected, Mapping):
            if not check_types(value, expected):
                return False
        elif type_name_of(value) is not expected:
            return False
    return True
