"""Document tree values and their type tags."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import date
from enum import Enum
from typing import Any, TypeAlias

DocumentNode: TypeAlias = Any
"""Parsed document value: a mapping, a list, or a scalar."""


class _Missing:
    """Marker for a value that is absent from its parent node."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()


class UnknownTypeNameError(ValueError):
    """Raised when a configured type name is not a recognized type tag."""


class TypeTag(str, Enum):
    """Closed set of runtime type names for document nodes."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    DATE = "date"
    BINARY = "binary"
    OBJECT = "object"
    ARRAY = "array"
    UNDEFINED = "undefined"


_TYPE_NAME_ALIASES: dict[str, TypeTag] = {
    "str": TypeTag.STRING,
    "int": TypeTag.NUMBER,
    "integer": TypeTag.NUMBER,
    "float": TypeTag.NUMBER,
    "bool": TypeTag.BOOLEAN,
    "none": TypeTag.NULL,
    "map": TypeTag.OBJECT,
    "mapping": TypeTag.OBJECT,
    "dict": TypeTag.OBJECT,
    "list": TypeTag.ARRAY,
    "sequence": TypeTag.ARRAY,
    "datetime": TypeTag.DATE,
    "timestamp": TypeTag.DATE,
    "bytes": TypeTag.BINARY,
}


def parse_type_tag(name: object) -> TypeTag:
    """Resolve a configured type name, case-insensitively, to its tag."""
    if isinstance(name, TypeTag):
        return name
    if not isinstance(name, str):
        raise UnknownTypeNameError(f"Type name must be a string, got {name!r}.")
    normalized = name.strip().lower()
    if normalized in _TYPE_NAME_ALIASES:
        return _TYPE_NAME_ALIASES[normalized]
    try:
        return TypeTag(normalized)
    except ValueError as exc:
        raise UnknownTypeNameError(f"Unknown type name: {name!r}") from exc


def type_name_of(node: DocumentNode) -> TypeTag:
    """Return the type tag of a document node."""
    if node is MISSING:
        return TypeTag.UNDEFINED
    if node is None:
        return TypeTag.NULL
    # bool before number: bool is an int subclass
    if isinstance(node, bool):
        return TypeTag.BOOLEAN
    if isinstance(node, (int, float)):
        return TypeTag.NUMBER
    if isinstance(node, str):
        return TypeTag.STRING
    if isinstance(node, date):
        return TypeTag.DATE
    if isinstance(node, (bytes, bytearray)):
        return TypeTag.BINARY
    if isinstance(node, Mapping):
        return TypeTag.OBJECT
    # !!set loads as a set; its members are treated like list elements
    if isinstance(node, (Sequence, set, frozenset)):
        return TypeTag.ARRAY
    raise TypeError(f"Unsupported document node type: {type(node).__name__}")


def has_own_key(node: DocumentNode, key: str) -> bool:
    """Return True when a mapping holds key, or a list holds the index key."""
    return child_of(node, key) is not MISSING


def child_of(node: DocumentNode, key: str) -> DocumentNode:
    """Return the child at key, or MISSING when the node does not hold it."""
    if isinstance(node, Mapping):
        actual_key = _mapping_key(node, key)
        return MISSING if actual_key is MISSING else node[actual_key]
    if _is_sequence(node):
        index = _as_index(key, len(node))
        return MISSING if index is None else node[index]
    return MISSING


def _is_sequence(node: DocumentNode) -> bool:
    return isinstance(node, Sequence) and not isinstance(node, (str, bytes, bytearray))


def _as_index(key: str, length: int) -> int | None:
    if not key.isdigit():
        return None
    index = int(key)
    return index if index < length else None


def _mapping_key(node: Mapping[Any, Any], key: str) -> Any:
    # YAML allows non-string keys such as `1:` or `true:`; they are addressed by their text.
    if key in node:
        return key
    for candidate in node:
        if not isinstance(candidate, str) and key_text(candidate) == key:
            return candidate
    return MISSING


def key_text(key: Any) -> str:
    """Return the text a mapping key is addressed by in paths and key lists."""
    if isinstance(key, bool):
        return "true" if key else "false"
    if key is None:
        return "null"
    return str(key)
