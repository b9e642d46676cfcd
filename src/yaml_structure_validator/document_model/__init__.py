"""Document model exports."""

from .node_types import (
    MISSING,
    DocumentNode,
    TypeTag,
    UnknownTypeNameError,
    child_of,
    has_own_key,
    key_text,
    parse_type_tag,
    type_name_of,
)

__all__ = [
    "DocumentNode",
    "MISSING",
    "TypeTag",
    "UnknownTypeNameError",
    "child_of",
    "has_own_key",
    "key_text",
    "parse_type_tag",
    "type_name_of",
]
