"""Required top-level key checks."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from yaml_structure_validator.document_model import DocumentNode, has_own_key


def check_keys(doc: DocumentNode, keys: str | Iterable[str]) -> list[str]:
    """Return the required keys that doc does not hold, in the given order."""
    required = [keys] if isinstance(keys, str) else list(keys)
    if not isinstance(doc, Mapping):
        return required
    return [key for key in required if not has_own_key(doc, key)]
