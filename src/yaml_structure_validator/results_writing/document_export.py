"""Canonical JSON re-serialization of parsed documents."""

from __future__ import annotations

import base64
import json
from collections.abc import Mapping
from datetime import date
from pathlib import Path
from typing import Any

from yaml_structure_validator.document_model import DocumentNode, key_text


def json_output_path(source_path: Path | str) -> Path:
    """Return the JSON destination for a source document."""
    return Path(source_path).with_suffix(".json")


def write_json_document(source_path: Path | str, node: DocumentNode) -> Path:
    """Write node as two-space-indented JSON next to its source document."""
    destination = json_output_path(source_path)
    text = json.dumps(_to_json_value(node), indent=2, ensure_ascii=False)
    destination.write_text(text, encoding="utf-8")
    return destination


def _to_json_value(node: Any) -> Any:
    if isinstance(node, Mapping):
        return {key_text(key): _to_json_value(value) for key, value in node.items()}
    if isinstance(node, (list, tuple)):
        return [_to_json_value(item) for item in node]
    if isinstance(node, (set, frozenset)):
        return [_to_json_value(item) for item in sorted(node, key=key_text)]
    if isinstance(node, date):
        return node.isoformat()
    if isinstance(node, (bytes, bytearray)):
        return base64.b64encode(node).decode("ascii")
    return node
