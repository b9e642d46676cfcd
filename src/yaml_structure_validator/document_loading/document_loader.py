"""YAML document loading with parser warning capture."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from yaml_structure_validator.document_model import DocumentNode

_MERGE_TAG = "tag:yaml.org,2002:merge"


class DocumentParseError(Exception):
    """Raised when a document is not well-formed YAML."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path
        self.message = message


@dataclass(frozen=True)
class LoadedDocument:
    """Parsed document together with the warnings raised while parsing it."""

    path: Path
    node: DocumentNode
    warnings: tuple[str, ...]


class _WarningSafeLoader(yaml.SafeLoader):  # pylint: disable=too-many-ancestors
    """Safe loader that records duplicated mapping keys instead of dropping them silently."""

    def __init__(self, stream: str, *, report_duplicate_keys: bool) -> None:
        super().__init__(stream)
        self.warnings: list[str] = []
        self._report_duplicate_keys = report_duplicate_keys

    def construct_mapping(self, node: yaml.MappingNode, deep: bool = False) -> dict[Any, Any]:
        if self._report_duplicate_keys and isinstance(node, yaml.MappingNode):
            self._record_duplicate_keys(node)
        return super().construct_mapping(node, deep=deep)

    def _record_duplicate_keys(self, node: yaml.MappingNode) -> None:
        seen: set[Any] = set()
        for key_node, _ in node.value:
            if key_node.tag == _MERGE_TAG or not isinstance(key_node, yaml.ScalarNode):
                continue
            key = self.construct_object(key_node)
            if key in seen:
                mark = key_node.start_mark
                self.warnings.append(
                    f"duplicated mapping key {key!r} at line {mark.line + 1}, "
                    f"column {mark.column + 1}"
                )
            seen.add(key)


def load_document(path: Path | str, *, allow_duplicate_keys: bool = False) -> LoadedDocument:
    """Read and parse the first YAML document of a file.

    Args:
      path: Document file path.
      allow_duplicate_keys: Skip the duplicated-key warnings; the last value wins either way.

    Returns:
      The parsed node, ``None`` for an empty file, and the parser warnings.

    Raises:
      DocumentParseError: If the file is not well-formed YAML.
      OSError: If the file cannot be read.
    """
    document_path = Path(path)
    text = document_path.read_text(encoding="utf-8")
    loader = _WarningSafeLoader(text, report_duplicate_keys=not allow_duplicate_keys)
    try:
        node = loader.get_data() if loader.check_data() else None
    except yaml.YAMLError as exc:
        raise DocumentParseError(document_path, str(exc)) from exc
    finally:
        loader.dispose()
    return LoadedDocument(path=document_path, node=node, warnings=tuple(loader.warnings))
