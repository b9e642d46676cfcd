"""Recursive structure matching of documents against shape templates."""

from __future__ import annotations

from yaml_structure_validator.document_model import (
    MISSING,
    DocumentNode,
    TypeTag,
    child_of,
    type_name_of,
)

from .shape_templates import ArrayTemplate, MapTemplate, ShapeTemplate, TypeLeaf


def validate_structure(
    doc: DocumentNode, template: MapTemplate, parent_path: str = ""
) -> list[str]:
    """Return the dotted paths where doc does not follow template.

    Every element of a list is checked against the element template under the
    list's own path, so mismatches of sibling elements share one path
    (``items.id``, not ``items.0.id``) and repeat once per failing element.
    Paths are reported in template key order, then element order.
    """
    mismatches: list[str] = []
    for key, entry in template.entries:
        current = _join_path(parent_path, key)
        mismatches.extend(_match_node(child_of(doc, key), entry, current))
    return mismatches


def _match_node(node: DocumentNode, template: ShapeTemplate, path: str) -> list[str]:
    if isinstance(template, MapTemplate):
        return validate_structure(node, template, path)
    if isinstance(template, ArrayTemplate):
        if node is MISSING or type_name_of(node) is not TypeTag.ARRAY:
            return [path]
        mismatches: list[str] = []
        for element in node:
            mismatches.extend(_match_node(element, template.element, path))
        return mismatches
    return [] if _matches_leaf(node, template) else [path]


def _matches_leaf(node: DocumentNode, leaf: TypeLeaf) -> bool:
    return node is not MISSING and type_name_of(node) is leaf.tag


def _join_path(parent_path: str, key: str) -> str:
    return f"{parent_path}.{key}" if parent_path else key
