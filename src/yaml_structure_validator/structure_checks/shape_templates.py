"""Shape template variants and their construction from configuration data."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, TypeAlias

from yaml_structure_validator.document_model import (
    DocumentNode,
    TypeTag,
    UnknownTypeNameError,
    key_text,
    parse_type_tag,
    type_name_of,
)


class ShapeTemplateError(Exception):
    """Raised when structure configuration cannot be turned into a template."""


@dataclass(frozen=True)
class TypeLeaf:
    """Expected type tag of a single value."""

    tag: TypeTag


@dataclass(frozen=True)
class ArrayTemplate:
    """Template applied to every element of a list."""

    element: ShapeTemplate


@dataclass(frozen=True)
class MapTemplate:
    """Templates for named children, in configured order."""

    entries: tuple[tuple[str, ShapeTemplate], ...]


ShapeTemplate: TypeAlias = MapTemplate | ArrayTemplate | TypeLeaf


def parse_shape_template(raw: Any) -> MapTemplate:
    """Build a shape template from plain YAML/JSON structure data.

    Args:
      raw: Mapping of key to a type name, a one-element list, or a nested mapping.

    Returns:
      The root map template.

    Raises:
      ShapeTemplateError: If the root is not a mapping, a list does not hold exactly
        one template, or a type name is unknown.
    """
    if not isinstance(raw, Mapping):
        raise ShapeTemplateError("Structure template root must be a mapping.")
    return _parse_map(raw, path="")


def _parse_map(raw: Mapping[Any, Any], *, path: str) -> MapTemplate:
    entries: list[tuple[str, ShapeTemplate]] = []
    for key, value in raw.items():
        name = key_text(key)
        child_path = name if not path else f"{path}.{name}"
        template = _parse_entry(value, path=child_path)
        if template is not None:
            entries.append((name, template))
    return MapTemplate(entries=tuple(entries))


def _parse_entry(value: Any, *, path: str) -> ShapeTemplate | None:
    if isinstance(value, str):
        try:
            return TypeLeaf(tag=parse_type_tag(value))
        except UnknownTypeNameError as exc:
            raise ShapeTemplateError(f"structure.{path}: {exc}") from exc
    if isinstance(value, Mapping):
        return _parse_map(value, path=path)
    if isinstance(value, Sequence):
        if len(value) != 1:
            raise ShapeTemplateError(
                f"structure.{path}: list templates must contain exactly one element template."
            )
        element = _parse_entry(value[0], path=path)
        if element is None:
            raise ShapeTemplateError(f"structure.{path}: list element template is not usable.")
        return ArrayTemplate(element=element)
    # null, numbers and booleans carry no requirement
    return None


def infer_shape_template(node: DocumentNode) -> ShapeTemplate:
    """Derive the template a document conforms to."""
    if isinstance(node, Mapping):
        return MapTemplate(
            entries=tuple(
                (key_text(key), infer_shape_template(value)) for key, value in node.items()
            )
        )
    tag = type_name_of(node)
    if tag is TypeTag.ARRAY:
        element_templates = [infer_shape_template(element) for element in node]
        if element_templates and all(
            template == element_templates[0] for template in element_templates
        ):
            return ArrayTemplate(element=element_templates[0])
        return TypeLeaf(tag=TypeTag.ARRAY)
    return TypeLeaf(tag=tag)


def shape_template_to_data(template: ShapeTemplate) -> Any:
    """Render a template back into plain structure configuration data."""
    if isinstance(template, MapTemplate):
        return {key: shape_template_to_data(child) for key, child in template.entries}
    if isinstance(template, ArrayTemplate):
        return [shape_template_to_data(template.element)]
    return template.tag.value
