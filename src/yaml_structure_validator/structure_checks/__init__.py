"""Structure check exports."""

from .key_checker import check_keys
from .shape_matcher import validate_structure
from .shape_templates import (
    ArrayTemplate,
    MapTemplate,
    ShapeTemplate,
    ShapeTemplateError,
    TypeLeaf,
    infer_shape_template,
    parse_shape_template,
    shape_template_to_data,
)
from .type_matcher import TypeSchema, TypeSchemaError, check_types, parse_type_schema

__all__ = [
    "ArrayTemplate",
    "MapTemplate",
    "ShapeTemplate",
    "ShapeTemplateError",
    "TypeLeaf",
    "TypeSchema",
    "TypeSchemaError",
    "check_keys",
    "check_types",
    "infer_shape_template",
    "parse_shape_template",
    "parse_type_schema",
    "shape_template_to_data",
    "validate_structure",
]
