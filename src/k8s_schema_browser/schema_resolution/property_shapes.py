"""Classification of raw property schema fragments."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any


class PropertyShape(str, Enum):
    """Recognized raw property shapes, listed in classification precedence."""

    REFERENCE = "reference"
    ARRAY_OF_REFERENCE = "array_of_reference"
    ARRAY_OF_PRIMITIVE = "array_of_primitive"
    INLINE_OBJECT = "inline_object"
    MAP = "map"
    PRIMITIVE = "primitive"


def classify_property_shape(schema: Any) -> PropertyShape:
    """Map a raw property schema to exactly one shape; first matching rule wins."""
    if not isinstance(schema, Mapping):
        return PropertyShape.PRIMITIVE
    if reference_of(schema):
        return PropertyShape.REFERENCE
    items = schema.get("items")
    if schema.get("type") == "array" and (isinstance(items, Mapping) or items):
        if reference_of(items):
            return PropertyShape.ARRAY_OF_REFERENCE
        return PropertyShape.ARRAY_OF_PRIMITIVE
    if schema.get("type") == "object" and isinstance(schema.get("properties"), Mapping):
        return PropertyShape.INLINE_OBJECT
    additional = schema.get("additionalProperties")
    if additional is not None and additional is not False:
        return PropertyShape.MAP
    return PropertyShape.PRIMITIVE


def reference_of(node: Any) -> str | None:
    """Return the raw `$ref` value of a fragment, if it carries a non-empty one."""
    if not isinstance(node, Mapping):
        return None
    ref = node.get("$ref")
    if isinstance(ref, str) and ref:
        return ref
    return None
