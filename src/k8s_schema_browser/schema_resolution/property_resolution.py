"""Recursive resolution of one property schema into a PropertyInfo tree."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from k8s_schema_browser.definition_naming import extract_ref_name

from .property_models import (
    ARRAY_ITEM_NAME,
    ARRAY_TYPE,
    MAP_TYPE,
    OBJECT_TYPE,
    UNKNOWN_TYPE,
    PropertyInfo,
)
from .property_shapes import PropertyShape, classify_property_shape, reference_of

DEFAULT_MAX_DEPTH = 10


# pylint: disable=too-many-arguments,too-many-positional-arguments
def resolve_property(
    property_name: str,
    schema: Any,
    definitions: Mapping[str, Any],
    required_names: Sequence[str],
    visited_refs: set[str],
    depth: int = 0,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> PropertyInfo:
    """Resolve one property, expanding references until a cycle or `max_depth` is hit.

    `visited_refs` holds the definition names on the current root-to-node path.
    A name is added before descending and removed afterwards, so the same
    definition can be expanded again on a sibling branch.
    """
    shape = classify_property_shape(schema)
    required = property_name in required_names
    description = _description_of(schema)

    if shape is PropertyShape.REFERENCE:
        ref_name = extract_ref_name(reference_of(schema) or "")
        return PropertyInfo(
            name=property_name,
            type=OBJECT_TYPE,
            required=required,
            description=description,
            ref=ref_name,
            properties=_expand_reference(ref_name, definitions, visited_refs, depth, max_depth),
        )

    if shape is PropertyShape.ARRAY_OF_REFERENCE:
        ref_name = extract_ref_name(reference_of(schema["items"]) or "")
        return PropertyInfo(
            name=property_name,
            type=ARRAY_TYPE,
            required=required,
            is_array=True,
            description=description,
            ref=ref_name,
            properties=_expand_reference(ref_name, definitions, visited_refs, depth, max_depth),
        )

    if shape is PropertyShape.ARRAY_OF_PRIMITIVE:
        return PropertyInfo(
            name=property_name,
            type=ARRAY_TYPE,
            required=required,
            is_array=True,
            description=description,
            items=_array_item(schema["items"]),
        )

    if shape is PropertyShape.INLINE_OBJECT:
        return PropertyInfo(
            name=property_name,
            type=OBJECT_TYPE,
            required=required,
            description=description,
            properties=resolve_properties(
                schema, definitions, visited_refs, depth + 1, max_depth
            ),
        )

    if shape is PropertyShape.MAP:
        value_ref = reference_of(schema["additionalProperties"])
        return PropertyInfo(
            name=property_name,
            type=MAP_TYPE,
            required=required,
            description=description,
            ref=extract_ref_name(value_ref) if value_ref else None,
        )

    return PropertyInfo(
        name=property_name,
        type=_type_of(schema) or UNKNOWN_TYPE,
        required=required,
        description=description,
    )


def resolve_properties(
    definition: Mapping[str, Any],
    definitions: Mapping[str, Any],
    visited_refs: set[str],
    depth: int = 0,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> tuple[PropertyInfo, ...]:
    """Resolve every declared property of a definition in declaration order."""
    properties = definition.get("properties")
    if not isinstance(properties, Mapping):
        return ()
    required_names = required_names_of(definition)
    return tuple(
        resolve_property(
            name, schema, definitions, required_names, visited_refs, depth, max_depth
        )
        for name, schema in properties.items()
    )


def required_names_of(definition: Mapping[str, Any]) -> tuple[str, ...]:
    """Return the `required` list of a definition, ignoring malformed entries."""
    required = definition.get("required")
    if not isinstance(required, Sequence) or isinstance(required, str):
        return ()
    return tuple(name for name in required if isinstance(name, str))


def _expand_reference(
    ref_name: str,
    definitions: Mapping[str, Any],
    visited_refs: set[str],
    depth: int,
    max_depth: int,
) -> tuple[PropertyInfo, ...] | None:
    if ref_name in visited_refs or depth >= max_depth:
        return None
    target = definitions.get(ref_name)
    if not isinstance(target, Mapping) or not isinstance(target.get("properties"), Mapping):
        return None
    visited_refs.add(ref_name)
    try:
        return resolve_properties(target, definitions, visited_refs, depth + 1, max_depth)
    finally:
        visited_refs.discard(ref_name)


def _array_item(items: Any) -> tuple[PropertyInfo, ...] | None:
    item_type = _type_of(items)
    if item_type is None:
        return None
    return (
        PropertyInfo(
            name=ARRAY_ITEM_NAME,
            type=item_type,
            required=False,
            is_array=False,
            description=_description_of(items),
        ),
    )


def _type_of(schema: Any) -> str | None:
    if not isinstance(schema, Mapping):
        return None
    value = schema.get("type")
    if isinstance(value, str) and value:
        return value
    return None


def _description_of(schema: Any) -> str | None:
    if not isinstance(schema, Mapping):
        return None
    value = schema.get("description")
    return value if isinstance(value, str) else None
