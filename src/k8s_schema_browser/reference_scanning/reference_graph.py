"""Reference graph scanning over a swagger definitions map."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from k8s_schema_browser.definition_naming import extract_ref_name, to_display_name
from k8s_schema_browser.schema_resolution.property_shapes import reference_of

LIST_DEFINITION_SUFFIX = "List"


def compute_referenced_set(definitions: Mapping[str, Any]) -> set[str]:
    """Collect every definition key that another definition points to.

    `*List` definitions are not scanned, but they can still be collected when
    some other definition refers to them.
    """
    referenced: set[str] = set()
    for name, definition in definitions.items():
        if name.endswith(LIST_DEFINITION_SUFFIX):
            continue
        if not isinstance(definition, Mapping):
            continue
        properties = definition.get("properties")
        if isinstance(properties, Mapping):
            _scan_for_references(properties, referenced)
    return referenced


def list_top_level_display_names(definitions: Mapping[str, Any]) -> list[str]:
    """Return display names of definitions nobody references, excluding `*List` wrappers."""
    referenced = compute_referenced_set(definitions)
    return sorted(
        to_display_name(name)
        for name in definitions
        if not name.endswith(LIST_DEFINITION_SUFFIX) and name not in referenced
    )


def _scan_for_references(properties: Mapping[str, Any], referenced: set[str]) -> None:
    for prop in properties.values():
        if not isinstance(prop, Mapping):
            continue

        direct_ref = _ref_of(prop)
        if direct_ref:
            referenced.add(direct_ref)

        if prop.get("type") == "array":
            items_ref = _ref_of(prop.get("items"))
            if items_ref:
                referenced.add(items_ref)

        map_ref = _ref_of(prop.get("additionalProperties"))
        if map_ref:
            referenced.add(map_ref)

        nested = prop.get("properties")
        if isinstance(nested, Mapping):
            _scan_for_references(nested, referenced)


def _ref_of(node: Any) -> str | None:
    ref = reference_of(node)
    return extract_ref_name(ref) if ref else None
