"""Ordered-subsequence matching and property tree filtering."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

from k8s_schema_browser.schema_resolution import PropertyInfo

_REQUIRED_LABEL = "required"


def fuzzy_match(text: str, search: str | None) -> bool:
    """Return True when every search character appears in `text`, in order.

    Matching is case-insensitive and characters need not be contiguous. An empty
    or missing search matches everything.
    """
    if not search:
        return True
    needle = search.lower()
    position = 0
    for char in text.lower():
        if char == needle[position]:
            position += 1
            if position == len(needle):
                return True
    return False


def property_matches_search(prop: PropertyInfo, search: str | None) -> bool:
    """Return True when the property or any of its descendants matches."""
    if not search:
        return True
    if fuzzy_match(prop.name, search):
        return True
    if prop.description and fuzzy_match(prop.description, search):
        return True
    if fuzzy_match(prop.type, search):
        return True
    if prop.required and fuzzy_match(_REQUIRED_LABEL, search):
        return True
    return any(property_matches_search(child, search) for child in prop.properties or ())


def filter_property_tree(prop: PropertyInfo, search: str | None) -> PropertyInfo | None:
    """Prune a property tree down to matching nodes and their ancestors.

    A kept node carries only its surviving children. A node that matches by
    itself but has no surviving children keeps its original children.
    """
    if not search:
        return prop

    own_match = (
        fuzzy_match(prop.name, search)
        or bool(prop.description and fuzzy_match(prop.description, search))
        or fuzzy_match(prop.type, search)
        or bool(prop.ref and fuzzy_match(prop.ref, search))
    )

    surviving = tuple(
        child
        for child in (filter_property_tree(child, search) for child in prop.properties or ())
        if child is not None
    )

    if surviving:
        return replace(prop, properties=surviving)
    if own_match:
        return prop
    return None


def filter_properties(
    properties: Sequence[PropertyInfo], search: str | None
) -> list[PropertyInfo]:
    """Filter a list of root properties, preserving ancestor chains of matches."""
    if not search:
        return list(properties)
    return [
        kept
        for kept in (filter_property_tree(prop, search) for prop in properties)
        if kept is not None
    ]
