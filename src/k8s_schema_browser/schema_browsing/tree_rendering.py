"""Plain-text rendering of resolved property trees."""

from __future__ import annotations

from collections.abc import Sequence

from k8s_schema_browser.definition_naming import to_display_name
from k8s_schema_browser.schema_resolution import PropertyInfo

from .browse_contracts import DefinitionView

_INDENT = "  "


def render_definition_view(view: DefinitionView) -> list[str]:
    """Render a header followed by the indented property tree."""
    schema = view.schema
    lines = [f"{view.display_name} ({schema.name}) [API {view.version}]"]
    if schema.description:
        lines.append(schema.description)
    lines.append("")
    lines.extend(render_property_tree(schema.properties))
    return lines


def render_property_tree(properties: Sequence[PropertyInfo], depth: int = 0) -> list[str]:
    """Render one line per property, children indented below their parent."""
    lines: list[str] = []
    for prop in properties:
        lines.append(f"{_INDENT * depth}{_describe(prop)}")
        for item in prop.items or ():
            lines.append(f"{_INDENT * (depth + 1)}[]: {item.type}")
        if prop.properties:
            lines.extend(render_property_tree(prop.properties, depth + 1))
    return lines


def _describe(prop: PropertyInfo) -> str:
    text = f"{prop.name}: {prop.type}"
    if prop.required:
        text += " [required]"
    if prop.ref:
        text += f" -> {to_display_name(prop.ref)}"
    return text
