"""Resolution of a named definition into a complete property tree."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .property_models import OBJECT_TYPE, ResolvedSchema
from .property_resolution import DEFAULT_MAX_DEPTH, required_names_of, resolve_properties


class DefinitionNotFoundError(Exception):
    """Raised when the requested root definition is not in the definitions map."""

    def __init__(self, definition_name: str) -> None:
        super().__init__(f'Definition "{definition_name}" not found')
        self.definition_name = definition_name


def resolve_schema(
    definition_name: str,
    definitions: Mapping[str, Any],
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> ResolvedSchema:
    """Resolve every property of `definition_name` into a PropertyInfo tree.

    The root is marked visited up front so a self-referencing definition is not
    expanded into a copy of itself.
    """
    definition = definitions.get(definition_name)
    if not isinstance(definition, Mapping):
        raise DefinitionNotFoundError(definition_name)

    visited_refs = {definition_name}
    raw_type = definition.get("type")
    description = definition.get("description")
    return ResolvedSchema(
        name=definition_name,
        description=description if isinstance(description, str) else None,
        type=raw_type if isinstance(raw_type, str) and raw_type else OBJECT_TYPE,
        required=required_names_of(definition),
        properties=resolve_properties(
            definition, definitions, visited_refs, depth=0, max_depth=max_depth
        ),
    )
