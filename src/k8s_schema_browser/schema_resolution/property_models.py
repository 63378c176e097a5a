"""Resolved schema entities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

OBJECT_TYPE = "object"
ARRAY_TYPE = "array"
MAP_TYPE = "object (map)"
UNKNOWN_TYPE = "any"
ARRAY_ITEM_NAME = "item"


@dataclass(frozen=True)
class PropertyInfo:  # pylint: disable=too-many-instance-attributes
    """One resolved property of a definition.

    `properties` is None when the node was not expanded, which is different
    from an empty tuple for a definition that declares no fields.
    """

    name: str
    type: str
    required: bool = False
    is_array: bool = False
    description: str | None = None
    ref: str | None = None
    items: tuple[PropertyInfo, ...] | None = None
    properties: tuple[PropertyInfo, ...] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping, omitting absent optional fields."""
        payload: dict[str, Any] = {"name": self.name, "type": self.type}
        if self.description is not None:
            payload["description"] = self.description
        payload["required"] = self.required
        payload["isArray"] = self.is_array
        if self.ref is not None:
            payload["ref"] = self.ref
        if self.items is not None:
            payload["items"] = [item.to_dict() for item in self.items]
        if self.properties is not None:
            payload["properties"] = [child.to_dict() for child in self.properties]
        return payload


@dataclass(frozen=True)
class ResolvedSchema:
    """Fully resolved property tree of one named definition."""

    name: str
    type: str
    required: tuple[str, ...]
    properties: tuple[PropertyInfo, ...]
    description: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping."""
        payload: dict[str, Any] = {"name": self.name}
        if self.description is not None:
            payload["description"] = self.description
        payload["type"] = self.type
        payload["properties"] = [prop.to_dict() for prop in self.properties]
        payload["required"] = list(self.required)
        return payload
