"""Schema resolution exports."""

from .property_models import (
    ARRAY_TYPE,
    MAP_TYPE,
    OBJECT_TYPE,
    UNKNOWN_TYPE,
    PropertyInfo,
    ResolvedSchema,
)
from .property_resolution import DEFAULT_MAX_DEPTH, resolve_properties, resolve_property
from .property_shapes import PropertyShape, classify_property_shape
from .schema_resolver import DefinitionNotFoundError, resolve_schema

__all__ = [
    "ARRAY_TYPE",
    "DEFAULT_MAX_DEPTH",
    "MAP_TYPE",
    "OBJECT_TYPE",
    "UNKNOWN_TYPE",
    "DefinitionNotFoundError",
    "PropertyInfo",
    "PropertyShape",
    "ResolvedSchema",
    "classify_property_shape",
    "resolve_properties",
    "resolve_property",
    "resolve_schema",
]
