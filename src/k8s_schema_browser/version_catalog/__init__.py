"""Version catalog exports."""

from .catalog_models import SchemaDocument
from .selection_state import (
    read_selected_version,
    resolve_active_version,
    write_selected_version,
)
from .swagger_catalog import SWAGGER_FILENAME, CatalogError, SwaggerCatalog

__all__ = [
    "SWAGGER_FILENAME",
    "CatalogError",
    "SchemaDocument",
    "SwaggerCatalog",
    "read_selected_version",
    "resolve_active_version",
    "write_selected_version",
]
