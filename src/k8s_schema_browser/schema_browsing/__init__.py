"""Schema browsing exports."""

from .browse_contracts import BrowseRequest, DefinitionListing, DefinitionView, VersionListing
from .browse_use_case import (
    BrowseError,
    list_definitions,
    list_versions,
    select_version,
    show_definition,
)
from .tree_rendering import render_definition_view, render_property_tree

__all__ = [
    "BrowseRequest",
    "DefinitionListing",
    "DefinitionView",
    "VersionListing",
    "BrowseError",
    "list_definitions",
    "list_versions",
    "select_version",
    "show_definition",
    "render_definition_view",
    "render_property_tree",
]
