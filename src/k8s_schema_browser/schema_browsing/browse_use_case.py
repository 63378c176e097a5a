"""Browsing use-case services."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from k8s_schema_browser.configuration import (
    Configuration,
    ConfigurationError,
    load_configuration,
)
from k8s_schema_browser.definition_naming import list_display_names, to_raw_name
from k8s_schema_browser.fuzzy_filtering import filter_properties, fuzzy_match
from k8s_schema_browser.reference_scanning import list_top_level_display_names
from k8s_schema_browser.schema_resolution import DefinitionNotFoundError, resolve_schema
from k8s_schema_browser.version_catalog import (
    CatalogError,
    SwaggerCatalog,
    resolve_active_version,
    write_selected_version,
)

from .browse_contracts import BrowseRequest, DefinitionListing, DefinitionView, VersionListing


class BrowseError(Exception):
    """Raised when a browsing use case cannot be completed."""


@dataclass(frozen=True)
class _BrowseSession:
    """Loaded configuration and definitions of the active version."""

    configuration: Configuration
    version: str
    definitions: Mapping[str, Any]


def list_versions(config_path: str) -> VersionListing:
    """Return catalog versions, newest first, with the currently active one."""
    try:
        configuration = load_configuration(config_path)
        catalog = SwaggerCatalog(configuration.catalog.directory)
        active = resolve_active_version(catalog, configuration.preferences.state_file)
    except (ConfigurationError, CatalogError) as exc:
        raise BrowseError(str(exc)) from exc
    return VersionListing(versions=catalog.available_versions(), active_version=active)


def select_version(config_path: str, version: str) -> Path:
    """Validate `version` against the catalog and remember it for later sessions."""
    try:
        configuration = load_configuration(config_path)
        catalog = SwaggerCatalog(configuration.catalog.directory)
        selected = resolve_active_version(
            catalog, configuration.preferences.state_file, requested=version
        )
        catalog.load_version(selected)
        return write_selected_version(configuration.preferences.state_file, selected)
    except (ConfigurationError, CatalogError, OSError) as exc:
        raise BrowseError(str(exc)) from exc


def list_definitions(
    request: BrowseRequest,
    *,
    include_all: bool = False,
    search: str | None = None,
) -> DefinitionListing:
    """List top-level (or all) display names, optionally narrowed by a fuzzy search."""
    session = _open_session(request)
    names = (
        list_display_names(session.definitions)
        if include_all
        else list_top_level_display_names(session.definitions)
    )
    return DefinitionListing(
        version=session.version,
        names=tuple(name for name in names if fuzzy_match(name, search)),
    )


def show_definition(
    request: BrowseRequest,
    display_name: str,
    *,
    search: str | None = None,
) -> DefinitionView:
    """Resolve the definition behind a display name into its property tree."""
    session = _open_session(request)
    raw_name = to_raw_name(display_name, session.definitions)
    if raw_name is None:
        raise BrowseError(
            f"No definition named {display_name} in API version {session.version}."
        )
    try:
        schema = resolve_schema(
            raw_name,
            session.definitions,
            max_depth=session.configuration.resolution.max_depth,
        )
    except DefinitionNotFoundError as exc:
        raise BrowseError(str(exc)) from exc
    if search:
        schema = replace(schema, properties=tuple(filter_properties(schema.properties, search)))
    return DefinitionView(version=session.version, display_name=display_name, schema=schema)


def _open_session(request: BrowseRequest) -> _BrowseSession:
    try:
        configuration = load_configuration(request.config_path)
        catalog = SwaggerCatalog(configuration.catalog.directory)
        version = resolve_active_version(
            catalog, configuration.preferences.state_file, requested=request.version
        )
        definitions = catalog.get_definitions(version)
    except (ConfigurationError, CatalogError) as exc:
        raise BrowseError(str(exc)) from exc
    return _BrowseSession(configuration=configuration, version=version, definitions=definitions)
