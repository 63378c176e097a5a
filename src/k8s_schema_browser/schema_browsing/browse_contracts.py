"""Browsing use-case entities."""

from __future__ import annotations

from dataclasses import dataclass

from k8s_schema_browser.schema_resolution import ResolvedSchema


@dataclass(frozen=True)
class BrowseRequest:
    """Input contract shared by the browsing use cases."""

    config_path: str
    version: str | None = None


@dataclass(frozen=True)
class VersionListing:
    """Versions present in the catalog and the one browsing would use."""

    versions: tuple[str, ...]
    active_version: str


@dataclass(frozen=True)
class DefinitionListing:
    """Display names of one API version."""

    version: str
    names: tuple[str, ...]


@dataclass(frozen=True)
class DefinitionView:
    """Resolved property tree of one definition in one API version."""

    version: str
    display_name: str
    schema: ResolvedSchema
