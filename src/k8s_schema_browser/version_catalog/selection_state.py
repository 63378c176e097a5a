"""Persistence of the selected API version."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

import yaml

from .swagger_catalog import CatalogError, SwaggerCatalog

_LOGGER = logging.getLogger(__name__)

_SELECTED_VERSION_KEY = "selected_version"


def read_selected_version(state_path: Path | str) -> str | None:
    """Return the saved version, or None when nothing usable is stored."""
    path = Path(state_path)
    if not path.exists():
        return None
    try:
        parsed = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise CatalogError(f"Failed to read selected version state {path}: {exc}") from exc
    except (yaml.YAMLError, UnicodeDecodeError) as exc:
        _LOGGER.warning("Ignoring unreadable selected version state %s: %s", path, exc)
        return None
    if not isinstance(parsed, Mapping):
        return None
    value = parsed.get(_SELECTED_VERSION_KEY)
    return value if isinstance(value, str) and value else None


def write_selected_version(state_path: Path | str, version: str) -> Path:
    """Persist the selected version and return the resolved state file path."""
    path = Path(state_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        yaml.safe_dump({_SELECTED_VERSION_KEY: version}, default_flow_style=False),
        encoding="utf-8",
    )
    return path.resolve()


def resolve_active_version(
    catalog: SwaggerCatalog,
    state_path: Path | str,
    requested: str | None = None,
) -> str:
    """Pick the version to browse.

    An explicitly requested version wins, then a saved version that is still
    available, then the newest version in the catalog.
    """
    available = catalog.available_versions()
    if not available:
        raise CatalogError(f"No API versions found in {catalog.directory}")
    if requested is not None:
        if requested not in available:
            raise CatalogError(
                f"Version {requested} not found. Available versions: {', '.join(available)}"
            )
        return requested
    saved = read_selected_version(state_path)
    if saved is not None and saved in available:
        return saved
    return available[0]
