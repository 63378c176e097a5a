"""Versioned swagger document repository backed by a directory tree."""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from packaging.version import Version

from .catalog_models import SchemaDocument

SWAGGER_FILENAME = "swagger.json"
_VERSION_DIRECTORY_PATTERN = re.compile(r"^\d+\.\d+$")

_LOGGER = logging.getLogger(__name__)


class CatalogError(Exception):
    """Raised when a swagger document version cannot be listed or loaded."""


class SwaggerCatalog:
    """Lists and lazily loads `<directory>/<major>.<minor>/swagger.json` documents."""

    def __init__(self, directory: Path | str) -> None:
        self._directory = Path(directory)
        self._documents: dict[str, SchemaDocument] = {}

    @property
    def directory(self) -> Path:
        return self._directory

    def available_versions(self) -> tuple[str, ...]:
        """Return the versions present in the catalog, newest first."""
        if not self._directory.is_dir():
            return ()
        versions = [
            entry.name
            for entry in self._directory.iterdir()
            if entry.is_dir()
            and _VERSION_DIRECTORY_PATTERN.match(entry.name)
            and (entry / SWAGGER_FILENAME).is_file()
        ]
        return tuple(sorted(versions, key=Version, reverse=True))

    def load_version(self, version: str) -> SchemaDocument:
        """Load one version, reusing the cached document on repeated calls."""
        cached = self._documents.get(version)
        if cached is not None:
            return cached

        if version not in self.available_versions():
            raise CatalogError(f"Version {version} not found in {self._directory}")

        source_path = self._directory / version / SWAGGER_FILENAME
        try:
            document = _read_document(source_path)
        except CatalogError:
            _LOGGER.exception("Failed to load API schema for version %s", version)
            raise

        loaded = SchemaDocument(
            version=version,
            definitions=document["definitions"],
            source_path=source_path,
        )
        self._documents[version] = loaded
        _LOGGER.debug(
            "Loaded %d definitions for version %s from %s",
            len(loaded.definitions),
            version,
            source_path,
        )
        return loaded

    def get_definitions(self, version: str) -> Mapping[str, Any]:
        """Return the definitions map of one version."""
        return self.load_version(version).definitions


def _read_document(source_path: Path) -> Mapping[str, Any]:
    try:
        parsed = json.loads(source_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise CatalogError(f"Failed to read API schema {source_path}: {exc}") from exc
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise CatalogError(f"Invalid API schema {source_path}: {exc}") from exc

    if not isinstance(parsed, Mapping):
        raise CatalogError(f"API schema root must be an object: {source_path}")
    if not isinstance(parsed.get("definitions"), Mapping):
        raise CatalogError(f"API schema has no definitions object: {source_path}")
    return parsed
