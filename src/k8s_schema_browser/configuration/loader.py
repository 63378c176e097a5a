"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from k8s_schema_browser.schema_resolution import DEFAULT_MAX_DEPTH

from .runtime_settings import (
    CatalogSettings,
    Configuration,
    PreferenceSettings,
    ResolutionSettings,
)

DEFAULT_STATE_FILENAME = ".k8s-schema-browser-state.yaml"


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    base_path = path.resolve().parent
    catalog = _parse_catalog_section(parsed.get("catalog"), base_path)
    resolution = _parse_resolution_section(parsed.get("resolution"))
    preferences = _parse_preferences_section(parsed.get("preferences"), base_path)

    return Configuration(
        path=path,
        catalog=catalog,
        resolution=resolution,
        preferences=preferences,
    )


def _parse_catalog_section(value: Any, base_path: Path) -> CatalogSettings:
    section = _require_mapping(value, "catalog")
    directory = _require_non_empty_string(section.get("directory"), "catalog.directory")
    return CatalogSettings(directory=_resolve_path(base_path, directory))


def _parse_resolution_section(value: Any) -> ResolutionSettings:
    section = _optional_mapping(value, "resolution")
    max_depth = _require_positive_int(
        section.get("max_depth", DEFAULT_MAX_DEPTH), "resolution.max_depth"
    )
    return ResolutionSettings(max_depth=max_depth)


def _parse_preferences_section(value: Any, base_path: Path) -> PreferenceSettings:
    section = _optional_mapping(value, "preferences")
    state_file = _optional_string(section.get("state_file"), "preferences.state_file")
    return PreferenceSettings(
        state_file=_resolve_path(base_path, state_file or DEFAULT_STATE_FILENAME)
    )


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path).expanduser()
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
