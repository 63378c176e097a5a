"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class CatalogSettings:
    """Location of the versioned swagger documents."""

    directory: Path


@dataclass(frozen=True)
class ResolutionSettings:
    """Limits applied while expanding property trees."""

    max_depth: int


@dataclass(frozen=True)
class PreferenceSettings:
    """Where browsing preferences such as the selected version are stored."""

    state_file: Path


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    catalog: CatalogSettings
    resolution: ResolutionSettings
    preferences: PreferenceSettings
