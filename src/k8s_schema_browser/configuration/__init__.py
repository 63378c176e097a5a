"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import DEFAULT_STATE_FILENAME, ConfigurationError, load_configuration
from .runtime_settings import (
    CatalogSettings,
    Configuration,
    PreferenceSettings,
    ResolutionSettings,
)

__all__ = [
    "CatalogSettings",
    "Configuration",
    "PreferenceSettings",
    "ResolutionSettings",
    "ConfigurationError",
    "load_configuration",
    "DEFAULT_CONFIG_FILENAME",
    "DEFAULT_STATE_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
