"""Definition naming exports."""

from .display_names import (
    DEFINITIONS_POINTER_PREFIX,
    KNOWN_PREFIXES,
    extract_ref_name,
    list_display_names,
    to_display_name,
    to_raw_name,
)

__all__ = [
    "DEFINITIONS_POINTER_PREFIX",
    "KNOWN_PREFIXES",
    "extract_ref_name",
    "list_display_names",
    "to_display_name",
    "to_raw_name",
]
