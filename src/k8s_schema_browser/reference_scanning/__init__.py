"""Reference scanning exports."""

from .reference_graph import (
    LIST_DEFINITION_SUFFIX,
    compute_referenced_set,
    list_top_level_display_names,
)

__all__ = [
    "LIST_DEFINITION_SUFFIX",
    "compute_referenced_set",
    "list_top_level_display_names",
]
