"""Fuzzy filtering exports."""

from .fuzzy_matching import (
    filter_properties,
    filter_property_tree,
    fuzzy_match,
    property_matches_search,
)

__all__ = [
    "filter_properties",
    "filter_property_tree",
    "fuzzy_match",
    "property_matches_search",
]
