"""Mapping between raw definition keys and slash-separated display names."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

DEFINITIONS_POINTER_PREFIX = "#/definitions/"

KNOWN_PREFIXES: tuple[str, ...] = (
    "io.k8s.api.",
    "io.k8s.",
    "apimachinery.pkg.apis.",
    "kubernetes.pkg.",
)


def extract_ref_name(ref: str) -> str:
    """Return the definition key a `$ref` pointer targets."""
    return ref.replace(DEFINITIONS_POINTER_PREFIX, "", 1)


def to_display_name(raw_name: str) -> str:
    """Strip the first known vendor prefix and turn dots into slashes.

    `io.k8s.api.core.v1.Pod` becomes `core/v1/Pod`.
    """
    formatted = raw_name
    for prefix in KNOWN_PREFIXES:
        if formatted.startswith(prefix):
            formatted = formatted[len(prefix) :]
            break
    return formatted.replace(".", "/")


def list_display_names(definitions: Mapping[str, Any]) -> list[str]:
    """Return display names for every definition key, sorted ascending."""
    return sorted(to_display_name(name) for name in definitions)


def to_raw_name(display_name: str, definitions: Mapping[str, Any]) -> str | None:
    """Find the raw definition key behind a display name.

    Candidates are probed in `KNOWN_PREFIXES` order followed by the bare dotted
    form. When two raw keys collapse to the same display name the first
    candidate found wins, so the inverse is best effort only.

    Returns:
      The matching raw key, or None when no candidate exists in `definitions`.
    """
    with_dots = display_name.replace("/", ".")
    candidates = [f"{prefix}{with_dots}" for prefix in KNOWN_PREFIXES]
    candidates.append(with_dots)
    for candidate in candidates:
        if candidate in definitions:
            return candidate
    return None
