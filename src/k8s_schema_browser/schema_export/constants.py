"""Shared workbook export constants."""

from __future__ import annotations

PROPERTIES_SHEET_NAME = "Properties"
DEFINITION_SHEET_NAME = "Definition"

PROPERTY_COLUMNS: tuple[str, ...] = ("Path", "Type", "Required", "Reference", "Description")
ARRAY_ELEMENT_SUFFIX = "[]"
