"""Workbook export exports."""

from .constants import DEFINITION_SHEET_NAME, PROPERTIES_SHEET_NAME, PROPERTY_COLUMNS
from .tree_workbook_builder import export_schema_workbook, flatten_property_rows

__all__ = [
    "DEFINITION_SHEET_NAME",
    "PROPERTIES_SHEET_NAME",
    "PROPERTY_COLUMNS",
    "export_schema_workbook",
    "flatten_property_rows",
]
