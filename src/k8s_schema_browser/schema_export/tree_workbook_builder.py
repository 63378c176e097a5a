"""Excel export of a resolved property tree."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from pathlib import Path

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from k8s_schema_browser.definition_naming import to_display_name
from k8s_schema_browser.schema_browsing.browse_contracts import DefinitionView
from k8s_schema_browser.schema_resolution import PropertyInfo

from .constants import (
    ARRAY_ELEMENT_SUFFIX,
    DEFINITION_SHEET_NAME,
    PROPERTIES_SHEET_NAME,
    PROPERTY_COLUMNS,
)

_HEADER_ROW = 2
_FIRST_DATA_ROW = 3
_DESCRIPTION_COLUMN_WIDTH = 80


def export_schema_workbook(view: DefinitionView, output_path: Path | str) -> Path:
    """Write the property tree and definition metadata of `view` to an xlsx file."""
    workbook = Workbook()
    sheet = workbook.active
    if sheet is None:
        raise RuntimeError("Workbook active sheet is not available.")
    assert isinstance(sheet, Worksheet)
    sheet.title = PROPERTIES_SHEET_NAME

    _write_headline(sheet, f"{view.display_name} [API {view.version}]")
    for column_index, name in enumerate(PROPERTY_COLUMNS, start=1):
        sheet.cell(row=_HEADER_ROW, column=column_index, value=name)

    widths = [len(name) + 6 for name in PROPERTY_COLUMNS]
    rows = flatten_property_rows(view.schema.properties)
    for row_index, row in enumerate(rows, start=_FIRST_DATA_ROW):
        for column_index, value in enumerate(row, start=1):
            sheet.cell(row=row_index, column=column_index, value=value)
            if column_index < len(PROPERTY_COLUMNS) and isinstance(value, str):
                widths[column_index - 1] = max(widths[column_index - 1], len(value) + 2)
    for column_index, width in enumerate(widths, start=1):
        limit = _DESCRIPTION_COLUMN_WIDTH if column_index == len(PROPERTY_COLUMNS) else 60
        sheet.column_dimensions[get_column_letter(column_index)].width = min(width, limit)
    sheet.freeze_panes = sheet.cell(row=_FIRST_DATA_ROW, column=1)

    _write_definition_sheet(workbook, view)

    destination = Path(output_path)
    destination.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(destination)
    return destination.resolve()


def flatten_property_rows(
    properties: Sequence[PropertyInfo], prefix: str = ""
) -> Iterator[tuple[str, str, str, str, str]]:
    """Yield one worksheet row per node, depth first, with dotted paths."""
    for prop in properties:
        path = prop.name if not prefix else f"{prefix}.{prop.name}"
        yield (
            path,
            prop.type,
            "yes" if prop.required else "",
            to_display_name(prop.ref) if prop.ref else "",
            prop.description or "",
        )
        for item in prop.items or ():
            yield (
                f"{path}{ARRAY_ELEMENT_SUFFIX}",
                item.type,
                "",
                "",
                item.description or "",
            )
        if prop.properties:
            yield from flatten_property_rows(prop.properties, path)


def _write_headline(sheet: Worksheet, label: str) -> None:
    last_letter = get_column_letter(len(PROPERTY_COLUMNS))
    sheet.merge_cells(f"A1:{last_letter}1")
    sheet["A1"].value = label
    sheet["A1"].style = "Headline 1"


def _write_definition_sheet(workbook: Workbook, view: DefinitionView) -> None:
    sheet = workbook.create_sheet(DEFINITION_SHEET_NAME)
    schema = view.schema
    entries = [
        ("name", schema.name),
        ("display_name", view.display_name),
        ("version", view.version),
        ("type", schema.type),
        ("description", schema.description or ""),
        ("required", ", ".join(schema.required)),
    ]
    for row_index, (key, value) in enumerate(entries, start=1):
        sheet.cell(row=row_index, column=1, value=key)
        sheet.cell(row=row_index, column=2, value=value)
