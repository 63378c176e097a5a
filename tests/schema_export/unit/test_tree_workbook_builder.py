"""Workbook export tests."""

from __future__ import annotations

from pathlib import Path

from k8s_schema_browser.schema_browsing import DefinitionView
from k8s_schema_browser.schema_export import (
    DEFINITION_SHEET_NAME,
    PROPERTIES_SHEET_NAME,
    PROPERTY_COLUMNS,
    export_schema_workbook,
    flatten_property_rows,
)
from k8s_schema_browser.schema_resolution import PropertyInfo, ResolvedSchema
from openpyxl import load_workbook


def _view() -> DefinitionView:
    return DefinitionView(
        version="1.30",
        display_name="core/v1/Pod",
        schema=ResolvedSchema(
            name="io.k8s.api.core.v1.Pod",
            type="object",
            required=("spec",),
            description="Pod is a collection of containers.",
            properties=(
                PropertyInfo(name="kind", type="string", description="Resource kind."),
                PropertyInfo(
                    name="spec",
                    type="object",
                    required=True,
                    ref="io.k8s.api.core.v1.PodSpec",
                    properties=(
                        PropertyInfo(
                            name="args",
                            type="array",
                            is_array=True,
                            items=(PropertyInfo(name="item", type="string"),),
                        ),
                        PropertyInfo(
                            name="nodeSelector",
                            type="object (map)",
                        ),
                    ),
                ),
            ),
        ),
    )


def test_flatten_property_rows_uses_dotted_paths_depth_first() -> None:
    rows = list(flatten_property_rows(_view().schema.properties))

    assert rows == [
        ("kind", "string", "", "", "Resource kind."),
        ("spec", "object", "yes", "core/v1/PodSpec", ""),
        ("spec.args", "array", "", "", ""),
        ("spec.args[]", "string", "", "", ""),
        ("spec.nodeSelector", "object (map)", "", "", ""),
    ]


def test_export_writes_properties_and_definition_sheets(tmp_path: Path) -> None:
    output_path = tmp_path / "out" / "pod.xlsx"

    written = export_schema_workbook(_view(), output_path)

    assert written == output_path.resolve()
    workbook = load_workbook(output_path)
    assert workbook.sheetnames == [PROPERTIES_SHEET_NAME, DEFINITION_SHEET_NAME]

    sheet = workbook[PROPERTIES_SHEET_NAME]
    assert sheet["A1"].value == "core/v1/Pod [API 1.30]"
    assert "A1:E1" in {str(rng) for rng in sheet.merged_cells.ranges}
    header = [sheet.cell(row=2, column=idx + 1).value for idx in range(len(PROPERTY_COLUMNS))]
    assert header == list(PROPERTY_COLUMNS)
    paths = [sheet.cell(row=row, column=1).value for row in range(3, sheet.max_row + 1)]
    assert paths == ["kind", "spec", "spec.args", "spec.args[]", "spec.nodeSelector"]
    assert sheet["C4"].value == "yes"
    assert sheet["D4"].value == "core/v1/PodSpec"

    definition = workbook[DEFINITION_SHEET_NAME]
    entries = {
        definition.cell(row=row, column=1).value: definition.cell(row=row, column=2).value
        for row in range(1, definition.max_row + 1)
    }
    assert entries["name"] == "io.k8s.api.core.v1.Pod"
    assert entries["display_name"] == "core/v1/Pod"
    assert entries["version"] == "1.30"
    assert entries["required"] == "spec"
