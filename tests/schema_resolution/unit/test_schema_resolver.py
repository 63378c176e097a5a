"""Schema resolver tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from k8s_schema_browser.schema_resolution import (
    DEFAULT_MAX_DEPTH,
    DefinitionNotFoundError,
    PropertyInfo,
    resolve_schema,
)


def _ref(name: str) -> dict:
    return {"$ref": f"#/definitions/{name}"}


def _sample_definitions() -> dict:
    sample_path = Path(__file__).resolve().parents[3] / "samples" / "k8s" / "1.30" / "swagger.json"
    return json.loads(sample_path.read_text(encoding="utf-8"))["definitions"]


def _child(prop: PropertyInfo, name: str) -> PropertyInfo:
    assert prop.properties is not None, f"{prop.name} was not expanded"
    return next(child for child in prop.properties if child.name == name)


def test_resolves_reference_into_nested_properties() -> None:
    definitions = {
        "A": {"properties": {"b": _ref("B")}},
        "B": {"properties": {"c": {"type": "string"}}},
    }

    schema = resolve_schema("A", definitions)

    assert schema.to_dict() == {
        "name": "A",
        "type": "object",
        "properties": [
            {
                "name": "b",
                "type": "object",
                "required": False,
                "isArray": False,
                "ref": "B",
                "properties": [
                    {"name": "c", "type": "string", "required": False, "isArray": False}
                ],
            }
        ],
        "required": [],
    }


def test_array_of_missing_definition_has_no_properties() -> None:
    definitions = {"L": {"properties": {"items": {"type": "array", "items": _ref("X")}}}}

    schema = resolve_schema("L", definitions)

    (items,) = schema.properties
    assert items.type == "array"
    assert items.ref == "X"
    assert items.properties is None
    assert "properties" not in items.to_dict()


def test_copies_root_metadata_and_keeps_declaration_order() -> None:
    definitions = {
        "Root": {
            "type": "object",
            "description": "root description",
            "required": ["zeta"],
            "properties": {
                "zeta": {"type": "string"},
                "alpha": {"type": "integer"},
                "mid": {"type": "boolean"},
            },
        }
    }

    schema = resolve_schema("Root", definitions)

    assert schema.name == "Root"
    assert schema.description == "root description"
    assert schema.required == ("zeta",)
    assert [prop.name for prop in schema.properties] == ["zeta", "alpha", "mid"]
    assert [prop.required for prop in schema.properties] == [True, False, False]


def test_root_type_defaults_to_object() -> None:
    assert resolve_schema("Bare", {"Bare": {}}).type == "object"
    assert resolve_schema("Bare", {"Bare": {}}).properties == ()
    assert resolve_schema("Time", {"Time": {"type": "string"}}).type == "string"


def test_missing_definition_raises() -> None:
    with pytest.raises(DefinitionNotFoundError, match='Definition "Missing" not found') as excinfo:
        resolve_schema("Missing", {"Other": {}})

    assert excinfo.value.definition_name == "Missing"


def test_self_reference_on_root_is_not_expanded() -> None:
    definitions = {"Node": {"properties": {"child": _ref("Node"), "value": {"type": "string"}}}}

    schema = resolve_schema("Node", definitions)

    child = schema.properties[0]
    assert child.ref == "Node"
    assert child.properties is None


def test_mutual_references_expand_first_occurrence_only() -> None:
    definitions = {
        "A": {"properties": {"b": _ref("B")}},
        "B": {"properties": {"a": _ref("A"), "name": {"type": "string"}}},
    }

    from_a = resolve_schema("A", definitions)
    from_b = resolve_schema("B", definitions)

    b = from_a.properties[0]
    assert b.properties is not None
    assert _child(b, "a").ref == "A"
    assert _child(b, "a").properties is None

    a = from_b.properties[0]
    assert a.properties is not None
    assert _child(a, "b").properties is None


def test_longer_cycle_terminates_at_second_occurrence() -> None:
    definitions = {
        "A": {"properties": {"next": _ref("B")}},
        "B": {"properties": {"next": _ref("C")}},
        "C": {"properties": {"next": _ref("A")}},
    }

    schema = resolve_schema("A", definitions)

    to_b = schema.properties[0]
    to_c = _child(to_b, "next")
    to_a = _child(to_c, "next")
    assert (to_b.ref, to_c.ref, to_a.ref) == ("B", "C", "A")
    assert to_a.properties is None


def test_visited_guard_is_path_scoped_for_siblings() -> None:
    definitions = {
        "Root": {"properties": {"first": _ref("Shared"), "second": _ref("Shared")}},
        "Shared": {"properties": {"value": {"type": "string"}}},
    }

    schema = resolve_schema("Root", definitions)

    expected = (PropertyInfo(name="value", type="string"),)
    assert schema.properties[0].properties == expected
    assert schema.properties[1].properties == expected


def _chain(length: int) -> dict:
    definitions = {}
    for index in range(length):
        definitions[f"D{index}"] = {
            "properties": {"next": _ref(f"D{index + 1}"), "value": {"type": "string"}}
        }
    return definitions


def _follow_chain(schema_properties: tuple[PropertyInfo, ...]) -> list[PropertyInfo]:
    visited = []
    current = schema_properties[0]
    while True:
        visited.append(current)
        if current.properties is None:
            return visited
        current = current.properties[0]


def test_depth_limit_truncates_reference_chain() -> None:
    chain = _follow_chain(resolve_schema("D0", _chain(15), max_depth=3).properties)

    assert [prop.ref for prop in chain] == ["D1", "D2", "D3", "D4"]
    assert chain[-1].properties is None


def test_default_depth_limit_is_ten() -> None:
    chain = _follow_chain(resolve_schema("D0", _chain(20)).properties)

    assert DEFAULT_MAX_DEPTH == 10
    assert len(chain) == DEFAULT_MAX_DEPTH + 1
    assert chain[-1].ref == "D11"


def test_resolves_sample_pod_tree() -> None:
    schema = resolve_schema("io.k8s.api.core.v1.Pod", _sample_definitions())

    assert [prop.name for prop in schema.properties] == [
        "apiVersion",
        "kind",
        "metadata",
        "spec",
        "status",
    ]
    spec = _child_of_schema(schema.properties, "spec")
    containers = _child(spec, "containers")
    assert containers.required is True
    assert containers.is_array is True
    assert containers.ref == "io.k8s.api.core.v1.Container"
    assert _child(containers, "name").required is True
    assert _child(containers, "args").items == (PropertyInfo(name="item", type="string"),)
    env = _child(containers, "env")
    assert [prop.name for prop in env.properties or ()] == ["name", "value"]
    limits = _child(_child(containers, "resources"), "limits")
    assert limits.type == "object (map)"
    assert limits.ref == "io.k8s.apimachinery.pkg.api.resource.Quantity"
    assert limits.properties is None

    metadata = _child_of_schema(schema.properties, "metadata")
    owners = _child(metadata, "ownerReferences")
    assert [prop.required for prop in owners.properties or ()] == [True, True, True, True]
    assert _child(metadata, "creationTimestamp").properties is None


def test_resolves_self_referencing_sample_definition() -> None:
    raw_name = "io.k8s.apiextensions-apiserver.pkg.apis.apiextensions.v1.JSONSchemaProps"

    schema = resolve_schema(raw_name, _sample_definitions())

    items = _child_of_schema(schema.properties, "items")
    nested = _child_of_schema(schema.properties, "properties")
    assert items.ref == raw_name
    assert items.properties is None
    assert nested.type == "object (map)"
    assert nested.ref == raw_name


def _child_of_schema(properties: tuple[PropertyInfo, ...], name: str) -> PropertyInfo:
    return next(prop for prop in properties if prop.name == name)
