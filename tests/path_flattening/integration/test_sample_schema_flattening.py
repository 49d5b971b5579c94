"""Flattening of the bundled multi-file sample schema."""

from __future__ import annotations

from pathlib import Path

from schema_docgen.path_flattening import flatten_schema_tree
from schema_docgen.schema_loading import load_schema_registry


def _sample_entry() -> Path:
    return Path(__file__).resolve().parents[3] / "samples" / "schema" / "signalk.json"


def test_sample_schema_flattens_across_documents() -> None:
    registry = load_schema_registry(_sample_entry())

    result = flatten_schema_tree(registry.entry_document, registry)

    assert set(registry) == {
        "signalk.json",
        "vessel.json",
        "groups/navigation.json",
        "definitions.json",
    }
    assert result.paths() == [
        "/version",
        "/self",
        "/vessels",
        "/vessels/*",
        "/vessels/*/name",
        "/vessels/*/navigation",
        "/vessels/*/navigation/speedOverGround",
        "/vessels/*/navigation/position",
        "/vessels/*/navigation/position/latitude",
        "/vessels/*/navigation/position/longitude",
        "/vessels/*/design",
        "/vessels/*/design/length",
    ]
    assert result.notices == ()


def test_sample_schema_nodes_are_resolved_definitions() -> None:
    registry = load_schema_registry(_sample_entry())

    path_map = flatten_schema_tree(registry.entry_document, registry).path_map()

    assert path_map["/vessels/*"]["title"] == "vessel"
    assert path_map["/vessels/*/navigation/speedOverGround"] == {
        "type": "number",
        "description": "A numeric value with a timestamp and source.",
    }
    assert path_map["/vessels/*/navigation/position/latitude"]["units"] == "deg"
    assert path_map["/vessels/*/design/length"] == {
        "type": "number",
        "description": "Overall length of the vessel.",
        "units": "m",
    }
