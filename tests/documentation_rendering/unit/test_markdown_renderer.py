"""Markdown and HTML rendering tests."""

from __future__ import annotations

from schema_docgen.documentation_rendering import (
    render_index_markdown,
    render_property_markdown,
    wrap_html,
)
from schema_docgen.path_flattening import FlattenedProperty


def _entry(segments: tuple[str, ...], node: object, document_key: str = "root.json"):
    return FlattenedProperty(segments=segments, node=node, document_key=document_key)


def test_property_page_contains_descriptive_fields() -> None:
    entry = _entry(
        ("vessels", "*", "navigation", "position", "latitude"),
        {
            "title": "Latitude",
            "type": "number",
            "description": "Latitude in degrees.",
            "units": "deg",
            "example": 52.0987654,
        },
        "definitions.json",
    )

    page = render_property_markdown(entry)

    assert page.startswith("# Latitude\n")
    assert "`/vessels/<RegExp>/navigation/position/latitude`" in page
    assert "| Type | `number` |" in page
    assert "| Units | `deg` |" in page
    assert "| Source | `definitions.json` |" in page
    assert "Latitude in degrees." in page
    assert "52.0987654" in page


def test_property_page_uses_placeholders_for_missing_fields() -> None:
    page = render_property_markdown(_entry(("vessels", "*"), {}))

    assert page.startswith("# &lt;RegExp&gt;\n")
    assert "| Type | n/a |" in page
    assert "No description available." in page


def test_property_page_links_children() -> None:
    parent = _entry(("navigation",), {"type": "object"})
    child = _entry(("navigation", "speed"), {"description": "Speed over ground.\nMore."})

    page = render_property_markdown(parent, children=[child], link_suffix=".html")

    assert "## Properties" in page
    assert "- [`/navigation/speed`](navigation.speed.html): Speed over ground." in page


def test_type_lists_and_enums_are_rendered() -> None:
    page = render_property_markdown(
        _entry(("state",), {"type": ["string", "null"], "enum": ["moored", "sailing"]})
    )

    assert "`string` \\| `null`" in page
    assert '| Allowed values | `"moored"`, `"sailing"` |' in page


def test_index_lists_paths_in_sorted_order() -> None:
    entries = [
        _entry(("vessels",), {"title": "vessels", "type": "object"}),
        _entry(("self",), {"type": "string"}),
    ]

    index = render_index_markdown(entries, title="SignalK")

    assert index.startswith("# SignalK\n")
    assert index.index("`/self`") < index.index("`/vessels`")
    assert "| [`/vessels`](vessels.md) | vessels | `object` |" in index


def test_index_without_entries() -> None:
    assert "No properties found." in render_index_markdown([])


def test_wrap_html_produces_standalone_page() -> None:
    html_page = wrap_html("# Title\n\n| A | B |\n|---|---|\n| 1 | 2 |\n", "Docs <1>")

    assert html_page.startswith("<!DOCTYPE html>")
    assert "<title>Docs &lt;1&gt;</title>" in html_page
    assert "<h1>Title</h1>" in html_page
    assert "<table>" in html_page
