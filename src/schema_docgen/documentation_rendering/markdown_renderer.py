"""Markdown rendering of flattened schema properties."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any

from schema_docgen.path_flattening import FlatPath, FlattenedProperty

from .constants import DEFAULT_TITLE, MISSING_DESCRIPTION, MISSING_VALUE
from .path_presentation import display_path, display_segment, document_stem


def render_property_markdown(
    entry: FlattenedProperty,
    *,
    children: Sequence[FlattenedProperty] = (),
    link_suffix: str = ".md",
    stems: Mapping[FlatPath, str] | None = None,
) -> str:
    """Render one documentation page for a flattened property.

    Missing `title`, `type`, `description` or `example` fields are replaced by
    placeholders; non-object nodes are documented by their path only. Child
    links use `stems` when given, the preferred stem of each path otherwise.
    """
    node: Mapping[str, Any] = entry.node if isinstance(entry.node, Mapping) else {}
    lines = [
        f"# {_escape(_title_for(entry, node))}",
        "",
        f"`{display_path(entry.segments)}`",
        "",
        "| Field | Value |",
        "|---|---|",
        f"| Type | {_format_type(node.get('type'))} |",
    ]
    if "units" in node:
        lines.append(f"| Units | {_code(str(node['units']))} |")
    if isinstance(node.get("enum"), list):
        values = ", ".join(_code(json.dumps(value)) for value in node["enum"])
        lines.append(f"| Allowed values | {values} |")
    lines.append(f"| Source | {_code(entry.document_key)} |")

    lines.extend(["", "## Description", "", _description_for(node)])

    lines.extend(["", "## Example", ""])
    if "example" in node:
        lines.extend(
            ["```json", json.dumps(node["example"], indent=2, ensure_ascii=False), "```"]
        )
    else:
        lines.append(MISSING_VALUE)

    if children:
        lines.extend(["", "## Properties", ""])
        for child in children:
            lines.append(
                f"- [`{display_path(child.segments)}`]"
                f"({_stem_for(child, stems)}{link_suffix})"
                f"{_summary_suffix(child)}"
            )

    return "\n".join(lines) + "\n"


def render_index_markdown(
    entries: Sequence[FlattenedProperty],
    *,
    title: str = DEFAULT_TITLE,
    link_suffix: str = ".md",
    stems: Mapping[FlatPath, str] | None = None,
) -> str:
    """Render the index page listing every flat path in sorted order."""
    lines = [f"# {_escape(title)}", ""]
    if not entries:
        lines.append("No properties found.")
        return "\n".join(lines) + "\n"

    lines.extend(["| Path | Title | Type |", "|---|---|---|"])
    for entry in sorted(entries, key=lambda item: display_path(item.segments)):
        node = entry.node if isinstance(entry.node, Mapping) else {}
        lines.append(
            f"| [`{display_path(entry.segments)}`]"
            f"({_stem_for(entry, stems)}{link_suffix}) "
            f"| {_escape(str(node.get('title') or MISSING_VALUE))} "
            f"| {_format_type(node.get('type'))} |"
        )
    return "\n".join(lines) + "\n"


def _stem_for(entry: FlattenedProperty, stems: Mapping[FlatPath, str] | None) -> str:
    if stems is not None and entry.segments in stems:
        return stems[entry.segments]
    return document_stem(entry.segments)


def _title_for(entry: FlattenedProperty, node: Mapping[str, Any]) -> str:
    title = node.get("title")
    if isinstance(title, str) and title.strip():
        return title.strip()
    if entry.segments:
        return display_segment(entry.segments[-1])
    return "/"


def _description_for(node: Mapping[str, Any]) -> str:
    description = node.get("description")
    if isinstance(description, str) and description.strip():
        return description.strip()
    return MISSING_DESCRIPTION


def _format_type(value: Any) -> str:
    if isinstance(value, str) and value:
        return _code(value)
    if isinstance(value, list) and value:
        return " \\| ".join(_code(str(item)) for item in value)
    return MISSING_VALUE


def _summary_suffix(entry: FlattenedProperty) -> str:
    node = entry.node if isinstance(entry.node, Mapping) else {}
    description = node.get("description")
    if not isinstance(description, str) or not description.strip():
        return ""
    return f": {description.strip().splitlines()[0]}"


def _escape(text: str) -> str:
    return text.replace("|", "\\|").replace("<", "&lt;").replace(">", "&gt;")


def _code(text: str) -> str:
    return "`" + text.replace("|", "\\|") + "`"
