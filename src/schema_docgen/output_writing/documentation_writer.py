"""Documentation file writer service."""

from __future__ import annotations

import logging
from pathlib import Path

from schema_docgen.documentation_rendering import (
    DEFAULT_TITLE,
    INDEX_STEM,
    OUTPUT_SUFFIXES,
    assign_document_stems,
    display_path,
    render_index_markdown,
    render_property_markdown,
    wrap_html,
)
from schema_docgen.path_flattening import FlattenResult

_LOGGER = logging.getLogger(__name__)


def write_documentation(
    result: FlattenResult,
    directory: Path | str,
    *,
    output_format: str = "markdown",
    encoding: str = "utf-8",
    title: str = DEFAULT_TITLE,
) -> tuple[Path, ...]:
    """Write one page per flat path plus an index page into `directory`."""
    if output_format not in OUTPUT_SUFFIXES:
        raise ValueError(f"Unsupported output format: {output_format}")
    suffix = OUTPUT_SUFFIXES[output_format]
    destination = Path(directory)
    destination.mkdir(parents=True, exist_ok=True)

    children = result.children_by_parent()
    stems = assign_document_stems(entry.segments for entry in result.properties)
    written: list[Path] = []
    for entry in result.properties:
        page = render_property_markdown(
            entry, children=children.get(entry.segments, ()), link_suffix=suffix, stems=stems
        )
        page_path = destination / f"{stems[entry.segments]}{suffix}"
        written.append(
            _write_page(
                page_path,
                page,
                display_path(entry.segments),
                output_format=output_format,
                encoding=encoding,
            )
        )

    index = render_index_markdown(
        result.properties, title=title, link_suffix=suffix, stems=stems
    )
    written.append(
        _write_page(
            destination / f"{INDEX_STEM}{suffix}",
            index,
            title,
            output_format=output_format,
            encoding=encoding,
        )
    )
    _LOGGER.debug("Wrote %d documentation files to %s", len(written), destination)
    return tuple(written)


def _write_page(
    path: Path, markdown_text: str, title: str, *, output_format: str, encoding: str
) -> Path:
    text = wrap_html(markdown_text, title) if output_format == "html" else markdown_text
    path.write_text(text, encoding=encoding)
    return path
