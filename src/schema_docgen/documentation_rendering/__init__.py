"""Documentation rendering exports."""

from .constants import DEFAULT_TITLE, DISPLAY_PLACEHOLDER, INDEX_STEM, OUTPUT_SUFFIXES
from .html_wrapper import wrap_html
from .markdown_renderer import render_index_markdown, render_property_markdown
from .path_presentation import (
    assign_document_stems,
    display_path,
    display_segment,
    document_stem,
)

__all__ = [
    "DEFAULT_TITLE",
    "DISPLAY_PLACEHOLDER",
    "INDEX_STEM",
    "OUTPUT_SUFFIXES",
    "assign_document_stems",
    "display_path",
    "display_segment",
    "document_stem",
    "render_index_markdown",
    "render_property_markdown",
    "wrap_html",
]
