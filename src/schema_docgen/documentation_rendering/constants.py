"""Shared documentation rendering constants."""

from __future__ import annotations

DISPLAY_PLACEHOLDER = "<RegExp>"
FILENAME_PLACEHOLDER = "RegExp"

INDEX_STEM = "index"
ROOT_STEM = "root"

DEFAULT_TITLE = "Schema documentation"
MISSING_VALUE = "n/a"
MISSING_DESCRIPTION = "No description available."

OUTPUT_SUFFIXES: dict[str, str] = {"markdown": ".md", "html": ".html"}
