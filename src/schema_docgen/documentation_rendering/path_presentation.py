"""Human-readable presentation of flat paths."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

from schema_docgen.path_flattening import (
    PATTERN_PLACEHOLDER,
    FlatPath,
    format_flat_path,
    is_pattern_like,
)

from .constants import DISPLAY_PLACEHOLDER, FILENAME_PLACEHOLDER, INDEX_STEM, ROOT_STEM

# "." separates segments in a stem, so it is escaped inside them too
_UNSAFE_FILENAME_CHARACTERS = re.compile(r"[^A-Za-z0-9_-]")


def display_segment(segment: str) -> str:
    if segment == PATTERN_PLACEHOLDER or is_pattern_like(segment):
        return DISPLAY_PLACEHOLDER
    return segment


def display_path(segments: Sequence[str]) -> str:
    """Render a flat path for readers, replacing pattern segments with `<RegExp>`."""
    return format_flat_path(display_segment(segment) for segment in segments)


def document_stem(segments: Sequence[str]) -> str:
    """Return the preferred file name stem for the page documenting `segments`.

    Distinct paths can share a preferred stem; use `assign_document_stems` to
    name the pages of a whole result.
    """
    if not segments:
        return ROOT_STEM
    parts = []
    for segment in segments:
        if segment == PATTERN_PLACEHOLDER or is_pattern_like(segment):
            parts.append(FILENAME_PLACEHOLDER)
        else:
            parts.append(_UNSAFE_FILENAME_CHARACTERS.sub("_", segment) or "_")
    stem = ".".join(parts)
    if stem in (INDEX_STEM, ROOT_STEM):
        return f"{stem}_"
    return stem


def assign_document_stems(paths: Iterable[FlatPath]) -> dict[FlatPath, str]:
    """Give every distinct flat path its own file name stem.

    The first path claiming a preferred stem keeps it; later ones get the
    lowest free `-N` suffix, skipping any stem another path prefers.
    """
    ordered = list(dict.fromkeys(tuple(path) for path in paths))
    preferred = {path: document_stem(path) for path in ordered}
    reserved = set(preferred.values()) | {INDEX_STEM}
    taken: set[str] = set()
    stems: dict[FlatPath, str] = {}
    for path in ordered:
        stem = preferred[path]
        if stem in taken:
            suffix = 2
            while f"{stem}-{suffix}" in reserved or f"{stem}-{suffix}" in taken:
                suffix += 1
            stem = f"{stem}-{suffix}"
        taken.add(stem)
        stems[path] = stem
    return stems
