"""Path segment normalization for flat property paths."""

from __future__ import annotations

from collections.abc import Iterable

PATH_SEPARATOR = "/"
PATTERN_PLACEHOLDER = "*"
PATTERN_METACHARACTERS = frozenset("^$*")

FlatPath = tuple[str, ...]


def is_pattern_like(key: str) -> bool:
    """Return True when a key contains anchor or wildcard metacharacters."""
    return any(character in PATTERN_METACHARACTERS for character in key)


def normalize_segment(key: str, *, from_pattern_properties: bool = False) -> str:
    """Map a property key to its path segment.

    Keys declared under `patternProperties` and literal keys that look like
    patterns both become `PATTERN_PLACEHOLDER`; the placeholder is itself
    pattern-like, so no other key can normalize to the same segment.
    """
    if from_pattern_properties or is_pattern_like(key):
        return PATTERN_PLACEHOLDER
    return key


def normalize_flat_path(raw: str) -> FlatPath:
    """Split a joined path string and normalize every segment."""
    return tuple(normalize_segment(segment) for segment in raw.split(PATH_SEPARATOR) if segment)


def format_flat_path(segments: Iterable[str]) -> str:
    return PATH_SEPARATOR + PATH_SEPARATOR.join(segments)
