"""Path segment normalization tests."""

from __future__ import annotations

import pytest
from schema_docgen.path_flattening import (
    PATTERN_PLACEHOLDER,
    format_flat_path,
    is_pattern_like,
    normalize_flat_path,
    normalize_segment,
)


@pytest.mark.parametrize(
    ("key", "expected"),
    [
        ("navigation", False),
        ("speedOverGround", False),
        ("^[a-zA-Z0-9]+$", True),
        ("(^urn:mrn:signalk:uuid:[0-9A-Fa-f-]+$)", True),
        ("*", True),
        ("price$", True),
    ],
)
def test_is_pattern_like(key: str, expected: bool) -> None:
    assert is_pattern_like(key) is expected


def test_normalize_segment_keeps_literal_keys() -> None:
    assert normalize_segment("navigation") == "navigation"


def test_normalize_segment_maps_pattern_like_keys_to_placeholder() -> None:
    assert normalize_segment("^[a-z]+$") == PATTERN_PLACEHOLDER


def test_pattern_properties_keys_are_always_placeholders() -> None:
    assert normalize_segment("plainName", from_pattern_properties=True) == PATTERN_PLACEHOLDER


def test_joined_and_segment_wise_paths_are_indistinguishable() -> None:
    built = (
        normalize_segment("vessels"),
        normalize_segment("^urn:.*$", from_pattern_properties=True),
        normalize_segment("navigation"),
    )

    assert normalize_flat_path("/vessels/^urn:.*$/navigation/") == built
    assert format_flat_path(built) == "/vessels/*/navigation"


def test_root_path_normalizes_to_empty_segments() -> None:
    assert normalize_flat_path("/") == ()
    assert normalize_flat_path("//") == ()
    assert format_flat_path(()) == "/"
