"""Path flattening exports."""

from .flatten_models import FlattenedProperty, FlattenResult, NoticeKind, TraversalNotice
from .path_segments import (
    PATTERN_PLACEHOLDER,
    FlatPath,
    format_flat_path,
    is_pattern_like,
    normalize_flat_path,
    normalize_segment,
)
from .tree_flattener import DEFAULT_MAX_DEPTH, flatten_schema_tree

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "PATTERN_PLACEHOLDER",
    "FlatPath",
    "FlattenResult",
    "FlattenedProperty",
    "NoticeKind",
    "TraversalNotice",
    "flatten_schema_tree",
    "format_flat_path",
    "is_pattern_like",
    "normalize_flat_path",
    "normalize_segment",
]
