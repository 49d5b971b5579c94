"""Path flattening entities."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .path_segments import FlatPath, format_flat_path


class NoticeKind(str, Enum):
    """Non-fatal conditions recorded while flattening."""

    UNRESOLVABLE_POINTER_SEGMENT = "unresolvable_pointer_segment"
    RECURSION_LIMIT_EXCEEDED = "recursion_limit_exceeded"


@dataclass(frozen=True)
class TraversalNotice:
    """One non-fatal condition and where it happened."""

    kind: NoticeKind
    path: str
    reference: str | None
    detail: str


@dataclass(frozen=True)
class FlattenedProperty:
    """One walked property and its resolved schema node."""

    segments: FlatPath
    node: Any
    document_key: str

    @property
    def path(self) -> str:
        return format_flat_path(self.segments)


@dataclass(frozen=True)
class FlattenResult:
    """Flattened properties in traversal order plus recorded notices."""

    properties: tuple[FlattenedProperty, ...]
    notices: tuple[TraversalNotice, ...] = ()

    def path_map(self) -> dict[str, Any]:
        """Return the flat path to resolved node mapping."""
        return {entry.path: entry.node for entry in self.properties}

    def paths(self) -> list[str]:
        return [entry.path for entry in self.properties]

    def children_by_parent(self) -> dict[FlatPath, list[FlattenedProperty]]:
        children: dict[FlatPath, list[FlattenedProperty]] = defaultdict(list)
        for entry in self.properties:
            children[entry.segments[:-1]].append(entry)
        return dict(children)

    def __len__(self) -> int:
        return len(self.properties)
