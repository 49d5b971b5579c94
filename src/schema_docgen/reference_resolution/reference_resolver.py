"""Reference resolution service."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from .reference_models import (
    PointerTarget,
    Reference,
    ResolvedReference,
    UnknownDocumentError,
    UnresolvablePointerError,
)
from .reference_parser import format_pointer, parse_reference

_LOGGER = logging.getLogger(__name__)

_MISSING = object()


class ReferenceResolver:
    """Resolve `$ref` values against a registry of parsed schema documents.

    Pointers that name a missing key resolve to the deepest node reached. Set
    `strict_pointers` to raise `UnresolvablePointerError` instead.
    """

    def __init__(
        self,
        registry: Mapping[str, Any],
        *,
        base_url: str = "",
        strict_pointers: bool = False,
    ) -> None:
        self._registry = registry
        self._base_url = base_url
        self._strict_pointers = strict_pointers
        self._cache: dict[PointerTarget, tuple[Any, str | None]] = {}

    def parse(self, raw_ref: Any, current_document_key: str) -> Reference:
        return parse_reference(raw_ref, current_document_key, base_url=self._base_url)

    def resolve(self, raw_ref: Any, current_document_key: str) -> ResolvedReference:
        """Parse and resolve a raw `$ref` appearing in `current_document_key`."""
        return self.resolve_reference(self.parse(raw_ref, current_document_key))

    def resolve_reference(self, reference: Reference) -> ResolvedReference:
        cached = self._cache.get(reference.target)
        if cached is None:
            cached = self._walk(reference)
            self._cache[reference.target] = cached
        node, missing_segment = cached
        return ResolvedReference(reference=reference, node=node, missing_segment=missing_segment)

    def _walk(self, reference: Reference) -> tuple[Any, str | None]:
        if reference.document_key not in self._registry:
            raise UnknownDocumentError(
                f"Unknown schema document '{reference.document_key}'.", reference=reference.raw
            )

        cursor = self._registry[reference.document_key]
        for depth, segment in enumerate(reference.pointer):
            child = _descend(cursor, segment)
            if child is _MISSING:
                if self._strict_pointers:
                    raise UnresolvablePointerError(
                        f"Pointer segment '{segment}' not found in '{reference.document_key}'.",
                        reference=reference.raw,
                    )
                _LOGGER.debug(
                    "Partially resolved %s: segment %r missing, stopping at %s",
                    reference.raw,
                    segment,
                    format_pointer(reference.pointer[:depth]),
                )
                return cursor, segment
            cursor = child

        _LOGGER.debug(
            "Resolved %s to %s%s",
            reference.raw,
            reference.document_key,
            format_pointer(reference.pointer),
        )
        return cursor, None


def _descend(cursor: Any, segment: str) -> Any:
    if isinstance(cursor, Mapping):
        return cursor.get(segment, _MISSING)
    if isinstance(cursor, Sequence) and not isinstance(cursor, str):
        if segment.isdigit() and int(segment) < len(cursor):
            return cursor[int(segment)]
    return _MISSING
