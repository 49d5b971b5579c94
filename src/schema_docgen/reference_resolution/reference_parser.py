"""Parsing of `$ref` strings into references."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any
from urllib.parse import unquote

from schema_docgen.schema_loading.document_keys import resolve_document_part

from .reference_models import MalformedReferenceError, Reference


def parse_reference(raw: Any, current_document_key: str, *, base_url: str = "") -> Reference:
    """Split a `$ref` on its first `#` into a normalized document key and pointer."""
    if not isinstance(raw, str) or not raw.strip():
        raise MalformedReferenceError(
            "Reference must be a non-empty string.", reference=str(raw)
        )

    document_part, _, pointer_part = raw.strip().partition("#")
    if document_part:
        document_key = resolve_document_part(document_part, current_document_key, base_url)
        if not document_key:
            raise MalformedReferenceError("Reference names no schema document.", reference=raw)
    else:
        document_key = current_document_key
        if not document_key:
            raise MalformedReferenceError(
                "Local reference has no owning schema document.", reference=raw
            )

    return Reference(raw=raw, document_key=document_key, pointer=parse_pointer(pointer_part))


def parse_pointer(pointer_part: str) -> tuple[str, ...]:
    """Decode a JSON pointer fragment into its segments.

    The fragment is percent-decoded first. Empty segments name the key `""`;
    a bare `/` addresses the whole document like an empty fragment.
    """
    pointer = unquote(pointer_part)
    if pointer in ("", "/"):
        return ()
    stripped = pointer[1:] if pointer.startswith("/") else pointer
    return tuple(_decode_segment(segment) for segment in stripped.split("/"))


def format_pointer(pointer: Sequence[str]) -> str:
    if not pointer:
        return "#"
    return "#/" + "/".join(segment.replace("~", "~0").replace("/", "~1") for segment in pointer)


def _decode_segment(segment: str) -> str:
    # RFC 6901 escaping
    return segment.replace("~1", "/").replace("~0", "~")
