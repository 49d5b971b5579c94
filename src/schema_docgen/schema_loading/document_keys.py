"""Document key normalization shared by schema loading and reference parsing."""

from __future__ import annotations

import posixpath
import re

_SCHEME_HOST_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*://[^/]*")
_JSON_SUFFIX = ".json"


def normalize_document_key(raw: str, base_url: str = "") -> str:
    """Return the registry key for a schema file name or `$ref` document part.

    The fragment, the configured base URL, any remaining scheme/host prefix and
    relative-path prefixes are dropped, and everything after the first `.json`
    occurrence is cut so keys from files and from references share one space.
    """
    key = raw.split("#", 1)[0].strip().replace("\\", "/")
    if base_url and key.startswith(base_url):
        key = key[len(base_url) :]
    key = _SCHEME_HOST_PATTERN.sub("", key)
    suffix_index = key.find(_JSON_SUFFIX)
    if suffix_index != -1:
        key = key[: suffix_index + len(_JSON_SUFFIX)]
    if not key:
        return ""
    parts = [part for part in posixpath.normpath(key).split("/") if part not in ("", ".", "..")]
    return "/".join(parts)


def resolve_document_part(document_part: str, current_document_key: str, base_url: str = "") -> str:
    """Normalize a `$ref` document part relative to the document it appears in."""
    candidate = document_part.strip().replace("\\", "/")
    if base_url and candidate.startswith(base_url):
        return normalize_document_key(candidate, base_url)
    if _SCHEME_HOST_PATTERN.match(candidate) or candidate.startswith("/"):
        return normalize_document_key(candidate, base_url)
    directory = posixpath.dirname(current_document_key)
    return normalize_document_key(posixpath.join(directory, candidate), base_url)
