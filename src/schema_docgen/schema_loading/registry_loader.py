"""Schema file loading service."""

from __future__ import annotations

import json
import logging
from collections import deque
from collections.abc import Iterator, Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .document_keys import normalize_document_key, resolve_document_part
from .registry_models import SchemaRegistry

_LOGGER = logging.getLogger(__name__)

_YAML_SUFFIXES = frozenset({".yaml", ".yml"})


class SchemaLoadError(Exception):
    """Raised when schema documents cannot be read or parsed."""


def load_schema_registry(
    entry_path: Path | str,
    *,
    extra_paths: Sequence[Path | str] = (),
    base_url: str = "",
    encoding: str = "utf-8",
) -> SchemaRegistry:
    """Load the entry schema plus every document it transitively references.

    Args:
      entry_path: Root schema document; its directory is the schema root.
      extra_paths: Additional documents to register even if nothing references them.
      base_url: URL prefix stripped from `$ref` values and document keys.
      encoding: Text encoding of the schema files.

    Returns:
      A registry keyed by document paths relative to the schema root.

    Raises:
      SchemaLoadError: If a requested file is missing, unreadable or not a schema object.
    """
    entry = Path(entry_path).resolve()
    if not entry.is_file():
        raise SchemaLoadError(f"Schema entry file not found: {entry}")
    schema_root = entry.parent

    entry_key = _document_key_for(entry, schema_root, base_url)
    pending: deque[tuple[str, Path]] = deque([(entry_key, entry)])
    for extra in extra_paths:
        extra_file = Path(extra).resolve()
        if not extra_file.is_file():
            raise SchemaLoadError(f"Schema file not found: {extra_file}")
        pending.append((_document_key_for(extra_file, schema_root, base_url), extra_file))

    documents: dict[str, Any] = {}
    missing: set[str] = set()
    while pending:
        key, path = pending.popleft()
        if key in documents:
            continue
        document = _read_schema_file(path, encoding)
        documents[key] = document
        _LOGGER.debug("Loaded schema document %s from %s", key, path)

        for referenced_key in collect_referenced_document_keys(document, key, base_url=base_url):
            if referenced_key in documents or referenced_key in missing:
                continue
            candidate = schema_root / referenced_key
            if not candidate.is_file():
                missing.add(referenced_key)
                _LOGGER.warning(
                    "Referenced schema document %s not found under %s", referenced_key, schema_root
                )
                continue
            pending.append((referenced_key, candidate))

    return SchemaRegistry(documents, entry_key)


def collect_referenced_document_keys(
    document: Any, document_key: str, *, base_url: str = ""
) -> list[str]:
    """Return the distinct document keys named by `$ref` values, in discovery order."""
    keys: list[str] = []
    for raw_ref in _iter_reference_values(document):
        document_part = raw_ref.split("#", 1)[0]
        if not document_part.strip():
            continue
        key = resolve_document_part(document_part, document_key, base_url)
        if key and key not in keys:
            keys.append(key)
    return keys


def _iter_reference_values(document: Any) -> Iterator[str]:
    stack = [document]
    while stack:
        node = stack.pop()
        if isinstance(node, Mapping):
            raw_ref = node.get("$ref")
            if isinstance(raw_ref, str):
                yield raw_ref
            stack.extend(reversed(list(node.values())))
        elif isinstance(node, list):
            stack.extend(reversed(node))


def _document_key_for(path: Path, schema_root: Path, base_url: str) -> str:
    try:
        relative = path.relative_to(schema_root).as_posix()
    except ValueError:
        relative = path.name
    return normalize_document_key(relative, base_url)


def _read_schema_file(path: Path, encoding: str) -> Any:
    try:
        text = path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise SchemaLoadError(f"Failed to read schema file {path}: {exc}") from exc

    if path.suffix.lower() in _YAML_SUFFIXES:
        try:
            document = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise SchemaLoadError(f"Invalid YAML schema {path}: {exc}") from exc
    else:
        try:
            document = json.loads(text)
        except json.JSONDecodeError as exc:
            raise SchemaLoadError(f"Invalid JSON schema {path}: {exc}") from exc

    if not isinstance(document, Mapping):
        raise SchemaLoadError(f"Schema document root must be an object: {path}")
    return document
