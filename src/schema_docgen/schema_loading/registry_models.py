"""Schema registry entities."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any


class SchemaRegistry(Mapping[str, Any]):
    """Read-only mapping from normalized document key to parsed schema document."""

    def __init__(self, documents: Mapping[str, Any], entry_key: str) -> None:
        if entry_key not in documents:
            raise ValueError(f"Entry document '{entry_key}' is not part of the registry.")
        self._documents = MappingProxyType(dict(documents))
        self._entry_key = entry_key

    @property
    def entry_key(self) -> str:
        return self._entry_key

    @property
    def entry_document(self) -> Any:
        """Return the parsed entry (root) schema document."""
        return self._documents[self._entry_key]

    def __getitem__(self, key: str) -> Any:
        return self._documents[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._documents)

    def __len__(self) -> int:
        return len(self._documents)

    def __repr__(self) -> str:
        keys = sorted(self._documents)
        return f"SchemaRegistry(entry_key={self._entry_key!r}, documents={keys!r})"
