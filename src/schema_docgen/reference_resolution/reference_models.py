"""Reference resolution entities and errors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

PointerTarget = tuple[str, tuple[str, ...]]


@dataclass(frozen=True)
class Reference:
    """Parsed `$ref` value."""

    raw: str
    document_key: str
    pointer: tuple[str, ...]

    @property
    def target(self) -> PointerTarget:
        """Identity of the designated node, used for memoization and cycle detection."""
        return (self.document_key, self.pointer)


@dataclass(frozen=True)
class ResolvedReference:
    """Node designated by a reference, possibly reached by partial resolution."""

    reference: Reference
    node: Any
    missing_segment: str | None = None

    @property
    def complete(self) -> bool:
        return self.missing_segment is None


class ReferenceResolutionError(Exception):
    """Raised when a `$ref` cannot be turned into a schema node."""

    def __init__(self, message: str, *, reference: str | None = None, path: str | None = None):
        super().__init__(message)
        self.message = message
        self.reference = reference
        self.path = path

    def locate(self, path: str) -> None:
        """Attach the flat path being expanded, keeping the innermost one."""
        if self.path is None:
            self.path = path

    def __str__(self) -> str:
        details = []
        if self.reference is not None:
            details.append(f"reference {self.reference!r}")
        if self.path is not None:
            details.append(f"at {self.path}")
        if not details:
            return self.message
        return f"{self.message} ({', '.join(details)})"


class MalformedReferenceError(ReferenceResolutionError):
    """The `$ref` value does not parse into a document part and a pointer."""


class UnknownDocumentError(ReferenceResolutionError):
    """The `$ref` names a document that is not in the registry."""


class UnresolvablePointerError(ReferenceResolutionError):
    """The pointer names a missing key and strict pointer resolution is enabled."""
