"""Reference resolution exports."""

from .reference_models import (
    MalformedReferenceError,
    Reference,
    ReferenceResolutionError,
    ResolvedReference,
    UnknownDocumentError,
    UnresolvablePointerError,
)
from .reference_parser import format_pointer, parse_pointer, parse_reference
from .reference_resolver import ReferenceResolver

__all__ = [
    "MalformedReferenceError",
    "Reference",
    "ReferenceResolutionError",
    "ReferenceResolver",
    "ResolvedReference",
    "UnknownDocumentError",
    "UnresolvablePointerError",
    "format_pointer",
    "parse_pointer",
    "parse_reference",
]
