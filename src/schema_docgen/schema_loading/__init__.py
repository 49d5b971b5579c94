"""Schema loading exports."""

from .document_keys import normalize_document_key, resolve_document_part
from .registry_loader import SchemaLoadError, collect_referenced_document_keys, load_schema_registry
from .registry_models import SchemaRegistry

__all__ = [
    "SchemaLoadError",
    "SchemaRegistry",
    "collect_referenced_document_keys",
    "load_schema_registry",
    "normalize_document_key",
    "resolve_document_part",
]
