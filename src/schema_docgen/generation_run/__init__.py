"""Generation run domain exports."""

from .documentation_run_use_case import (
    GenerationRunError,
    collect_flat_paths,
    execute_documentation_run,
    resolve_generator_settings,
)
from .run_contracts import GenerationOutcome, GenerationRequest

__all__ = [
    "GenerationOutcome",
    "GenerationRequest",
    "GenerationRunError",
    "collect_flat_paths",
    "execute_documentation_run",
    "resolve_generator_settings",
]
