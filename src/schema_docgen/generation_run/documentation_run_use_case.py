"""Documentation generation use-case service."""

from __future__ import annotations

import logging

from schema_docgen.configuration import (
    ConfigurationError,
    GeneratorSettings,
    apply_overrides,
    default_settings,
    load_configuration,
)
from schema_docgen.output_writing import (
    OutputDirectoryError,
    prepare_output_directory,
    write_documentation,
)
from schema_docgen.path_flattening import FlattenResult, flatten_schema_tree
from schema_docgen.reference_resolution import ReferenceResolutionError, ReferenceResolver
from schema_docgen.schema_loading import SchemaLoadError, load_schema_registry

from .run_contracts import GenerationOutcome, GenerationRequest

_LOGGER = logging.getLogger(__name__)


class GenerationRunError(Exception):
    """Raised when a documentation run cannot be completed."""


def resolve_generator_settings(request: GenerationRequest) -> GeneratorSettings:
    """Build the immutable settings for one run from a config file and overrides."""
    try:
        settings = (
            load_configuration(request.config_path)
            if request.config_path
            else default_settings()
        )
        return apply_overrides(
            settings,
            entry_path=request.entry_path,
            output_dir=request.output_dir,
            output_format=request.output_format,
            debug=request.debug,
        )
    except (ConfigurationError, OSError) as exc:
        raise GenerationRunError(str(exc)) from exc


def collect_flat_paths(settings: GeneratorSettings) -> FlattenResult:
    """Load the schema documents and flatten the entry document."""
    schema = settings.schema
    extra_paths = (schema.definitions_path,) if schema.definitions_path else ()
    try:
        registry = load_schema_registry(
            schema.entry_path,
            extra_paths=extra_paths,
            base_url=schema.base_url,
            encoding=schema.encoding,
        )
        resolver = ReferenceResolver(
            registry,
            base_url=schema.base_url,
            strict_pointers=settings.traversal.strict_pointers,
        )
        result = flatten_schema_tree(
            registry.entry_document,
            registry,
            root_prefix=schema.root_path,
            max_depth=settings.traversal.max_depth,
            resolver=resolver,
        )
    except (SchemaLoadError, ReferenceResolutionError) as exc:
        raise GenerationRunError(str(exc)) from exc

    for notice in result.notices:
        _LOGGER.warning("%s at %s: %s", notice.kind.value, notice.path, notice.detail)
    _LOGGER.debug(
        "Flattened %d properties from %d schema documents", len(result), len(registry)
    )
    return result


def execute_documentation_run(settings: GeneratorSettings) -> GenerationOutcome:
    """Execute one full documentation run and return the run outcome."""
    result = collect_flat_paths(settings)
    protected = [settings.schema.entry_path.parent]
    if settings.schema.definitions_path is not None:
        protected.append(settings.schema.definitions_path)
    if settings.path is not None:
        protected.append(settings.path)

    try:
        output_dir = prepare_output_directory(
            settings.output.directory, clean=settings.output.clean, protected=protected
        )
        written_files = write_documentation(
            result,
            output_dir,
            output_format=settings.output.output_format,
            encoding=settings.schema.encoding,
            title=settings.output.title,
        )
    except (OutputDirectoryError, OSError, ValueError) as exc:
        raise GenerationRunError(str(exc)) from exc

    return GenerationOutcome(
        output_dir=output_dir,
        written_files=written_files,
        property_count=len(result),
        notices=result.notices,
    )
