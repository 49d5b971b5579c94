"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, apply_overrides, default_settings, load_configuration
from .logging_settings import configure_logging
from .runtime_settings import GeneratorSettings, OutputSettings, SchemaSettings, TraversalSettings

__all__ = [
    "GeneratorSettings",
    "OutputSettings",
    "SchemaSettings",
    "TraversalSettings",
    "ConfigurationError",
    "apply_overrides",
    "configure_logging",
    "default_settings",
    "load_configuration",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
