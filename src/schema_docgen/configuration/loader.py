"""Configuration loader service."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from schema_docgen.documentation_rendering import DEFAULT_TITLE, OUTPUT_SUFFIXES
from schema_docgen.path_flattening import DEFAULT_MAX_DEPTH

from .runtime_settings import GeneratorSettings, OutputSettings, SchemaSettings, TraversalSettings

DEFAULT_ENTRY_PATH = "./schema/signalk.json"
DEFAULT_DEFINITIONS_PATH = "./schema/definitions.json"
DEFAULT_OUTPUT_DIRECTORY = "./build"
DEFAULT_OUTPUT_FORMAT = "markdown"
DEFAULT_ENCODING = "utf-8"


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> GeneratorSettings:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    base_path = path.resolve().parent
    logging_section = _optional_mapping(parsed.get("logging"), "logging")
    return GeneratorSettings(
        path=path.resolve(),
        schema=_parse_schema_section(parsed.get("schema"), base_path),
        traversal=_parse_traversal_section(parsed.get("traversal")),
        output=_parse_output_section(parsed.get("output"), base_path),
        debug=_optional_bool(logging_section.get("debug"), "logging.debug", default=False),
    )


def default_settings(cwd: Path | str | None = None) -> GeneratorSettings:
    """Return settings built from the conventional project layout under `cwd`."""
    base_path = Path(cwd).resolve() if cwd is not None else Path.cwd().resolve()
    definitions = _resolve_path(base_path, DEFAULT_DEFINITIONS_PATH)
    return GeneratorSettings(
        path=None,
        schema=SchemaSettings(
            entry_path=_resolve_path(base_path, DEFAULT_ENTRY_PATH),
            definitions_path=definitions if definitions.is_file() else None,
            base_url="",
            root_path="/",
            encoding=DEFAULT_ENCODING,
        ),
        traversal=TraversalSettings(max_depth=DEFAULT_MAX_DEPTH, strict_pointers=False),
        output=OutputSettings(
            directory=_resolve_path(base_path, DEFAULT_OUTPUT_DIRECTORY),
            output_format=DEFAULT_OUTPUT_FORMAT,
            clean=True,
            title=DEFAULT_TITLE,
        ),
        debug=False,
    )


def apply_overrides(
    settings: GeneratorSettings,
    *,
    entry_path: Path | str | None = None,
    output_dir: Path | str | None = None,
    output_format: str | None = None,
    debug: bool | None = None,
) -> GeneratorSettings:
    """Return a copy of `settings` with command line overrides applied."""
    schema = settings.schema
    output = settings.output
    if entry_path is not None:
        schema = dataclasses.replace(schema, entry_path=Path(entry_path).resolve())
    if output_dir is not None:
        output = dataclasses.replace(output, directory=Path(output_dir).resolve())
    if output_format is not None:
        output = dataclasses.replace(
            output, output_format=_require_output_format(output_format, "output.format")
        )
    return dataclasses.replace(
        settings,
        schema=schema,
        output=output,
        debug=settings.debug if debug is None else debug,
    )


def _parse_schema_section(value: Any, base_path: Path) -> SchemaSettings:
    section = _require_mapping(value, "schema")
    entry = _require_non_empty_string(section.get("entry"), "schema.entry")
    definitions = _optional_string(section.get("definitions"), "schema.definitions")
    base_url = _optional_string(section.get("base_url"), "schema.base_url") or ""
    root_path = _optional_string(section.get("root_path"), "schema.root_path") or "/"
    if not root_path.startswith("/"):
        raise ConfigurationError("schema.root_path must start with '/'.")
    encoding = _optional_string(section.get("encoding"), "schema.encoding") or DEFAULT_ENCODING

    definitions_path = _resolve_path(base_path, definitions) if definitions else None
    if definitions_path is not None and not definitions_path.is_file():
        raise ConfigurationError(f"Definitions file not found: {definitions_path}")

    return SchemaSettings(
        entry_path=_resolve_path(base_path, entry),
        definitions_path=definitions_path,
        base_url=base_url,
        root_path=root_path,
        encoding=encoding,
    )


def _parse_traversal_section(value: Any) -> TraversalSettings:
    section = _optional_mapping(value, "traversal")
    max_depth = _require_positive_int(
        section.get("max_depth", DEFAULT_MAX_DEPTH), "traversal.max_depth"
    )
    strict_pointers = _optional_bool(
        section.get("strict_pointers"), "traversal.strict_pointers", default=False
    )
    return TraversalSettings(max_depth=max_depth, strict_pointers=strict_pointers)


def _parse_output_section(value: Any, base_path: Path) -> OutputSettings:
    section = _optional_mapping(value, "output")
    directory = (
        _optional_string(section.get("directory"), "output.directory") or DEFAULT_OUTPUT_DIRECTORY
    )
    output_format = _require_output_format(
        section.get("format", DEFAULT_OUTPUT_FORMAT), "output.format"
    )
    clean = _optional_bool(section.get("clean"), "output.clean", default=True)
    title = _optional_string(section.get("title"), "output.title") or DEFAULT_TITLE
    return OutputSettings(
        directory=_resolve_path(base_path, directory),
        output_format=output_format,
        clean=clean,
        title=title,
    )


def _require_output_format(value: Any, field_name: str) -> str:
    output_format = _require_non_empty_string(value, field_name).lower()
    if output_format not in OUTPUT_SUFFIXES:
        supported = ", ".join(sorted(OUTPUT_SUFFIXES))
        raise ConfigurationError(f"{field_name} must be one of: {supported}.")
    return output_format


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _optional_bool(value: Any, field_name: str, *, default: bool) -> bool:
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a boolean.")
    return value


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
