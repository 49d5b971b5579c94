"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class SchemaSettings:
    """Where the schema documents come from and how their keys are normalized."""

    entry_path: Path
    definitions_path: Path | None
    base_url: str
    root_path: str
    encoding: str


@dataclass(frozen=True)
class TraversalSettings:
    """Limits applied while flattening the schema tree."""

    max_depth: int
    strict_pointers: bool


@dataclass(frozen=True)
class OutputSettings:
    """Documentation output configuration."""

    directory: Path
    output_format: str
    clean: bool
    title: str


@dataclass(frozen=True)
class GeneratorSettings:
    """Top-level configuration aggregate."""

    path: Path | None
    schema: SchemaSettings
    traversal: TraversalSettings
    output: OutputSettings
    debug: bool
