"""Generation run entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from schema_docgen.path_flattening import TraversalNotice


@dataclass(frozen=True)
class GenerationRequest:
    """Input contract for resolving the settings of one run."""

    config_path: str | None = None
    entry_path: str | None = None
    output_dir: str | None = None
    output_format: str | None = None
    debug: bool | None = None


@dataclass(frozen=True)
class GenerationOutcome:
    """Output contract for one completed run."""

    output_dir: Path
    written_files: tuple[Path, ...]
    property_count: int
    notices: tuple[TraversalNotice, ...]
