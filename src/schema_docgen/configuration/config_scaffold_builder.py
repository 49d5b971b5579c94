"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "schema-docgen.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Generator configuration for schema-docgen.
# Replace every <REQUIRED> placeholder before running generate or paths.
# Remove or fill <OPTIONAL> entries; relative paths resolve against this file.

schema:
  # Root schema document; referenced documents are loaded from its directory.
  entry: "<REQUIRED>"
  # Extra document registered even when nothing references it.
  # definitions: "<OPTIONAL>"
  # URL prefix stripped from $ref values, e.g. https://example.org/schemas/
  # base_url: "<OPTIONAL>"
  root_path: "/"
  encoding: "utf-8"

traversal:
  # Flat paths longer than this are truncated and reported.
  max_depth: 64
  # Fail on pointers naming missing keys instead of using the deepest node reached.
  strict_pointers: false

output:
  directory: "./build"
  # markdown or html
  format: "markdown"
  # Prune the output directory before writing.
  clean: true
  title: "Schema documentation"

logging:
  debug: false
"""


def build_placeholder_configuration() -> str:
    """Build a YAML generator configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
