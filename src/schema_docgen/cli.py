"""Command line interface entry point."""

from __future__ import annotations

import json
import sys

import click

from schema_docgen.configuration import (
    DEFAULT_CONFIG_FILENAME,
    configure_logging,
    write_placeholder_configuration,
)
from schema_docgen.documentation_rendering import OUTPUT_SUFFIXES
from schema_docgen.generation_run import (
    GenerationRequest,
    GenerationRunError,
    collect_flat_paths,
    execute_documentation_run,
    resolve_generator_settings,
)


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="schema-docgen")
def cli() -> None:
    """Generate documentation from interlinked JSON Schema documents."""


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML generator configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML generator configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="generate")
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON generator configuration file",
)
@click.option(
    "--entry",
    "entry_path",
    required=False,
    type=click.Path(path_type=str),
    help="Root schema document (overrides schema.entry)",
)
@click.option(
    "--output-dir",
    "output_dir",
    required=False,
    type=click.Path(path_type=str),
    help="Directory for generated documentation (overrides output.directory)",
)
@click.option(
    "--format",
    "output_format",
    required=False,
    type=click.Choice(sorted(OUTPUT_SUFFIXES)),
    help="Documentation output format (overrides output.format)",
)
@click.option("--debug", is_flag=True, default=False, help="Log reference resolution details.")
def generate(
    config_path: str | None,
    entry_path: str | None,
    output_dir: str | None,
    output_format: str | None,
    debug: bool,
) -> None:
    """Write one documentation page per flattened property plus an index."""
    request = GenerationRequest(
        config_path=config_path,
        entry_path=entry_path,
        output_dir=output_dir,
        output_format=output_format,
        debug=debug or None,
    )
    try:
        settings = resolve_generator_settings(request)
        configure_logging(settings.debug)
        outcome = execute_documentation_run(settings)
    except GenerationRunError as exc:
        raise CliError(str(exc)) from exc
    file_count = len(outcome.written_files)
    summary = f"documented {outcome.property_count} properties in {file_count} files"
    if outcome.notices:
        summary = f"{summary} ({len(outcome.notices)} notices)"
    click.echo(str(outcome.output_dir))
    click.echo(summary)


@cli.command(name="paths")
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON generator configuration file",
)
@click.option(
    "--entry",
    "entry_path",
    required=False,
    type=click.Path(path_type=str),
    help="Root schema document (overrides schema.entry)",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print the flat path to resolved node mapping as JSON.",
)
@click.option("--debug", is_flag=True, default=False, help="Log reference resolution details.")
def paths(config_path: str | None, entry_path: str | None, as_json: bool, debug: bool) -> None:
    """Print the flattened property paths of the schema."""
    request = GenerationRequest(
        config_path=config_path, entry_path=entry_path, debug=debug or None
    )
    try:
        settings = resolve_generator_settings(request)
        configure_logging(settings.debug)
        result = collect_flat_paths(settings)
    except GenerationRunError as exc:
        raise CliError(str(exc)) from exc

    if as_json:
        click.echo(json.dumps(result.path_map(), indent=2, sort_keys=True, ensure_ascii=False))
        return
    for path in sorted(result.paths()):
        click.echo(path)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
