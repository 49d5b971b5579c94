"""CLI orchestration integration tests."""

from __future__ import annotations

import json
import shutil
from pathlib import Path

import yaml
from click.testing import CliRunner
from schema_docgen.cli import cli

SAMPLE_SCHEMA_DIR = Path(__file__).resolve().parents[3] / "samples" / "schema"


def _copy_samples(tmp_path: Path) -> Path:
    schema_dir = tmp_path / "schema"
    shutil.copytree(SAMPLE_SCHEMA_DIR, schema_dir)
    return schema_dir


def _write_config(tmp_path: Path, **output: object) -> Path:
    config = {
        "schema": {"entry": "schema/signalk.json", "definitions": "schema/definitions.json"},
        "output": {"directory": "docs", **output},
    }
    path = tmp_path / "schema-docgen.yaml"
    path.write_text(yaml.safe_dump(config), encoding="utf-8")
    return path


def test_generate_command_writes_markdown_documentation(tmp_path: Path) -> None:
    _copy_samples(tmp_path)
    config_path = _write_config(tmp_path)
    runner = CliRunner()

    result = runner.invoke(cli, ["generate", "--config", str(config_path)])

    assert result.exit_code == 0, result.output
    output_dir = tmp_path / "docs"
    assert str(output_dir.resolve()) in result.output
    assert "documented 12 properties in 13 files" in result.output
    index = (output_dir / "index.md").read_text(encoding="utf-8")
    assert "`/vessels/<RegExp>/navigation/position/longitude`" in index
    position = (output_dir / "vessels.RegExp.navigation.position.md").read_text(encoding="utf-8")
    assert "(vessels.RegExp.navigation.position.latitude.md)" in position


def test_generate_command_overrides_format_and_output_dir(tmp_path: Path) -> None:
    _copy_samples(tmp_path)
    config_path = _write_config(tmp_path)
    runner = CliRunner()

    result = runner.invoke(
        cli,
        [
            "generate",
            "--config",
            str(config_path),
            "--format",
            "html",
            "--output-dir",
            str(tmp_path / "site"),
        ],
    )

    assert result.exit_code == 0, result.output
    assert (tmp_path / "site" / "index.html").is_file()
    assert (tmp_path / "site" / "vessels.RegExp.name.html").is_file()
    assert not (tmp_path / "docs").exists()


def test_generate_command_reports_notices(tmp_path: Path) -> None:
    entry = tmp_path / "schema" / "tree.json"
    entry.parent.mkdir()
    entry.write_text(
        json.dumps(
            {
                "properties": {"node": {"$ref": "#/definitions/node"}},
                "definitions": {
                    "node": {"properties": {"next": {"$ref": "#/definitions/node"}}}
                },
            }
        ),
        encoding="utf-8",
    )
    runner = CliRunner()

    result = runner.invoke(
        cli, ["generate", "--entry", str(entry), "--output-dir", str(tmp_path / "docs")]
    )

    assert result.exit_code == 0, result.output
    assert "documented 2 properties in 3 files (1 notices)" in result.output


def test_paths_command_lists_sorted_flat_paths(tmp_path: Path) -> None:
    schema_dir = _copy_samples(tmp_path)
    runner = CliRunner()

    result = runner.invoke(cli, ["paths", "--entry", str(schema_dir / "signalk.json")])

    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines == sorted(lines)
    assert len(lines) == 12
    assert "/vessels/*/design/length" in lines


def test_paths_command_prints_resolved_nodes_as_json(tmp_path: Path) -> None:
    schema_dir = _copy_samples(tmp_path)
    runner = CliRunner()

    result = runner.invoke(
        cli, ["paths", "--entry", str(schema_dir / "signalk.json"), "--json"]
    )

    assert result.exit_code == 0, result.output
    path_map = json.loads(result.output)
    assert path_map["/vessels/*/design/length"]["type"] == "number"
    assert path_map["/vessels/*/navigation/position/latitude"]["units"] == "deg"


def test_generate_config_command_writes_scaffold(tmp_path: Path) -> None:
    runner = CliRunner()
    output_path = tmp_path / "schema-docgen.yaml"

    result = runner.invoke(cli, ["generate-config", "--output", str(output_path)])

    assert result.exit_code == 0, result.output
    assert str(output_path.resolve()) in result.output
    assert "<REQUIRED>" in output_path.read_text(encoding="utf-8")
