"""Documentation run use-case tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from schema_docgen.generation_run import (
    GenerationRequest,
    GenerationRunError,
    collect_flat_paths,
    execute_documentation_run,
    resolve_generator_settings,
)
from schema_docgen.path_flattening import NoticeKind

SAMPLE_ENTRY = Path(__file__).resolve().parents[3] / "samples" / "schema" / "signalk.json"


def _write_json(path: Path, document: dict) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


def _settings(tmp_path: Path, entry: Path = SAMPLE_ENTRY, **overrides):
    request = GenerationRequest(
        entry_path=str(entry), output_dir=str(tmp_path / "docs"), **overrides
    )
    return resolve_generator_settings(request)


def test_resolve_settings_applies_request_overrides(tmp_path: Path) -> None:
    settings = _settings(tmp_path, output_format="html", debug=True)

    assert settings.schema.entry_path == SAMPLE_ENTRY
    assert settings.output.directory == (tmp_path / "docs").resolve()
    assert settings.output.output_format == "html"
    assert settings.debug is True


def test_resolve_settings_wraps_configuration_errors(tmp_path: Path) -> None:
    request = GenerationRequest(config_path=str(tmp_path / "missing.yaml"))

    with pytest.raises(GenerationRunError, match="Configuration file not found"):
        resolve_generator_settings(request)


def test_collect_flat_paths_flattens_sample_schema(tmp_path: Path) -> None:
    result = collect_flat_paths(_settings(tmp_path))

    assert "/vessels/*/navigation/position/latitude" in result.paths()
    assert len(result) == 12
    assert result.notices == ()


def test_collect_flat_paths_reports_cycles_as_notices(tmp_path: Path, caplog) -> None:
    entry = _write_json(
        tmp_path / "schema" / "tree.json",
        {
            "properties": {"node": {"$ref": "#/definitions/node"}},
            "definitions": {
                "node": {
                    "type": "object",
                    "properties": {"child": {"$ref": "#/definitions/node"}},
                }
            },
        },
    )

    with caplog.at_level("WARNING"):
        result = collect_flat_paths(_settings(tmp_path, entry))

    assert result.paths() == ["/node", "/node/child"]
    assert [notice.kind for notice in result.notices] == [NoticeKind.RECURSION_LIMIT_EXCEEDED]
    assert "Reference cycle detected" in caplog.text


def test_collect_flat_paths_wraps_unknown_documents(tmp_path: Path) -> None:
    entry = _write_json(
        tmp_path / "schema" / "broken.json",
        {"properties": {"gone": {"$ref": "elsewhere.json#/definitions/x"}}},
    )

    with pytest.raises(GenerationRunError, match="Unknown schema document 'elsewhere.json'"):
        collect_flat_paths(_settings(tmp_path, entry))


def test_collect_flat_paths_wraps_load_errors(tmp_path: Path) -> None:
    with pytest.raises(GenerationRunError, match="Schema entry file not found"):
        collect_flat_paths(_settings(tmp_path, tmp_path / "absent.json"))


def test_execute_documentation_run_writes_pages_and_index(tmp_path: Path) -> None:
    stale = tmp_path / "docs" / "stale.md"
    stale.parent.mkdir(parents=True)
    stale.write_text("old", encoding="utf-8")

    outcome = execute_documentation_run(_settings(tmp_path))

    assert outcome.output_dir == (tmp_path / "docs").resolve()
    assert outcome.property_count == 12
    assert len(outcome.written_files) == 13
    assert not stale.exists()
    assert (outcome.output_dir / "index.md").is_file()
    assert (outcome.output_dir / "vessels.RegExp.navigation.position.latitude.md").is_file()


def test_execute_documentation_run_refuses_to_prune_schema_sources(tmp_path: Path) -> None:
    entry = _write_json(tmp_path / "schema" / "root.json", {"properties": {"a": {}}})
    request = GenerationRequest(entry_path=str(entry), output_dir=str(tmp_path))
    settings = resolve_generator_settings(request)

    with pytest.raises(GenerationRunError, match="Refusing to prune"):
        execute_documentation_run(settings)

    assert entry.exists()
