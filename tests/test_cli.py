"""Tests for the click CLI."""

import json
from pathlib import Path

from click.testing import CliRunner

from terragraph.cli import cli

FIXTURES = Path(__file__).parent / "fixtures" / "project"


def _run(*args):
    return CliRunner().invoke(cli, list(args))


def test_version():
    result = _run("--version")
    assert result.exit_code == 0
    assert "0.1.0" in result.output


def test_scan():
    result = _run("scan", str(FIXTURES))
    assert result.exit_code == 0
    assert "Found 6 module(s)" in result.output
    assert "live/database" in result.output


def test_scan_empty(tmp_path):
    result = _run("scan", str(tmp_path))
    assert result.exit_code == 0
    assert "No Terragrunt modules found." in result.output


def test_scan_missing_dir(tmp_path):
    result = _run("scan", str(tmp_path / "missing"))
    assert result.exit_code != 0


def test_deps_text():
    result = _run("deps", str(FIXTURES))
    assert result.exit_code == 0
    assert "6 module(s)" in result.output
    assert "transitive edges: 1" in result.output
    assert "unresolved references: 1" in result.output


def test_deps_json():
    result = _run("deps", str(FIXTURES), "--format", "json")
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert len(data["modules"]) == 6
    kinds = sorted(e["kind"] for e in data["edges"])
    assert kinds == ["direct"] * 4 + ["transitive"]
    assert data["metrics"]["circular_dependencies"] == 1


def test_deps_json_no_transitive():
    result = _run("deps", str(FIXTURES), "-f", "json", "--no-transitive")
    data = json.loads(result.output)
    assert all(e["kind"] == "direct" for e in data["edges"])


def test_cycles_found():
    result = _run("cycles", str(FIXTURES))
    assert result.exit_code == 1
    assert "Found 1 circular dependency" in result.output
    assert "live/cycle-a -> live/cycle-b -> live/cycle-a" in result.output


def test_cycles_none(tmp_path):
    (tmp_path / "solo").mkdir()
    (tmp_path / "solo" / "terragrunt.hcl").write_text("")
    result = _run("cycles", str(tmp_path))
    assert result.exit_code == 0
    assert "No circular dependencies." in result.output


def test_unused_text():
    result = _run("unused", str(FIXTURES))
    assert result.exit_code == 0
    assert "Orphaned (2):" in result.output
    assert "Isolated (1):" in result.output
    assert "live/standalone" in result.output


def test_unused_json():
    result = _run("unused", str(FIXTURES), "--format", "json")
    data = json.loads(result.output)
    assert [i["name"] for i in data["isolated"]] == ["standalone"]
    assert data["potential_cleanup"] == 3
