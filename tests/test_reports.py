"""Tests for unused-module reports, dependency summaries and metrics."""

from terragraph.models import ModuleRecord
from terragraph.analysis.dependency_graph import DependencyGraphBuilder
from terragraph.analysis.metrics import compute_metrics, summarize_dependencies
from terragraph.analysis.unused import find_unused_modules


def _record(name, deps=()):
    return ModuleRecord(
        identity=f"/p/{name}/terragrunt.hcl",
        declared_dependency_paths=tuple(deps),
    )


def _graph(*records):
    return DependencyGraphBuilder().build(records)


class TestUnusedModules:
    def test_report(self):
        graph = _graph(_record("app", ["../vpc"]), _record("vpc"), _record("lonely"))
        report = find_unused_modules(graph)
        assert [o["path"] for o in report["orphaned"]] == [
            "/p/app/terragrunt.hcl", "/p/lonely/terragrunt.hcl",
        ]
        assert report["orphaned"][0]["dependencies"] == 1
        assert [i["name"] for i in report["isolated"]] == ["lonely"]
        assert report["potential_cleanup"] == 3
        actions = [r["action"] for r in report["recommendations"]]
        assert actions == ["Review orphaned modules", "Check isolated modules"]

    def test_all_used(self):
        graph = _graph(_record("a", ["../b"]), _record("b", ["../a"]))
        report = find_unused_modules(graph)
        assert report["orphaned"] == []
        assert report["isolated"] == []
        assert report["potential_cleanup"] == 0
        assert report["recommendations"][0]["action"] == "Keep current structure"

    def test_empty(self):
        report = find_unused_modules(_graph())
        assert report["potential_cleanup"] == 0


class TestMetrics:
    def test_compute(self):
        graph = _graph(
            _record("app", ["../db", "../vpc", "../external"]),
            _record("db", ["../vpc"]),
            _record("vpc"),
            _record("a", ["../b"]),
            _record("b", ["../a"]),
        )
        metrics = compute_metrics(graph)
        assert metrics["modules"] == 5
        assert metrics["internal_dependencies"] == 5
        assert metrics["external_dependencies"] == 1
        assert metrics["transitive_dependencies"] == 0
        assert metrics["circular_dependencies"] == 1
        assert metrics["modules_in_cycles"] == 2
        assert metrics["orphan_modules"] == 1
        assert metrics["isolated_modules"] == 0
        assert metrics["max_fan_in"] == 2
        assert metrics["max_fan_out"] == 2
        assert metrics["average_dependencies"] == 1.0
        assert metrics["most_depended_on"][0] == {"path": "/p/vpc/terragrunt.hcl", "dependents": 2}

    def test_empty(self):
        metrics = compute_metrics(_graph())
        assert metrics["modules"] == 0
        assert metrics["average_dependencies"] == 0.0
        assert metrics["max_fan_in"] == 0
        assert metrics["most_depended_on"] == []

    def test_summary(self):
        graph = _graph(_record("x", ["../y"]), _record("y", ["../z"]), _record("z"))
        summary = summarize_dependencies(graph)
        counts = {m["name"]: (m["dependencies"], m["dependents"]) for m in summary["modules"]}
        assert counts == {"x": (1, 0), "y": (1, 1), "z": (0, 1)}
        assert len(summary["direct_dependencies"]) == 2
        assert all(e["kind"] == "direct" for e in summary["direct_dependencies"])
        assert summary["circular_dependencies"] == []
        assert summary["graph"] == graph.to_dict()
