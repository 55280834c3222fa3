"""Unused module detector: orphaned and isolated modules plus cleanup recommendations."""

from __future__ import annotations

from terragraph.analysis.graph_models import DependencyGraph


def find_unused_modules(graph: DependencyGraph) -> dict:
    """Report modules nothing depends on.

    Returns: {orphaned, isolated, potential_cleanup, recommendations}
    """
    orphaned = [
        {
            "path": identity,
            "name": graph.modules[identity].name,
            "dependencies": len(graph.forward(identity)),
            "reason": "No other module depends on it",
        }
        for identity in graph.orphaned
    ]
    isolated = [
        {
            "path": identity,
            "name": graph.modules[identity].name,
            "reason": "Isolated module with no dependencies or dependents",
        }
        for identity in graph.isolated
    ]

    return {
        "orphaned": orphaned,
        "isolated": isolated,
        "potential_cleanup": len(orphaned) + len(isolated),
        "recommendations": _recommendations(len(orphaned), len(isolated)),
    }


def _recommendations(orphaned: int, isolated: int) -> list[dict]:
    recommendations: list[dict] = []

    if orphaned:
        recommendations.append({
            "action": "Review orphaned modules",
            "description": f"{orphaned} module(s) are not used by any other module",
        })

    if isolated:
        recommendations.append({
            "action": "Check isolated modules",
            "description": f"{isolated} module(s) have neither dependencies nor dependents",
        })

    if not orphaned and not isolated:
        recommendations.append({
            "action": "Keep current structure",
            "description": "Every module is referenced by another module",
        })

    return recommendations
