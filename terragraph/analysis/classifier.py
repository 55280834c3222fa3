"""Orphaned and isolated module classification."""

from __future__ import annotations

from terragraph.analysis.graph_models import Classification, DependencyGraph, EdgeKind


def find_orphaned(graph: DependencyGraph) -> list[str]:
    """Modules that no other module directly depends on."""
    with_dependents: set[str] = set()
    for edge in graph.edges:
        if edge.kind is EdgeKind.DIRECT and edge.target in graph.modules:
            with_dependents.add(edge.target)
    return [identity for identity in graph.modules if identity not in with_dependents]


def find_isolated(graph: DependencyGraph) -> list[str]:
    """Modules with no direct edge in either direction."""
    connected: set[str] = set()
    for edge in graph.edges:
        if edge.kind is EdgeKind.DIRECT:
            connected.add(edge.source)
            connected.add(edge.target)
    return [identity for identity in graph.modules if identity not in connected]


def classify(graph: DependencyGraph) -> Classification:
    return Classification(orphaned=find_orphaned(graph), isolated=find_isolated(graph))
