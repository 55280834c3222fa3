"""Cycle detection over direct dependency edges."""

from __future__ import annotations

from terragraph.analysis.graph_models import DependencyGraph, EdgeKind


def _direct_adjacency(graph: DependencyGraph) -> dict[str, list[str]]:
    adjacency: dict[str, list[str]] = {}
    for edge in graph.edges:
        if edge.kind is EdgeKind.DIRECT:
            adjacency.setdefault(edge.source, []).append(edge.target)
    return adjacency


def detect_cycles(graph: DependencyGraph) -> list[list[str]]:
    """Detect cycles among DIRECT edges using an iterative DFS.

    Each cycle is a closed walk ``[a, b, ..., a]``. The visited set is shared
    across roots, so every edge is followed once and every back edge yields a
    different cycle: a cycle reached from several entry points is reported
    once, from the first root that reaches it.
    """
    adjacency = _direct_adjacency(graph)
    cycles: list[list[str]] = []
    visited: set[str] = set()

    for root in graph.modules:
        if root in visited:
            continue

        path: list[str] = [root]
        position: dict[str, int] = {root: 0}  # recursion stack: node -> index in path
        frames = [iter(adjacency.get(root, []))]
        visited.add(root)

        while frames:
            neighbor = next(frames[-1], None)
            if neighbor is None:
                frames.pop()
                position.pop(path.pop())
                continue

            if neighbor in position:
                cycles.append(path[position[neighbor]:] + [neighbor])
            elif neighbor not in visited:
                visited.add(neighbor)
                position[neighbor] = len(path)
                path.append(neighbor)
                frames.append(iter(adjacency.get(neighbor, [])))

    return cycles
