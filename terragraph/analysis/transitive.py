"""Transitive closure over direct dependency edges."""

from __future__ import annotations

from typing import Iterable

from terragraph.analysis.graph_models import DependencyEdge, EdgeKind


def _adjacency(edges: Iterable[DependencyEdge]) -> dict[str, list[str]]:
    adjacency: dict[str, list[str]] = {}
    for edge in edges:
        if edge.kind is not EdgeKind.DIRECT:
            continue
        targets = adjacency.setdefault(edge.source, [])
        if edge.target not in targets:
            targets.append(edge.target)
    return adjacency


def expand(edges: Iterable[DependencyEdge]) -> list[DependencyEdge]:
    """Return the TRANSITIVE edges implied by the DIRECT edges in ``edges``.

    For every source, nodes reachable through two or more direct hops become
    transitive edges, except the source itself and its direct targets.
    TRANSITIVE edges in the input are ignored, so merging the result and
    calling ``expand`` again yields the same edges.
    """
    adjacency = _adjacency(edges)
    result: list[DependencyEdge] = []
    seen: set[tuple[str, str]] = set()

    for source, direct_targets in adjacency.items():
        direct = set(direct_targets)
        visited: set[str] = set()
        stack = list(reversed(direct_targets))

        while stack:
            current = stack.pop()
            if current in visited:
                continue
            visited.add(current)

            for target in adjacency.get(current, []):
                if target not in direct and target != source and (source, target) not in seen:
                    seen.add((source, target))
                    result.append(DependencyEdge(source, target, EdgeKind.TRANSITIVE))
                if target not in visited:
                    stack.append(target)

    return result
