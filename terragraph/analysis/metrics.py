"""Graph metrics and dependency summaries for reports."""

from __future__ import annotations

from terragraph.analysis.graph_models import DependencyGraph


def summarize_dependencies(graph: DependencyGraph) -> dict:
    """Per-module dependency counts, direct edges and cycles.

    Returns: {modules, direct_dependencies, circular_dependencies, graph}
    """
    return {
        "modules": [
            {
                "path": identity,
                "name": node.name,
                "dependencies": len(graph.forward(identity)),
                "dependents": len(node.dependents),
            }
            for identity, node in graph.modules.items()
        ],
        "direct_dependencies": [e.to_dict() for e in graph.direct_edges()],
        "circular_dependencies": [list(c) for c in graph.cycles],
        "graph": graph.to_dict(),
    }


def compute_metrics(graph: DependencyGraph) -> dict:
    """Counts describing the shape of the graph."""
    modules = len(graph.modules)
    direct = graph.direct_edges()
    in_cycles = {identity for cycle in graph.cycles for identity in cycle}

    fan_in = {identity: len(node.dependents) for identity, node in graph.modules.items()}
    fan_out: dict[str, int] = {identity: 0 for identity in graph.modules}
    for edge in direct:
        fan_out[edge.source] += 1

    most_depended = sorted(
        (identity for identity in graph.modules if fan_in[identity] > 0),
        key=lambda i: (-fan_in[i], i),
    )

    return {
        "modules": modules,
        "internal_dependencies": len(direct),
        "external_dependencies": len(graph.unresolved),
        "transitive_dependencies": len(graph.transitive_edges()),
        "circular_dependencies": len(graph.cycles),
        "modules_in_cycles": len(in_cycles),
        "orphan_modules": len(graph.orphaned),
        "isolated_modules": len(graph.isolated),
        "max_fan_in": max(fan_in.values(), default=0),
        "max_fan_out": max(fan_out.values(), default=0),
        "average_dependencies": round(len(direct) / modules, 2) if modules else 0.0,
        "most_depended_on": [
            {"path": identity, "dependents": fan_in[identity]}
            for identity in most_depended[:10]
        ],
    }
