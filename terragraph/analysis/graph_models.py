"""Data models for the dependency graph."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from terragraph.models import ModuleRecord


class EdgeKind(enum.Enum):
    DIRECT = "direct"
    TRANSITIVE = "transitive"


@dataclass(frozen=True)
class DependencyEdge:
    source: str
    target: str
    kind: EdgeKind = EdgeKind.DIRECT

    def to_dict(self) -> dict:
        return {"from": self.source, "to": self.target, "kind": self.kind.value}


@dataclass
class ModuleNode:
    record: ModuleRecord
    dependents: list[str] = field(default_factory=list)

    @property
    def identity(self) -> str:
        return self.record.identity

    @property
    def name(self) -> str:
        return self.record.name


@dataclass(frozen=True)
class UnresolvedReference:
    source: str
    raw_path: str
    resolved_path: str


@dataclass
class Classification:
    orphaned: list[str] = field(default_factory=list)
    isolated: list[str] = field(default_factory=list)


@dataclass
class TransitiveDeps:
    root_id: str
    direct: set[str] = field(default_factory=set)
    all_transitive: set[str] = field(default_factory=set)


@dataclass
class DependencyGraph:
    modules: dict[str, ModuleNode] = field(default_factory=dict)  # identity -> node
    edges: list[DependencyEdge] = field(default_factory=list)
    cycles: list[list[str]] = field(default_factory=list)
    orphaned: list[str] = field(default_factory=list)
    isolated: list[str] = field(default_factory=list)
    unresolved: list[UnresolvedReference] = field(default_factory=list)
    _edge_index: set[DependencyEdge] = field(default_factory=set, init=False, repr=False, compare=False)

    def add_edge(self, edge: DependencyEdge) -> bool:
        """Add an edge unless an equal one is already present."""
        if edge in self._edge_index:
            return False
        self._edge_index.add(edge)
        self.edges.append(edge)
        return True

    def has_edge(self, edge: DependencyEdge) -> bool:
        return edge in self._edge_index

    def direct_edges(self) -> list[DependencyEdge]:
        return [e for e in self.edges if e.kind is EdgeKind.DIRECT]

    def transitive_edges(self) -> list[DependencyEdge]:
        return [e for e in self.edges if e.kind is EdgeKind.TRANSITIVE]

    def forward(self, identity: str) -> list[str]:
        """Direct dependencies of a module, in declaration order."""
        return [e.target for e in self.edges if e.kind is EdgeKind.DIRECT and e.source == identity]

    def to_dict(self) -> dict:
        modules = {}
        for identity, node in self.modules.items():
            modules[identity] = {
                "identity": identity,
                "name": node.name,
                "source": node.record.declared_source,
                "dependencies": list(node.record.declared_dependency_paths),
                "dependents": list(node.dependents),
                "inputs": dict(node.record.inputs),
            }
        return {
            "modules": modules,
            "edges": [e.to_dict() for e in self.edges],
            "cycles": [list(c) for c in self.cycles],
            "orphaned": list(self.orphaned),
            "isolated": list(self.isolated),
        }
