"""Dependency graph builder: builds graph from ModuleRecords, resolves transitive deps, detects cycles."""

from __future__ import annotations

import logging
from collections import deque
from typing import Iterable

from terragraph.models import DEFAULT_CONFIG_FILENAME, ModuleContractError, ModuleRecord
from terragraph.analysis import path_resolver
from terragraph.analysis.classifier import classify
from terragraph.analysis.cycles import detect_cycles
from terragraph.analysis.graph_models import (
    DependencyEdge,
    DependencyGraph,
    EdgeKind,
    ModuleNode,
    TransitiveDeps,
    UnresolvedReference,
)
from terragraph.analysis.transitive import expand

logger = logging.getLogger(__name__)


class DependencyGraphBuilder:
    """Build a dependency graph from extracted module records.

    Holds configuration only; every ``build`` call works on a fresh graph.
    """

    def __init__(
        self,
        config_filename: str = DEFAULT_CONFIG_FILENAME,
        include_transitive: bool = True,
    ):
        self.config_filename = config_filename
        self.include_transitive = include_transitive

    def build(self, records: Iterable[ModuleRecord]) -> DependencyGraph:
        records = list(records)
        for record in records:
            self._validate(record)

        graph = DependencyGraph()

        # Step 1: Module table, last registration wins
        for record in records:
            if record.identity in graph.modules:
                logger.warning(
                    "Duplicate module identity %s: replacing earlier record", record.identity,
                )
            graph.modules[record.identity] = ModuleNode(record=record)

        dir_index = self._directory_index(graph)

        # Step 2: Direct edges from declared dependency paths
        for identity, node in graph.modules.items():
            for raw_path in node.record.declared_dependency_paths:
                resolved = path_resolver.resolve(raw_path, identity)
                target = self._find_module(resolved, graph, dir_index)
                if target is None:
                    logger.debug("Unresolved dependency %r from %s (resolved to %s)",
                                 raw_path, identity, resolved)
                    graph.unresolved.append(UnresolvedReference(identity, raw_path, resolved))
                    continue
                self._add_edge(graph, identity, target)

        # Step 3: Transitive edges
        if self.include_transitive:
            for edge in expand(graph.edges):
                graph.add_edge(edge)

        # Step 4: Cycles and classification
        graph.cycles = detect_cycles(graph)
        classification = classify(graph)
        graph.orphaned = classification.orphaned
        graph.isolated = classification.isolated

        logger.info(
            "Built dependency graph: %d modules, %d direct edges, %d transitive edges, "
            "%d cycles, %d unresolved references",
            len(graph.modules), len(graph.direct_edges()), len(graph.transitive_edges()),
            len(graph.cycles), len(graph.unresolved),
        )
        return graph

    def resolve_transitive(self, graph: DependencyGraph, root_id: str) -> TransitiveDeps:
        """BFS over direct edges to find everything ``root_id`` depends on."""
        result = TransitiveDeps(root_id=root_id)
        if root_id not in graph.modules:
            return result

        result.direct = set(graph.forward(root_id))

        visited = {root_id}
        queue = deque([root_id])
        while queue:
            current = queue.popleft()
            for neighbor in graph.forward(current):
                if neighbor not in visited:
                    visited.add(neighbor)
                    result.all_transitive.add(neighbor)
                    queue.append(neighbor)

        result.all_transitive.discard(root_id)
        return result

    def _find_module(
        self,
        target_path: str,
        graph: DependencyGraph,
        dir_index: dict[str, str],
    ) -> str | None:
        # Exact identity
        if target_path in graph.modules:
            return target_path

        # Directory holding the canonical config file
        config_path = path_resolver.join(target_path, self.config_filename)
        if config_path in graph.modules:
            return config_path

        # Any module living in the target directory
        if target_path.endswith("/" + self.config_filename):
            target_dir = path_resolver.containing_directory(target_path)
        else:
            target_dir = target_path
        return dir_index.get(target_dir)

    @staticmethod
    def _directory_index(graph: DependencyGraph) -> dict[str, str]:
        """First registered module per containing directory."""
        index: dict[str, str] = {}
        for identity in graph.modules:
            index.setdefault(path_resolver.containing_directory(identity), identity)
        return index

    @staticmethod
    def _add_edge(graph: DependencyGraph, source_id: str, target_id: str) -> None:
        edge = DependencyEdge(source=source_id, target=target_id, kind=EdgeKind.DIRECT)
        # Avoid duplicate edges; dependents stay in step with direct edges
        if graph.add_edge(edge):
            graph.modules[target_id].dependents.append(source_id)

    @staticmethod
    def _validate(record: object) -> None:
        if not isinstance(record, ModuleRecord):
            raise ModuleContractError(f"Expected a ModuleRecord, got {type(record).__name__}")
        if not path_resolver.is_well_formed(record.identity):
            raise ModuleContractError(f"Module identity is not a path string: {record.identity!r}")
        if not isinstance(record.declared_dependency_paths, (tuple, list)):
            raise ModuleContractError(
                f"Module {record.identity} dependency paths must be a tuple or list, "
                f"got {type(record.declared_dependency_paths).__name__}"
            )
        for raw_path in record.declared_dependency_paths:
            if not path_resolver.is_well_formed(raw_path):
                raise ModuleContractError(
                    f"Module {record.identity} declares a malformed dependency path: {raw_path!r}"
                )
