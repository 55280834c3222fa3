"""Dependency-graph construction and analysis."""

from terragraph.analysis.classifier import classify
from terragraph.analysis.cycles import detect_cycles
from terragraph.analysis.dependency_graph import DependencyGraphBuilder
from terragraph.analysis.graph_models import (
    Classification,
    DependencyEdge,
    DependencyGraph,
    EdgeKind,
    ModuleNode,
)
from terragraph.analysis.path_resolver import resolve
from terragraph.analysis.transitive import expand

__all__ = [
    "Classification",
    "DependencyEdge",
    "DependencyGraph",
    "DependencyGraphBuilder",
    "EdgeKind",
    "ModuleNode",
    "classify",
    "detect_cycles",
    "expand",
    "resolve",
]
