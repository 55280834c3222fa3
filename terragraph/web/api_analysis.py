"""Analysis API: dependency graph, cycles, unused modules, metrics."""

from __future__ import annotations

import asyncio
from pathlib import Path

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from terragraph.models import AnalysisConfig
from terragraph.pipeline import run_analysis
from terragraph.analysis.graph_models import DependencyGraph
from terragraph.analysis.metrics import compute_metrics, summarize_dependencies
from terragraph.analysis.unused import find_unused_modules

router = APIRouter(prefix="/api/analysis")


class ProjectRequest(BaseModel):
    path: str
    include_transitive: bool = True


def _build_graph(req: ProjectRequest) -> DependencyGraph:
    """Every request gets its own graph; nothing is shared between runs."""
    source_dir = Path(req.path)
    if not source_dir.is_dir():
        raise HTTPException(404, f"Project directory not found: {req.path}")
    config = AnalysisConfig(source_dir=source_dir, include_transitive=req.include_transitive)
    return run_analysis(config)


@router.post("/dependencies")
async def dependencies(req: ProjectRequest):
    graph = await asyncio.to_thread(_build_graph, req)
    return summarize_dependencies(graph)


@router.post("/cycles")
async def cycles(req: ProjectRequest):
    graph = await asyncio.to_thread(_build_graph, req)
    return {
        "has_cycles": bool(graph.cycles),
        "cycles": graph.cycles,
    }


@router.post("/unused")
async def unused(req: ProjectRequest):
    graph = await asyncio.to_thread(_build_graph, req)
    return find_unused_modules(graph)


@router.post("/metrics")
async def metrics(req: ProjectRequest):
    graph = await asyncio.to_thread(_build_graph, req)
    return compute_metrics(graph)
