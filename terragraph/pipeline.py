"""3-stage pipeline orchestrator: scan -> extract -> build graph."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from terragraph.models import AnalysisConfig, ModuleRecord
from terragraph.scanner import scan_directory
from terragraph.extractor import extract_record
from terragraph.analysis.dependency_graph import DependencyGraphBuilder
from terragraph.analysis.graph_models import DependencyGraph

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, int, int], None]


def _check_source_dir(config: AnalysisConfig) -> Path:
    source_dir = Path(config.source_dir)
    if not source_dir.is_dir():
        raise ValueError(f"Project directory not found: {source_dir}")
    return source_dir.resolve()


def run_scan(config: AnalysisConfig, progress: ProgressCallback | None = None) -> list[Path]:
    """Stage 1: Scan the project directory for module config files."""
    source_dir = _check_source_dir(config)
    if progress:
        progress("Scanning", 0, 1)
    files = scan_directory(
        source_dir, skip_dirs=config.skip_dirs, config_filename=config.config_filename,
    )
    if progress:
        progress("Scanning", 1, 1)
    logger.info("Found %d module(s) under %s", len(files), source_dir)
    return files


def load_records(
    config: AnalysisConfig,
    progress: ProgressCallback | None = None,
) -> list[ModuleRecord]:
    """Stages 1-2: scan and extract one record per module file.

    Files that cannot be read are logged and skipped.
    """
    files = run_scan(config, progress=progress)

    records: list[ModuleRecord] = []
    for i, path in enumerate(files):
        if progress:
            progress("Extracting", i, len(files))
        try:
            records.append(extract_record(path))
        except (OSError, ValueError) as e:
            logger.warning("Skipping %s: %s", path, e)
            if progress:
                progress(f"Extract error ({path}): {e}", i, len(files))

    if progress:
        progress("Extracting", len(files), len(files))
    return records


def run_analysis(
    config: AnalysisConfig,
    progress: ProgressCallback | None = None,
) -> DependencyGraph:
    """Run the full analysis and return the finished graph."""
    records = load_records(config, progress=progress)

    if progress:
        progress("Building graph", 0, 1)
    builder = DependencyGraphBuilder(
        config_filename=config.config_filename,
        include_transitive=config.include_transitive,
    )
    graph = builder.build(records)
    if progress:
        progress("Building graph", 1, 1)
    return graph
