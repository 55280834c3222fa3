"""Data models for the terragraph pipeline."""

from __future__ import annotations

import posixpath
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Union

# Literal values carried from an ``inputs = { ... }`` block. Never evaluated.
InputValue = Union[str, int, float, bool, None, list, dict]

DEFAULT_CONFIG_FILENAME = "terragrunt.hcl"


class ModuleContractError(ValueError):
    """A module record handed to the graph builder breaks the record contract."""


@dataclass(frozen=True)
class ModuleRecord:
    """Result from the extractor stage: one discovered configuration unit."""
    identity: str
    declared_source: str | None = None
    declared_dependency_paths: tuple[str, ...] = ()
    inputs: Mapping[str, InputValue] = field(default_factory=dict)
    version_constraint: str | None = None

    @property
    def name(self) -> str:
        return posixpath.basename(posixpath.dirname(self.identity)) or self.identity


@dataclass
class AnalysisConfig:
    """Configuration for the analysis pipeline."""
    source_dir: Path = field(default_factory=lambda: Path("."))
    config_filename: str = DEFAULT_CONFIG_FILENAME
    include_transitive: bool = True
    skip_dirs: list[str] = field(default_factory=lambda: [
        ".terragrunt-cache", ".terraform", ".git", "node_modules",
        ".venv", "venv", "__pycache__",
    ])
