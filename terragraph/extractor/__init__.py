"""Extractor entry point."""

from __future__ import annotations

from pathlib import Path

from terragraph.models import ModuleRecord
from terragraph.extractor.base import BaseExtractor
from terragraph.extractor.hcl_extractor import HclExtractor

_extractor = HclExtractor()


def extract_record(path: Path, *, source: str | None = None) -> ModuleRecord:
    """Extract a module record for the given config file.

    Args:
        path: The config file; its POSIX form becomes the record identity.
        source: Pre-read file content to avoid a disk read.
    """
    return _extractor.extract(path, source=source)


__all__ = [
    "BaseExtractor",
    "HclExtractor",
    "extract_record",
]
