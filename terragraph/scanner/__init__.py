"""Scanner entry point."""

from __future__ import annotations

from pathlib import Path

from terragraph.models import DEFAULT_CONFIG_FILENAME
from terragraph.scanner.base import BaseScanner
from terragraph.scanner.terragrunt_scanner import TerragruntScanner


def scan_directory(
    directory: Path,
    skip_dirs: list[str] | None = None,
    config_filename: str = DEFAULT_CONFIG_FILENAME,
) -> list[Path]:
    """Find every module config file under ``directory``, sorted by path."""
    scanner = TerragruntScanner(skip_dirs=skip_dirs, config_filename=config_filename)
    return scanner.scan_directory(directory)


__all__ = [
    "BaseScanner",
    "TerragruntScanner",
    "scan_directory",
]
