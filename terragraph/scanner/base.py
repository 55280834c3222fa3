"""Abstract base scanner."""

from __future__ import annotations

import abc
import fnmatch
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class BaseScanner(abc.ABC):
    """Base class for configuration file scanners."""

    def __init__(self, skip_dirs: list[str] | None = None):
        self.skip_dirs = skip_dirs or [
            ".terragrunt-cache", ".terraform", ".git", "node_modules",
        ]

    @abc.abstractmethod
    def matches(self, path: Path) -> bool:
        """Whether a file is a configuration unit this scanner reports."""

    def scan_directory(self, directory: Path) -> list[Path]:
        """Recursively scan a directory for configuration files."""
        found: list[Path] = []
        for path in sorted(directory.rglob("*")):
            if path.is_dir():
                continue
            if self._should_skip(path.relative_to(directory)):
                continue
            if self.matches(path):
                found.append(path)
        logger.debug("Scanned %s: %d file(s)", directory, len(found))
        return found

    def _should_skip(self, path: Path) -> bool:
        for part in path.parts:
            for pattern in self.skip_dirs:
                if fnmatch.fnmatch(part, pattern):
                    return True
        return False
