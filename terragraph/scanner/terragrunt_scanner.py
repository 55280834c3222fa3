"""Scanner for Terragrunt module files."""

from __future__ import annotations

from pathlib import Path

from terragraph.models import DEFAULT_CONFIG_FILENAME
from terragraph.scanner.base import BaseScanner


class TerragruntScanner(BaseScanner):
    def __init__(
        self,
        skip_dirs: list[str] | None = None,
        config_filename: str = DEFAULT_CONFIG_FILENAME,
    ):
        super().__init__(skip_dirs=skip_dirs)
        self.config_filename = config_filename

    def matches(self, path: Path) -> bool:
        return path.name == self.config_filename
