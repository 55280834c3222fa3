"""Terragrunt extractor: pulls module source, dependency paths and literal inputs out of HCL.

This is narrow feature extraction over masked source text, not an HCL parser.
Only literal strings are read; function calls such as
``find_in_parent_folders()`` are never evaluated.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from terragraph.models import InputValue, ModuleRecord
from terragraph.extractor.base import BaseExtractor, mask_source
from terragraph.extractor.literals import parse_attributes

logger = logging.getLogger(__name__)

_STRING = r'"((?:[^"\\\n]|\\.)*)"'
_PATHS_LIST = re.compile(r"(?m)^[ \t]*paths[ \t]*=[ \t]*\[(.*?)\]", re.S)
_QUOTED = re.compile(_STRING)
_INPUTS = re.compile(r"(?m)^[ \t]*inputs[ \t]*=[ \t]*\{")


def _block_header(keyword: str) -> re.Pattern:
    return re.compile(
        r"(?m)^[ \t]*" + keyword + r'((?:[ \t]+"[^"\n]*")*)[ \t]*\{'
    )


def _attribute(name: str) -> re.Pattern:
    return re.compile(r"(?m)^[ \t]*" + name + r"[ \t]*=[ \t]*" + _STRING + r"[ \t]*$")


_TERRAFORM_BLOCK = _block_header("terraform")
_DEPENDENCIES_BLOCK = _block_header("dependencies")
_DEPENDENCY_BLOCK = _block_header("dependency")
_INCLUDE_BLOCK = _block_header("include")
_SOURCE_ATTR = _attribute("source")
_CONFIG_PATH_ATTR = _attribute("config_path")
_PATH_ATTR = _attribute("path")
_VERSION_ATTR = _attribute("terragrunt_version_constraint")


class HclExtractor(BaseExtractor):
    """Extract a ModuleRecord from a ``terragrunt.hcl`` file."""

    def extract(self, path: Path, *, source: str | None = None) -> ModuleRecord:
        if source is None:
            source = self._read_source(path)
        masked = mask_source(source)

        record = ModuleRecord(
            identity=path.as_posix(),
            declared_source=self._extract_source(masked),
            declared_dependency_paths=tuple(self._extract_dependency_paths(masked)),
            inputs=self._extract_inputs(masked),
            version_constraint=self._first_match(_VERSION_ATTR, masked),
        )
        logger.debug(
            "Extracted %s: source=%s, %d dependency path(s), %d input(s)",
            record.identity, record.declared_source,
            len(record.declared_dependency_paths), len(record.inputs),
        )
        return record

    def _extract_source(self, masked: str) -> str | None:
        for m in _TERRAFORM_BLOCK.finditer(masked):
            body = self._extract_brace_block(masked, m.end() - 1)
            source = self._first_match(_SOURCE_ATTR, body)
            if source is not None:
                return source
        return None

    def _extract_dependency_paths(self, masked: str) -> list[str]:
        """Collect dependency paths in declaration order, without duplicates.

        Sources: ``dependencies { paths = [...] }``,
        ``dependency "<name>" { config_path = "..." }`` and
        ``include { path = "..." }``.
        """
        found: list[tuple[int, int, str]] = []  # (block offset, index in block, path)

        for m in _DEPENDENCIES_BLOCK.finditer(masked):
            body = self._extract_brace_block(masked, m.end() - 1)
            paths = _PATHS_LIST.search(body)
            if paths:
                for i, quoted in enumerate(_QUOTED.finditer(paths.group(1))):
                    found.append((m.start(), i, quoted.group(1)))

        for header, attr in ((_DEPENDENCY_BLOCK, _CONFIG_PATH_ATTR), (_INCLUDE_BLOCK, _PATH_ATTR)):
            for m in header.finditer(masked):
                body = self._extract_brace_block(masked, m.end() - 1)
                value = self._first_match(attr, body)
                if value is not None:
                    found.append((m.start(), 0, value))

        paths: list[str] = []
        for _, _, value in sorted(found):
            value = value.strip()
            if value and "${" not in value and value not in paths:
                paths.append(value)
        return paths

    def _extract_inputs(self, masked: str) -> dict[str, InputValue]:
        m = _INPUTS.search(masked)
        if not m:
            return {}
        return parse_attributes(self._extract_brace_block(masked, m.end() - 1))

    @staticmethod
    def _first_match(pattern: re.Pattern, text: str) -> str | None:
        m = pattern.search(text)
        return m.group(1) if m else None
