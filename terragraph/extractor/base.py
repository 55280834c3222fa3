"""Abstract base extractor with shared HCL-aware scanning helpers."""

from __future__ import annotations

import abc
import re
from pathlib import Path

from terragraph.models import ModuleRecord

_HEREDOC_START = re.compile(r"<<-?([A-Za-z_][A-Za-z0-9_]*)[ \t]*\n")


def skip_string(source: str, pos: int) -> int:
    """Return the offset just past the quoted string opening at ``pos``.

    Handles escapes and ``${...}`` / ``%{...}`` templates, which may hold
    nested strings.
    """
    length = len(source)
    pos += 1
    while pos < length:
        ch = source[pos]
        if ch == "\\":
            pos += 2
            continue
        if ch == '"':
            return pos + 1
        if ch in "$%" and source.startswith("{", pos + 1):
            pos = _skip_template(source, pos + 2)
            continue
        pos += 1
    return length


def _skip_template(source: str, pos: int) -> int:
    length = len(source)
    depth = 1
    while pos < length:
        ch = source[pos]
        if ch == '"':
            pos = skip_string(source, pos)
            continue
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return pos + 1
        pos += 1
    return length


def _heredoc_end(source: str, pos: int) -> tuple[int, int] | None:
    """If a heredoc opens at ``pos``, return (body_start, end_offset)."""
    m = _HEREDOC_START.match(source, pos)
    if not m:
        return None
    marker = m.group(1)
    closing = re.compile(r"(?m)^[ \t]*" + re.escape(marker) + r"[ \t]*$")
    end = closing.search(source, m.end())
    if not end:
        return m.end(), len(source)
    return m.end(), end.end()


def mask_source(source: str) -> str:
    """Blank out comments and heredoc bodies, keeping offsets and newlines.

    Block headers inside ``generate`` heredocs or commented-out code must not
    be picked up by the block regexes.
    """
    out: list[str] = []
    length = len(source)
    pos = 0
    while pos < length:
        ch = source[pos]
        next_ch = source[pos + 1] if pos + 1 < length else ""

        if ch == '"':
            end = skip_string(source, pos)
            out.append(source[pos:end])
            pos = end
        elif ch == "#" or (ch == "/" and next_ch == "/"):
            end = source.find("\n", pos)
            end = length if end == -1 else end
            out.append(" " * (end - pos))
            pos = end
        elif ch == "/" and next_ch == "*":
            end = source.find("*/", pos + 2)
            end = length if end == -1 else end + 2
            out.append(re.sub(r"[^\n]", " ", source[pos:end]))
            pos = end
        elif ch == "<" and next_ch == "<" and _heredoc_end(source, pos):
            body_start, end = _heredoc_end(source, pos)
            out.append(source[pos:body_start])
            out.append(re.sub(r"[^\n]", " ", source[body_start:end]))
            pos = end
        else:
            out.append(ch)
            pos += 1
    return "".join(out)


class BaseExtractor(abc.ABC):
    """Base class for configuration record extractors."""

    @abc.abstractmethod
    def extract(self, path: Path, *, source: str | None = None) -> ModuleRecord:
        """Extract a module record from the configuration file at ``path``."""

    def _read_source(self, path: Path) -> str:
        return path.read_text(encoding="utf-8", errors="replace")

    def _extract_brace_block(self, source: str, start_offset: int) -> str:
        """Return the text between the first ``{`` at or after start_offset
        and its matching ``}``, skipping braces inside strings.
        """
        i = source.index("{", start_offset)
        depth = 0
        length = len(source)

        pos = i
        while pos < length:
            ch = source[pos]
            if ch == '"':
                pos = skip_string(source, pos)
                continue
            if ch == "{":
                depth += 1
            elif ch == "}":
                depth -= 1
                if depth == 0:
                    return source[i + 1:pos]
            pos += 1

        # If we didn't find matching brace, return what we have
        return source[i + 1:pos]
