"""Literal value reader for ``inputs = { ... }`` blocks.

Only literal strings, numbers, booleans, null, lists and maps are read.
Anything that would need evaluation (references, function calls,
interpolated strings) is skipped.
"""

from __future__ import annotations

import re

from terragraph.extractor.base import skip_string
from terragraph.models import InputValue

_KEY = re.compile(r'[A-Za-z_][A-Za-z0-9_-]*|"(?:[^"\\]|\\.)*"')
_NUMBER = re.compile(r"-?\d+(?:\.\d+)?(?:[eE][+-]?\d+)?")
_KEYWORD = re.compile(r"(true|false|null)\b")
_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", '"': '"', "\\": "\\"}
_OPEN = "([{"
_CLOSE = ")]}"


class NotLiteral(ValueError):
    pass


def expression_end(text: str, pos: int) -> int:
    """Offset where the expression starting at ``pos`` ends: the first
    newline or comma outside brackets and strings.
    """
    length = len(text)
    depth = 0
    while pos < length:
        ch = text[pos]
        if ch == '"':
            pos = skip_string(text, pos)
            continue
        if ch in _OPEN:
            depth += 1
        elif ch in _CLOSE:
            if depth == 0:
                return pos
            depth -= 1
        elif ch in "\n," and depth == 0:
            return pos
        pos += 1
    return length


def _unquote(raw: str) -> str:
    body = raw[1:-1]
    if "${" in body or "%{" in body:
        raise NotLiteral(raw)
    return re.sub(r"\\(.)", lambda m: _ESCAPES.get(m.group(1), m.group(1)), body)


class _Reader:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def skip_ws(self, commas: bool = True) -> None:
        skip = " \t\r\n," if commas else " \t\r\n"
        while self.pos < len(self.text) and self.text[self.pos] in skip:
            self.pos += 1

    def at_end(self) -> bool:
        self.skip_ws(commas=False)
        return self.pos >= len(self.text)

    def peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def value(self) -> InputValue:
        self.skip_ws(commas=False)
        ch = self.peek()
        if ch == '"':
            end = skip_string(self.text, self.pos)
            raw = self.text[self.pos:end]
            self.pos = end
            return _unquote(raw)
        if ch == "[":
            return self.sequence()
        if ch == "{":
            return self.mapping()

        m = _NUMBER.match(self.text, self.pos)
        if m:
            self.pos = m.end()
            literal = m.group(0)
            return float(literal) if any(c in literal for c in ".eE") else int(literal)

        m = _KEYWORD.match(self.text, self.pos)
        if m:
            self.pos = m.end()
            return {"true": True, "false": False, "null": None}[m.group(1)]

        raise NotLiteral(self.text[self.pos:self.pos + 40])

    def sequence(self) -> list:
        items: list = []
        self.pos += 1
        while True:
            self.skip_ws()
            if self.peek() == "]":
                self.pos += 1
                return items
            if not self.peek():
                raise NotLiteral("unterminated list")
            items.append(self.value())

    def mapping(self) -> dict:
        result: dict = {}
        self.pos += 1
        while True:
            self.skip_ws()
            if self.peek() == "}":
                self.pos += 1
                return result
            key = self.key()
            result[key] = self.value()

    def key(self) -> str:
        m = _KEY.match(self.text, self.pos)
        if not m:
            raise NotLiteral(self.text[self.pos:self.pos + 40])
        self.pos = m.end()
        key = m.group(0)
        self.skip_ws(commas=False)
        if self.peek() not in ("=", ":"):
            raise NotLiteral(key)
        self.pos += 1
        return _unquote(key) if key.startswith('"') else key


def parse_literal(text: str) -> InputValue:
    """Parse one literal expression, raising NotLiteral otherwise."""
    reader = _Reader(text.strip())
    value = reader.value()
    if not reader.at_end():
        raise NotLiteral(text)
    return value


def parse_attributes(body: str) -> dict[str, InputValue]:
    """Read ``key = literal`` pairs from the body of an object expression."""
    values: dict[str, InputValue] = {}
    pos = 0
    length = len(body)

    while pos < length:
        while pos < length and body[pos] in " \t\r\n,":
            pos += 1
        if pos >= length:
            break

        m = _KEY.match(body, pos)
        sep = re.compile(r"[ \t]*[=:]").match(body, m.end()) if m else None
        if not m or not sep:
            # Not an attribute; skip the rest of the line
            pos = expression_end(body, pos) + 1
            continue

        start = sep.end()
        end = expression_end(body, start)
        key = m.group(0)
        try:
            if key.startswith('"'):
                key = _unquote(key)
            values[key] = parse_literal(body[start:end])
        except NotLiteral:
            pass
        pos = end + 1

    return values
