"""Host stylesheet handle with an ``@layer <name>`` insertion point."""

from __future__ import annotations

import re
from typing import Protocol

__all__ = ["CssDocument", "Document"]

_LAYER_RE = re.compile(
    r"""
    @layer\s+
    (?P<name>[\w-]+)      # layer name
    \s*
    (?P<open>[{;])        # block form or statement form
    """,
    re.VERBOSE,
)


class Document(Protocol):
    """What the engine needs from the host pipeline's parsed stylesheet."""

    @property
    def text(self) -> str: ...

    def replace_layer(self, name: str, css: str) -> bool: ...


def _skip_comment(text: str, pos: int) -> int:
    end = text.find("*/", pos + 2)
    return len(text) if end == -1 else end + 2


def _skip_string(text: str, pos: int) -> int:
    quote = text[pos]
    i = pos + 1
    while i < len(text):
        if text[i] == "\\":
            i += 2
            continue
        if text[i] == quote or text[i] == "\n":
            return i + 1
        i += 1
    return len(text)


def _comment_spans(text: str) -> list[tuple[int, int]]:
    spans = []
    i = text.find("/*")
    while i != -1:
        end = _skip_comment(text, i)
        spans.append((i, end))
        i = text.find("/*", end)
    return spans


def _matching_brace(text: str, open_pos: int) -> int:
    """Index of the ``}`` closing the block opened at *open_pos*, or -1."""
    depth = 0
    i = open_pos
    while i < len(text):
        ch = text[i]
        if text.startswith("/*", i):
            i = _skip_comment(text, i)
            continue
        if ch in "\"'":
            i = _skip_string(text, i)
            continue
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return i
        i += 1
    return -1


def _render_block(name: str, css: str) -> str:
    if not css:
        return f"@layer {name} {{}}"
    body = "\n".join(f"  {line}" for line in css.splitlines())
    return f"@layer {name} {{\n{body}\n}}"


class CssDocument:
    """A stylesheet held as text.

    :meth:`replace_layer` swaps the children of every ``@layer <name>``
    block for the given css.  A statement-form ``@layer <name>;`` becomes a
    block when there is something to insert.
    """

    def __init__(self, text: str = "") -> None:
        self._text = text

    @property
    def text(self) -> str:
        return self._text

    def replace_layer(self, name: str, css: str) -> bool:
        comments = _comment_spans(self._text)
        pieces: list[str] = []
        cursor = 0
        found = False

        for match in _LAYER_RE.finditer(self._text):
            start = match.start()
            if start < cursor or match.group("name") != name:
                continue
            if any(lo <= start < hi for lo, hi in comments):
                continue

            if match.group("open") == ";":
                end = match.end()
                replacement = _render_block(name, css) if css else match.group(0)
            else:
                close = _matching_brace(self._text, match.end() - 1)
                if close == -1:
                    continue
                end = close + 1
                replacement = _render_block(name, css)

            pieces.append(self._text[cursor:start])
            pieces.append(replacement)
            cursor = end
            found = True

        if found:
            pieces.append(self._text[cursor:])
            self._text = "".join(pieces)
        return found

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"CssDocument({len(self._text)} chars)"
