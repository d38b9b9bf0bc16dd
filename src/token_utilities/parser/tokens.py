"""Design-token parser for the ``:root { --category-key: value; }`` block.

Example:
    :root {
      --spacing-4: 1rem;
      --color-primary: #0af;
    }

yields ``{"spacing": {"4": "var(--spacing-4)"}, "color": {"primary": "var(--color-primary)"}}``
when both categories are referenced by a token rule.
"""

from __future__ import annotations

import re
from typing import Iterable

__all__ = ["DesignTokens", "parse_tokens", "strip_comments"]

DesignTokens = dict[str, dict[str, str]]

_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)

# The first :root block; token values never contain a closing brace.
_ROOT_RE = re.compile(r":root\s*\{(?P<body>.*?)\}", re.DOTALL)

_VAR_RE = re.compile(
    r"""
    --(?P<name>[\w-]+)    # custom property name without the leading dashes
    \s*:\s*
    (?P<value>[^;]+)      # declared value (unused; utilities emit a reference)
    """,
    re.VERBOSE,
)


def strip_comments(source: str) -> str:
    return _COMMENT_RE.sub("", source)


def parse_tokens(source: str, categories: Iterable[str]) -> DesignTokens:
    """Classify each custom property of the root block into ``category -> key``.

    A property belongs to the first category (in the given order) that it
    starts with followed by ``-``; later categories are not consulted.  Names
    matching no category are ignored.  The recorded value is always the
    ``var(--name)`` reference, never the literal value.
    """
    tokens: DesignTokens = {}
    if not source:
        return tokens
    root = _ROOT_RE.search(strip_comments(source))
    if root is None:
        return tokens

    ordered = list(categories)
    for match in _VAR_RE.finditer(root.group("body")):
        name = match.group("name")
        for category in ordered:
            if name.startswith(f"{category}-"):
                key = name[len(category) + 1 :]
                if key:
                    tokens.setdefault(category, {})[key] = f"var(--{name})"
                break
    return tokens
