"""Custom-media parser: turns ``@custom-media --name (condition);`` into variants."""

from __future__ import annotations

import re

from token_utilities.parser.tokens import strip_comments
from token_utilities.rules.model import VariantKind, VariantRule
from token_utilities.rules.registry import RuleRegistry

__all__ = ["merge_media_variants", "parse_custom_media"]

_CUSTOM_MEDIA_RE = re.compile(
    r"""
    @custom-media\s+
    --(?P<name>[a-z0-9-]+)     # variant name, used as the class prefix
    \s+
    \((?P<condition>[^)]+)\)   # condition without the surrounding parens
    """,
    re.VERBOSE,
)


def parse_custom_media(source: str) -> list[VariantRule]:
    """Return one media variant per ``@custom-media`` declaration, in source order."""
    if not source:
        return []
    return [
        VariantRule(
            name=match.group("name"),
            kind=VariantKind.MEDIA,
            condition=match.group("condition").strip(),
        )
        for match in _CUSTOM_MEDIA_RE.finditer(strip_comments(source))
    ]


def merge_media_variants(registry: RuleRegistry, source: str) -> list[VariantRule]:
    """Append media variants whose names are not registered yet.

    Registered variants (built-in or extension) always win over derived ones.
    Returns the variants that were actually added.
    """
    added: list[VariantRule] = []
    for variant in parse_custom_media(source):
        if registry.add_variant(variant):
            added.append(variant)
    return added
