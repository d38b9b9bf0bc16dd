"""Universe generator: expands rules x tokens x variants into utility CSS."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from token_utilities.parser.tokens import DesignTokens
from token_utilities.rules.model import Rules, VariantKind, VariantRule

__all__ = ["Universe", "escape_class_name", "generate_universe"]

logger = logging.getLogger(__name__)

_SELECTOR_SPECIAL_RE = re.compile(r"([.:/])")


def escape_class_name(name: str) -> str:
    """Escape characters that would otherwise end a class selector."""
    return _SELECTOR_SPECIAL_RE.sub(r"\\\1", name)


@dataclass
class Universe:
    """Every utility derivable from the current rules, tokens and variants.

    ``lookup`` maps a lookup key (``class`` or ``variant:class``) to the css
    text of that single rule, in generation order.
    """

    lookup: dict[str, str] = field(default_factory=dict)

    def add(self, key: str, css: str) -> None:
        # A repeated key keeps its first position; the latest rule text wins.
        self.lookup[key] = css

    def get(self, key: str) -> str | None:
        return self.lookup.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self.lookup

    def __len__(self) -> int:
        return len(self.lookup)

    @property
    def raw(self) -> list[str]:
        return list(self.lookup.values())

    @property
    def raw_css(self) -> str:
        return "\n".join(self.lookup.values())


def _variant_css(variant: VariantRule, class_name: str, body: str) -> str | None:
    escaped = f"{escape_class_name(variant.name)}\\:{escape_class_name(class_name)}"
    if variant.kind is VariantKind.PSEUDO:
        return f".{escaped}:{variant.pseudo or variant.name} {{ {body} }}"
    if variant.kind is VariantKind.MEDIA and variant.condition:
        return f"@media ({variant.condition}) {{ .{escaped} {{ {body} }} }}"
    if variant.kind is VariantKind.ANCESTOR and variant.selector:
        return f"{variant.selector} .{escaped} {{ {body} }}"
    return None


def generate_universe(rules: Rules, tokens: DesignTokens) -> Universe:
    """Expand *rules* against *tokens*.

    Order: static rules, then token rules (each over its category's keys in
    declaration order); every base entry is immediately followed by its
    variant entries in variant registration order.  Variants missing their
    condition or selector are skipped.  A token rule whose builder fails for
    a key is logged and that one utility is left out.
    """
    universe = Universe()

    def add(class_name: str, body: str) -> None:
        universe.add(class_name, f".{escape_class_name(class_name)} {{ {body} }}")
        for variant in rules.variant_rules:
            css = _variant_css(variant, class_name, body)
            if css is not None:
                universe.add(f"{variant.name}:{class_name}", css)

    for static in rules.static_rules:
        add(static.class_name, static.css)

    for rule in rules.token_rules:
        for key, reference in tokens.get(rule.token, {}).items():
            class_name = f"{rule.prefix}{key}"
            try:
                body = rule.css(key, reference)
            except Exception as exc:
                logger.warning("Skipping %s: css builder failed: %r", class_name, exc)
                continue
            add(class_name, body)

    return universe
