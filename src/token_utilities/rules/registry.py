"""Rule registry: merges built-in tables with project extensions."""

from __future__ import annotations

import json

from token_utilities.rules.defaults import (
    DEFAULT_STATIC_RULES,
    DEFAULT_TOKEN_RULES,
    DEFAULT_VARIANT_RULES,
)
from token_utilities.rules.model import (
    DefaultRules,
    Rules,
    StaticRule,
    TokenRule,
    VariantRule,
)


class RuleRegistry:
    """The effective rule set for one build.

    Each table is the built-in table (unless disabled through
    :class:`DefaultRules`) followed by the extension rules, in registration
    order.  Variants may be appended later by the media parser; a name that
    is already registered is never added twice.
    """

    def __init__(
        self,
        extend: Rules | None = None,
        defaults: DefaultRules | None = None,
    ) -> None:
        self.extend = extend or Rules()
        self.defaults = defaults or DefaultRules()

        self.static_rules: list[StaticRule] = [
            *(DEFAULT_STATIC_RULES if self.defaults.static else ()),
            *self.extend.static_rules,
        ]
        self.token_rules: list[TokenRule] = [
            *(DEFAULT_TOKEN_RULES if self.defaults.token else ()),
            *self.extend.token_rules,
        ]
        self.variant_rules: list[VariantRule] = [
            *(DEFAULT_VARIANT_RULES if self.defaults.variant else ()),
            *self.extend.variant_rules,
        ]

    def categories(self) -> list[str]:
        """Unique token categories in token-rule registration order."""
        return list(dict.fromkeys(rule.token for rule in self.token_rules))

    def variant_names(self) -> set[str]:
        return {v.name for v in self.variant_rules}

    def add_variant(self, variant: VariantRule) -> bool:
        """Append *variant* unless its name is already registered."""
        if variant.name in self.variant_names():
            return False
        self.variant_rules.append(variant)
        return True

    def rules(self) -> Rules:
        """Snapshot the current effective tables as a :class:`Rules` bundle."""
        return Rules(
            static_rules=tuple(self.static_rules),
            token_rules=tuple(self.token_rules),
            variant_rules=tuple(self.variant_rules),
        )

    def fingerprint(self) -> str:
        """Stable serialisation of the extensions and default-table switches."""
        return json.dumps(
            {"extend": self.extend.fingerprint(), "defaultRules": self.defaults.fingerprint()},
            sort_keys=True,
            separators=(",", ":"),
        )

    def __repr__(self) -> str:
        return (
            f"RuleRegistry(static={len(self.static_rules)}, "
            f"token={len(self.token_rules)}, variant={len(self.variant_rules)})"
        )
