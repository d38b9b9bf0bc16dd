"""Rule model: StaticRule, TokenRule, VariantRule and the Rules bundle."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable

CssBuilder = Callable[[str, str], str]


class BuilderKind(Enum):
    """How a TokenRule turns a (key, reference) pair into a css body."""

    DECLARATION = "declaration"
    TEMPLATE = "template"
    CUSTOM = "custom"


class VariantKind(Enum):
    """The three ways a variant can scope a base utility."""

    PSEUDO = "pseudo"
    MEDIA = "media"
    ANCESTOR = "ancestor"


@dataclass(frozen=True)
class StaticRule:
    """A fully literal utility: one class name, one css body."""

    class_name: str
    css: str

    def fingerprint(self) -> dict[str, Any]:
        return {"class": self.class_name, "css": self.css}


@dataclass(frozen=True)
class TokenRule:
    """A utility family generated once per token key of one category.

    The css body is produced by the first strategy that applies:

    1. ``overrides`` - a literal body for a specific key (``none``, ``full``);
    2. ``builder`` - a caller-supplied pure ``(key, value) -> css`` function;
    3. ``template`` - a ``str.format`` template with ``{key}`` and ``{value}``;
    4. ``properties`` - each property is set to the token reference.
    """

    token: str
    prefix: str
    properties: tuple[str, ...] = ()
    template: str = ""
    overrides: dict[str, str] = field(default_factory=dict)
    builder: CssBuilder | None = field(default=None, compare=False)

    @property
    def kind(self) -> BuilderKind:
        if self.builder is not None:
            return BuilderKind.CUSTOM
        if self.template:
            return BuilderKind.TEMPLATE
        return BuilderKind.DECLARATION

    @property
    def has_builder(self) -> bool:
        return bool(self.builder or self.template or self.properties or self.overrides)

    def css(self, key: str, value: str) -> str:
        """Return the declaration body for the utility ``prefix + key``."""
        if key in self.overrides:
            return self.overrides[key]
        if self.builder is not None:
            return self.builder(key, value)
        if self.template:
            return self.template.format(key=key, value=value)
        return " ".join(f"{prop}: {value};" for prop in self.properties)

    def fingerprint(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "token": self.token,
            "prefix": self.prefix,
            "kind": self.kind.value,
        }
        if self.properties:
            data["properties"] = list(self.properties)
        if self.template:
            data["template"] = self.template
        if self.overrides:
            data["overrides"] = dict(sorted(self.overrides.items()))
        if self.builder is not None:
            module = getattr(self.builder, "__module__", "")
            qualname = getattr(self.builder, "__qualname__", repr(self.builder))
            data["builder"] = f"{module}.{qualname}"
        return data


@dataclass(frozen=True)
class VariantRule:
    """A named modifier applied as ``name:class``.

    ``condition`` is required for media variants and ``selector`` for ancestor
    variants; a variant missing its field is skipped during expansion.
    ``pseudo`` is the pseudo-class a pseudo variant emits when it differs
    from the name (``first`` -> ``first-child``).
    """

    name: str
    kind: VariantKind
    condition: str | None = None
    selector: str | None = None
    pseudo: str | None = None

    @property
    def is_complete(self) -> bool:
        if self.kind is VariantKind.MEDIA:
            return bool(self.condition)
        if self.kind is VariantKind.ANCESTOR:
            return bool(self.selector)
        return True

    def fingerprint(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name, "type": self.kind.value}
        if self.condition is not None:
            data["condition"] = self.condition
        if self.selector is not None:
            data["selector"] = self.selector
        if self.pseudo is not None:
            data["pseudo"] = self.pseudo
        return data


@dataclass(frozen=True)
class DefaultRules:
    """Switches for the three built-in rule tables."""

    static: bool = True
    token: bool = True
    variant: bool = True

    def fingerprint(self) -> dict[str, bool]:
        return {"static": self.static, "token": self.token, "variant": self.variant}


@dataclass(frozen=True)
class Rules:
    """A fully resolved set of rule tables."""

    static_rules: tuple[StaticRule, ...] = ()
    token_rules: tuple[TokenRule, ...] = ()
    variant_rules: tuple[VariantRule, ...] = ()

    def merge(self, other: Rules | None) -> Rules:
        """Return a bundle with *other*'s rules appended after this one's."""
        if other is None:
            return self
        return Rules(
            static_rules=self.static_rules + other.static_rules,
            token_rules=self.token_rules + other.token_rules,
            variant_rules=self.variant_rules + other.variant_rules,
        )

    def __bool__(self) -> bool:
        return bool(self.static_rules or self.token_rules or self.variant_rules)

    def fingerprint(self) -> dict[str, Any]:
        return {
            "staticRules": [r.fingerprint() for r in self.static_rules],
            "tokenRules": [r.fingerprint() for r in self.token_rules],
            "variantRules": [r.fingerprint() for r in self.variant_rules],
        }
