"""Rule tables: model, built-in defaults, registry and loaders."""

from token_utilities.rules.defaults import (
    DEFAULT_CLASS_MATCHERS,
    DEFAULT_STATIC_RULES,
    DEFAULT_TOKEN_RULES,
    DEFAULT_VARIANT_RULES,
)
from token_utilities.rules.loader import (
    RULES_FILE_NAME,
    find_rules_file,
    load_rules_file,
    rules_from_dict,
)
from token_utilities.rules.model import (
    BuilderKind,
    DefaultRules,
    Rules,
    StaticRule,
    TokenRule,
    VariantKind,
    VariantRule,
)
from token_utilities.rules.registry import RuleRegistry

__all__ = [
    "DEFAULT_CLASS_MATCHERS",
    "DEFAULT_STATIC_RULES",
    "DEFAULT_TOKEN_RULES",
    "DEFAULT_VARIANT_RULES",
    "RULES_FILE_NAME",
    "BuilderKind",
    "DefaultRules",
    "RuleRegistry",
    "Rules",
    "StaticRule",
    "TokenRule",
    "VariantKind",
    "VariantRule",
    "find_rules_file",
    "load_rules_file",
    "rules_from_dict",
]
