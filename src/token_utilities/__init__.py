"""token-utilities: atomic utility CSS generated from your own design tokens."""

__version__ = "0.3.0"

from token_utilities.config import ConfigError, UtilityConfig, load_config
from token_utilities.engine import BuildResult, CssDocument, UtilityEngine
from token_utilities.extract import ClassExtractor, is_valid_class_name
from token_utilities.rules import (
    DefaultRules,
    RuleRegistry,
    Rules,
    StaticRule,
    TokenRule,
    VariantKind,
    VariantRule,
)
from token_utilities.universe import Universe, generate_universe

__all__ = [
    "__version__",
    "BuildResult",
    "ClassExtractor",
    "ConfigError",
    "CssDocument",
    "DefaultRules",
    "RuleRegistry",
    "Rules",
    "StaticRule",
    "TokenRule",
    "Universe",
    "UtilityConfig",
    "UtilityEngine",
    "VariantKind",
    "VariantRule",
    "generate_universe",
    "is_valid_class_name",
    "load_config",
]
