"""Load rule extensions from JSON-style data or a project rules module."""

from __future__ import annotations

import importlib.util
import logging
import sys
from pathlib import Path
from typing import Any

from token_utilities.errors import ConfigError
from token_utilities.rules.model import (
    Rules,
    StaticRule,
    TokenRule,
    VariantKind,
    VariantRule,
)

logger = logging.getLogger(__name__)

RULES_FILE_NAME = "token_utilities_rules.py"


# ---------------------------------------------------------------------------
# JSON-style data
# ---------------------------------------------------------------------------


def _static_rule(item: Any) -> StaticRule:
    if isinstance(item, StaticRule):
        return item
    if not isinstance(item, dict) or "class" not in item or "css" not in item:
        raise ConfigError(f"static rule needs 'class' and 'css': {item!r}")
    return StaticRule(class_name=str(item["class"]), css=str(item["css"]))


def _token_rule(item: Any) -> TokenRule:
    if isinstance(item, TokenRule):
        return item
    if not isinstance(item, dict) or "token" not in item or "prefix" not in item:
        raise ConfigError(f"token rule needs 'token' and 'prefix': {item!r}")
    properties = item.get("properties", ())
    if isinstance(properties, str):
        properties = (properties,)
    css = item.get("css", "")
    builder = css if callable(css) else None
    return TokenRule(
        token=str(item["token"]),
        prefix=str(item["prefix"]),
        properties=tuple(str(p) for p in properties),
        template="" if builder else str(css),
        overrides={str(k): str(v) for k, v in item.get("overrides", {}).items()},
        builder=builder,
    )


def _variant_rule(item: Any) -> VariantRule | None:
    if isinstance(item, VariantRule):
        return item
    if not isinstance(item, dict) or "name" not in item:
        raise ConfigError(f"variant rule needs a 'name': {item!r}")
    try:
        kind = VariantKind(item.get("type", ""))
    except ValueError:
        logger.warning(
            "Skipping variant %r: unknown type %r", item["name"], item.get("type")
        )
        return None
    return VariantRule(
        name=str(item["name"]),
        kind=kind,
        condition=item.get("condition"),
        selector=item.get("selector"),
        pseudo=item.get("pseudo"),
    )


def rules_from_dict(data: dict[str, Any] | None) -> Rules:
    """Build a :class:`Rules` bundle from ``staticRules``/``tokenRules``/``variantRules``.

    Items may already be rule objects.  Variants with an unknown ``type`` are
    logged and dropped; variants missing their condition or selector are kept
    and skipped later during expansion.
    """
    if not data:
        return Rules()
    if not isinstance(data, dict):
        raise ConfigError(f"rules must be an object, got {type(data).__name__}")

    variants = [_variant_rule(v) for v in data.get("variantRules") or ()]
    return Rules(
        static_rules=tuple(_static_rule(r) for r in data.get("staticRules") or ()),
        token_rules=tuple(_token_rule(r) for r in data.get("tokenRules") or ()),
        variant_rules=tuple(v for v in variants if v is not None),
    )


# ---------------------------------------------------------------------------
# Project rules module
# ---------------------------------------------------------------------------


def find_rules_file(cwd: Path) -> Path | None:
    """Return the project rules module in *cwd*, if there is one."""
    path = Path(cwd) / RULES_FILE_NAME
    return path if path.is_file() else None


def _rules_from_module(module: Any) -> Rules:
    rules = getattr(module, "rules", None)
    if isinstance(rules, Rules):
        return rules
    if isinstance(rules, dict):
        return rules_from_dict(rules)
    return rules_from_dict(
        {
            "staticRules": list(getattr(module, "static_rules", ())),
            "tokenRules": list(getattr(module, "token_rules", ())),
            "variantRules": list(getattr(module, "variant_rules", ())),
        }
    )


def load_rules_file(cwd: Path) -> Rules | None:
    """Execute the project rules module and return its rules.

    The module is executed afresh on every call so edits are picked up by a
    long-running watch session.  Any failure is logged and yields ``None``.
    """
    path = find_rules_file(cwd)
    if path is None:
        return None

    spec = importlib.util.spec_from_file_location("_token_utilities_rules", path)
    if spec is None or spec.loader is None:
        logger.warning("Failed to load %s: not importable", path.name)
        return None
    module = importlib.util.module_from_spec(spec)
    # No cached bytecode: a .pyc could mask an edit made within the same second.
    dont_write_bytecode = sys.dont_write_bytecode
    sys.dont_write_bytecode = True
    try:
        spec.loader.exec_module(module)
        return _rules_from_module(module)
    except Exception as exc:
        logger.warning("Failed to load %s: %s", path.name, exc)
        return None
    finally:
        sys.dont_write_bytecode = dont_write_bytecode
