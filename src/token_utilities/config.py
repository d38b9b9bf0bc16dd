"""Build configuration and its JSON loader."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from token_utilities.errors import ConfigError
from token_utilities.rules.loader import rules_from_dict
from token_utilities.rules.model import DefaultRules, Rules

__all__ = [
    "CONFIG_FILE_NAME",
    "DEFAULT_GENERATED_PATH",
    "DEFAULT_LAYER",
    "ConfigError",
    "UtilityConfig",
    "config_from_dict",
    "load_config",
]

CONFIG_FILE_NAME = "token-utilities.json"
DEFAULT_GENERATED_PATH = "src/styles/utilities.gen.css"
DEFAULT_LAYER = "utilities-gen"

_KNOWN_KEYS = {
    "designTokenSource",
    "customMediaSource",
    "content",
    "classMatcher",
    "extraction",
    "generated",
    "extend",
    "defaultRules",
    "layer",
    "rulesFile",
    "logs",
}


@dataclass(frozen=True)
class UtilityConfig:
    """Everything one build pass needs besides the stylesheet itself.

    ``generated`` is the path of the human-readable reference file; it is
    only written when set.
    """

    design_token_source: str = ""
    custom_media_source: str | None = None
    content: tuple[str, ...] = ()
    class_matchers: tuple[str, ...] = ()
    generated: str | None = None
    extend: Rules = field(default_factory=Rules)
    default_rules: DefaultRules = field(default_factory=DefaultRules)
    layer: str = DEFAULT_LAYER
    rules_file: bool = True
    logs: bool = False


def _string_list(value: Any, key: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"'{key}' must be a list of strings")
    return tuple(value)


def _generated(value: Any) -> str | None:
    if value is None or value is False:
        return None
    if value is True:
        return DEFAULT_GENERATED_PATH
    if isinstance(value, str):
        return value
    if isinstance(value, dict):
        return str(value.get("path") or DEFAULT_GENERATED_PATH)
    raise ConfigError("'generated' must be false, a path, or an object with 'path'")


def config_from_dict(data: dict[str, Any]) -> UtilityConfig:
    """Build a :class:`UtilityConfig` from plugin-style option names."""
    if not isinstance(data, dict):
        raise ConfigError(f"config must be an object, got {type(data).__name__}")

    unknown = set(data) - _KNOWN_KEYS
    if unknown:
        raise ConfigError(f"unknown option(s): {', '.join(sorted(unknown))}")

    extraction = data.get("extraction") or {}
    if not isinstance(extraction, dict):
        raise ConfigError("'extraction' must be an object")
    matchers = (
        *_string_list(data.get("classMatcher"), "classMatcher"),
        *_string_list(extraction.get("attributes"), "extraction.attributes"),
        *_string_list(extraction.get("functions"), "extraction.functions"),
    )

    defaults = data.get("defaultRules") or {}
    if not isinstance(defaults, dict):
        raise ConfigError("'defaultRules' must be an object")

    media = data.get("customMediaSource")
    return UtilityConfig(
        design_token_source=str(data.get("designTokenSource") or ""),
        custom_media_source=str(media) if media else None,
        content=_string_list(data.get("content"), "content"),
        class_matchers=tuple(dict.fromkeys(matchers)),
        generated=_generated(data.get("generated")),
        extend=rules_from_dict(data.get("extend")),
        default_rules=DefaultRules(
            static=defaults.get("staticRules", True) is not False,
            token=defaults.get("tokenRules", True) is not False,
            variant=defaults.get("variantRules", True) is not False,
        ),
        layer=str(data.get("layer") or DEFAULT_LAYER),
        rules_file=data.get("rulesFile", True) is not False,
        logs=bool(data.get("logs", False)),
    )


def load_config(path: str | Path = CONFIG_FILE_NAME) -> UtilityConfig:
    """Load a JSON config file.

    Raises:
        ConfigError: the file is missing, is not valid JSON, or has options of
            the wrong shape.
    """
    config_path = Path(path)
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise ConfigError("config file not found", source=str(config_path)) from None
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON: {exc}", source=str(config_path)) from exc
    try:
        return config_from_dict(data)
    except ConfigError as exc:
        if exc.source:
            raise
        raise ConfigError(str(exc), source=str(config_path)) from exc
