"""Config validator: runs all checks and reports diagnostics."""

from __future__ import annotations

from pathlib import Path

from token_utilities.config import UtilityConfig
from token_utilities.rules.model import Rules
from token_utilities.rules.registry import RuleRegistry
from token_utilities.validation.checks import ALL_CHECKS, CheckContext, CheckFunc
from token_utilities.validation.diagnostic import Diagnostic


def validate_config(
    config: UtilityConfig,
    *,
    rules: Rules | None = None,
    cwd: Path | None = None,
    extra_checks: list[CheckFunc] | None = None,
) -> list[Diagnostic]:
    """Run all checks against *config*.

    *rules* overrides ``config.extend`` (pass the merged rules-module and
    config extensions to check what a build will actually use).
    """
    registry = RuleRegistry(
        extend=config.extend if rules is None else rules,
        defaults=config.default_rules,
    )
    ctx = CheckContext(config=config, registry=registry, cwd=cwd or Path.cwd())
    checks: list[CheckFunc] = list(ALL_CHECKS)
    if extra_checks:
        checks.extend(extra_checks)
    diagnostics: list[Diagnostic] = []
    for check in checks:
        diagnostics.extend(check(ctx))
    return diagnostics
