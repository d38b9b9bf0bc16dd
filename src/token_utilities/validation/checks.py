"""Configuration checks.

Each check takes a :class:`CheckContext` and returns a list of diagnostics.
None of them change what a build does; a build skips the same problems on its
own and only logs them.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from token_utilities.config import UtilityConfig
from token_utilities.rules.model import VariantKind
from token_utilities.rules.registry import RuleRegistry
from token_utilities.validation.diagnostic import Diagnostic, Severity


@dataclass(frozen=True)
class CheckContext:
    config: UtilityConfig
    registry: RuleRegistry
    cwd: Path


CheckFunc = Callable[[CheckContext], list[Diagnostic]]


def check_required_options(ctx: CheckContext) -> list[Diagnostic]:
    diags: list[Diagnostic] = []
    if not ctx.config.design_token_source:
        diags.append(
            Diagnostic(
                rule="required_options",
                severity=Severity.ERROR,
                message="designTokenSource is required; builds are skipped without it",
                subject="designTokenSource",
            )
        )
    if not ctx.config.content:
        diags.append(
            Diagnostic(
                rule="required_options",
                severity=Severity.ERROR,
                message="content must list at least one glob pattern",
                subject="content",
            )
        )
    return diags


def check_sources_exist(ctx: CheckContext) -> list[Diagnostic]:
    diags: list[Diagnostic] = []
    for option, value in (
        ("designTokenSource", ctx.config.design_token_source),
        ("customMediaSource", ctx.config.custom_media_source),
    ):
        if value and not (ctx.cwd / value).is_file():
            diags.append(
                Diagnostic(
                    rule="sources_exist",
                    severity=Severity.WARNING,
                    message=f"{value} does not exist; it will be treated as empty",
                    subject=option,
                )
            )
    return diags


def check_incomplete_variants(ctx: CheckContext) -> list[Diagnostic]:
    diags: list[Diagnostic] = []
    for variant in ctx.registry.variant_rules:
        if variant.is_complete:
            continue
        missing = "condition" if variant.kind is VariantKind.MEDIA else "selector"
        diags.append(
            Diagnostic(
                rule="incomplete_variant",
                severity=Severity.WARNING,
                message=f"{variant.kind.value} variant has no {missing} and will be skipped",
                subject=variant.name,
            )
        )
    return diags


def check_duplicate_variants(ctx: CheckContext) -> list[Diagnostic]:
    counts = Counter(v.name for v in ctx.registry.variant_rules)
    return [
        Diagnostic(
            rule="duplicate_variant",
            severity=Severity.WARNING,
            message=f"variant declared {count} times; the last declaration wins",
            subject=name,
        )
        for name, count in counts.items()
        if count > 1
    ]


def check_token_builders(ctx: CheckContext) -> list[Diagnostic]:
    return [
        Diagnostic(
            rule="token_builder",
            severity=Severity.ERROR,
            message="token rule has no properties, template, overrides or builder",
            subject=f"{rule.prefix}* ({rule.token})",
        )
        for rule in ctx.registry.token_rules
        if not rule.has_builder
    ]



def check_token_templates(ctx: CheckContext) -> list[Diagnostic]:
    diags: list[Diagnostic] = []
    for rule in ctx.registry.token_rules:
        if not rule.template or rule.builder is not None:
            continue
        try:
            rule.template.format(key="key", value="var(--value)")
        except (AttributeError, KeyError, IndexError, ValueError) as exc:
            diags.append(
                Diagnostic(
                    rule="token_template",
                    severity=Severity.ERROR,
                    message=f"css template cannot be formatted ({exc!r}); its utilities are skipped",
                    subject=f"{rule.prefix}* ({rule.token})",
                )
            )
    return diags


ALL_CHECKS: list[CheckFunc] = [
    check_required_options,
    check_sources_exist,
    check_incomplete_variants,
    check_duplicate_variants,
    check_token_builders,
    check_token_templates,
]
