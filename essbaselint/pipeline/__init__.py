"""Shared scan carriers and lazy pipeline entrypoint exports."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from essbaselint.pipeline.result import TextContext, text_context
from essbaselint.pipeline.results import FixRunResult, LintRunResult

if TYPE_CHECKING:
    from essbaselint.lint.options import LintConfig
    from essbaselint.lint.rules import LintRule


def run_lint(
    text: str,
    config: LintConfig | None = None,
    *,
    context: TextContext | None = None,
    rules: Sequence[LintRule] | None = None,
) -> LintRunResult:
    from essbaselint.pipeline.entrypoints import run_lint as _run_lint

    return _run_lint(text, config, context=context, rules=rules)


def run_fix(
    text: str,
    config: LintConfig | None = None,
    *,
    context: TextContext | None = None,
) -> FixRunResult:
    from essbaselint.pipeline.entrypoints import run_fix as _run_fix

    return _run_fix(text, config, context=context)


__all__ = [
    "FixRunResult",
    "LintRunResult",
    "TextContext",
    "run_fix",
    "run_lint",
    "text_context",
]
