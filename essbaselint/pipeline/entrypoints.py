"""Unified entrypoints that orchestrate lint/fix with one scan lifecycle."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from essbaselint.fixes.runner import run_fix as _run_fix
from essbaselint.lint import LintConfig
from essbaselint.lint import run_lint as _run_lint
from essbaselint.pipeline.result import TextContext, text_context
from essbaselint.pipeline.results import FixRunResult, LintRunResult

if TYPE_CHECKING:
    from essbaselint.lint.rules import LintRule


def run_lint(
    text: str,
    config: LintConfig | None = None,
    *,
    context: TextContext | None = None,
    rules: Sequence[LintRule] | None = None,
) -> LintRunResult:
    """Run linting over one scan lifecycle."""
    resolved_context = context if context is not None else text_context(text)
    return _run_lint(text, config, context=resolved_context, rules=rules)


def run_fix(
    text: str,
    config: LintConfig | None = None,
    *,
    context: TextContext | None = None,
) -> FixRunResult:
    """Lint once and apply every missing-close quick fix."""
    resolved_context = context if context is not None else text_context(text)
    lint_result = _run_lint(text, config, context=resolved_context)
    return _run_fix(text, lint=lint_result)
