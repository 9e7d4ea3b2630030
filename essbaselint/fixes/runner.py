"""Fix runner over a shared lint result."""

from __future__ import annotations

import logging

from essbaselint.fixes.quick_fix import apply_edits, quick_fixes
from essbaselint.lint import LintConfig, run_lint
from essbaselint.pipeline.result import TextContext
from essbaselint.pipeline.results import FixRunResult, LintRunResult

logger = logging.getLogger(__name__)


def run_fix(
    text: str,
    config: LintConfig | None = None,
    *,
    context: TextContext | None = None,
    lint: LintRunResult | None = None,
) -> FixRunResult:
    """Apply every available quick fix from a single lint run."""
    resolved_lint = _resolve_lint(text, config=config, context=context, lint=lint)
    actions = quick_fixes(text, resolved_lint.diagnostics)
    fixed_text = apply_edits(text, [edit for action in actions for edit in action.edits])
    logger.debug("Applied %d quick fixes", len(actions))
    return FixRunResult(
        context=resolved_lint.context,
        fixed_text=fixed_text,
        applied=actions,
        changed=fixed_text != text,
    )


def _resolve_lint(
    text: str,
    *,
    config: LintConfig | None,
    context: TextContext | None,
    lint: LintRunResult | None,
) -> LintRunResult:
    if lint is not None:
        if config is not None or context is not None:
            raise ValueError("Pass either lint or config/context, not both")
        if lint.context.source_text != text:
            raise ValueError("Provided lint result must come from the same text")
        return lint
    return run_lint(text, config, context=context)
