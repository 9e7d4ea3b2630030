"""Lint runner over a shared scan of the document."""

from __future__ import annotations

from collections.abc import Sequence
import logging

from essbaselint.diagnostics import Diagnostic
from essbaselint.lint.options import LintConfig
from essbaselint.lint.rules import (
    LintRule,
    default_lint_rules,
    validate_lint_rules,
)
from essbaselint.pipeline.result import TextContext, text_context
from essbaselint.pipeline.results import LintRunResult

logger = logging.getLogger(__name__)


def run_lint(
    text: str,
    config: LintConfig | None = None,
    *,
    context: TextContext | None = None,
    rules: Sequence[LintRule] | None = None,
) -> LintRunResult:
    """Run every enabled rule over a single scan of `text`."""
    resolved_context = _resolve_context(text, context=context)
    resolved_config = config if config is not None else LintConfig()
    resolved_rules = tuple(rules) if rules is not None else default_lint_rules()
    validate_lint_rules(resolved_rules)

    diagnostics: list[Diagnostic] = []
    for rule in resolved_rules:
        options = resolved_config.options_for(rule.id)
        if not options.enabled:
            logger.debug("Skipping disabled rule %s", rule.id)
            continue
        rule_diagnostics = rule.apply(resolved_context.tokens, options, resolved_context)
        logger.debug("Rule %s produced %d diagnostics", rule.id, len(rule_diagnostics))
        diagnostics.extend(rule_diagnostics)

    return LintRunResult(context=resolved_context, diagnostics=diagnostics)


def _resolve_context(text: str, *, context: TextContext | None) -> TextContext:
    if context is not None:
        if context.source_text != text:
            raise ValueError("Provided context must wrap the same text")
        return context
    return text_context(text)
