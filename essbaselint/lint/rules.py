"""Lint rules and rule contracts."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final, TypeAlias

from essbaselint.diagnostics import (
    COMMA_DUPLICATE,
    COMMA_TRAILING,
    FIX_MISSING_ENDFIX,
    FIX_UNMATCHED_ENDFIX,
    IF_DUPLICATE_ELSE,
    IF_MISSING_ENDIF,
    IF_UNEXPECTED_ELSE,
    IF_UNEXPECTED_ELSEIF,
    IF_UNMATCHED_ENDIF,
    Diagnostic,
    Severity,
    diagnostic_from_spec,
)
from essbaselint.lexer import CommaIssueKind, Token
from essbaselint.lint.balance import check_conditional_chain, check_pair_balance
from essbaselint.lint.options import DEFAULT_RULE_OPTIONS, RuleOptions
from essbaselint.pipeline.result import TextContext


@dataclass(frozen=True, slots=True)
class FixEndfixBalanceRule:
    """Every FIX must be closed by an ENDFIX."""

    id: str = "fixEndfixBalance"
    category: str = "block"
    default_severity: Severity = "error"
    codes: tuple[str, ...] = (FIX_MISSING_ENDFIX.code, FIX_UNMATCHED_ENDFIX.code)

    def apply(
        self,
        tokens: Sequence[Token],
        options: RuleOptions = DEFAULT_RULE_OPTIONS,
        context: TextContext | None = None,
    ) -> list[Diagnostic]:
        return check_pair_balance(
            tokens,
            severity=options.severity or self.default_severity,
            rule=self.id,
        )


@dataclass(frozen=True, slots=True)
class IfEndifBalanceRule:
    """IF chains need a closing ENDIF and at most one ELSE."""

    id: str = "ifEndifBalance"
    category: str = "conditional"
    default_severity: Severity = "error"
    codes: tuple[str, ...] = (
        IF_MISSING_ENDIF.code,
        IF_UNMATCHED_ENDIF.code,
        IF_UNEXPECTED_ELSEIF.code,
        IF_UNEXPECTED_ELSE.code,
        IF_DUPLICATE_ELSE.code,
    )

    def apply(
        self,
        tokens: Sequence[Token],
        options: RuleOptions = DEFAULT_RULE_OPTIONS,
        context: TextContext | None = None,
    ) -> list[Diagnostic]:
        return check_conditional_chain(
            tokens,
            severity=options.severity or self.default_severity,
            rule=self.id,
        )


@dataclass(frozen=True, slots=True)
class CommaPlacementRule:
    """Flags trailing and duplicated commas in argument and member lists.

    Works from the raw text in `context`; the token stream is not used.
    """

    id: str = "commaPlacement"
    category: str = "comma"
    default_severity: Severity = "warning"
    codes: tuple[str, ...] = (COMMA_TRAILING.code, COMMA_DUPLICATE.code)

    def apply(
        self,
        tokens: Sequence[Token],
        options: RuleOptions = DEFAULT_RULE_OPTIONS,
        context: TextContext | None = None,
    ) -> list[Diagnostic]:
        if context is None:
            return []
        severity = options.severity or self.default_severity
        diagnostics: list[Diagnostic] = []
        for issue in context.comma_issues():
            spec = COMMA_TRAILING if issue.kind == CommaIssueKind.TRAILING else COMMA_DUPLICATE
            diagnostics.append(diagnostic_from_spec(spec, issue.range, severity=severity, rule=self.id))
        return diagnostics


LintRule: TypeAlias = "FixEndfixBalanceRule | IfEndifBalanceRule | CommaPlacementRule"

RULE_TYPES: Final[tuple[type, ...]] = (FixEndfixBalanceRule, IfEndifBalanceRule, CommaPlacementRule)


def default_lint_rules() -> tuple[LintRule, ...]:
    return (
        FixEndfixBalanceRule(),
        IfEndifBalanceRule(),
        CommaPlacementRule(),
    )


def validate_lint_rules(rules: Sequence[LintRule]) -> None:
    seen: set[str] = set()
    for rule in rules:
        if not isinstance(rule, RULE_TYPES):
            raise ValueError(
                f"Unsupported lint rule `{type(rule).__name__}`; expected one of "
                f"{', '.join(rule_type.__name__ for rule_type in RULE_TYPES)}."
            )
        if rule.id in seen:
            raise ValueError(f"Lint rule `{rule.id}` is registered more than once.")
        seen.add(rule.id)
