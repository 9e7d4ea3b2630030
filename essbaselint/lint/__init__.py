"""Lint rules, configuration and runner."""

from essbaselint.lint.balance import check_conditional_chain, check_pair_balance
from essbaselint.lint.options import ConfigError, LintConfig, RuleOptions, load_config
from essbaselint.lint.rules import (
    CommaPlacementRule,
    FixEndfixBalanceRule,
    IfEndifBalanceRule,
    LintRule,
    default_lint_rules,
    validate_lint_rules,
)
from essbaselint.lint.runner import run_lint

__all__ = [
    "CommaPlacementRule",
    "ConfigError",
    "FixEndfixBalanceRule",
    "IfEndifBalanceRule",
    "LintConfig",
    "LintRule",
    "RuleOptions",
    "check_conditional_chain",
    "check_pair_balance",
    "default_lint_rules",
    "load_config",
    "run_lint",
    "validate_lint_rules",
]
