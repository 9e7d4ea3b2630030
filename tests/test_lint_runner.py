import logging
from typing import cast

import pytest

from essbaselint.lint import (
    CommaPlacementRule,
    FixEndfixBalanceRule,
    IfEndifBalanceRule,
    LintConfig,
    LintRule,
    RuleOptions,
    default_lint_rules,
    run_lint,
)
from essbaselint.pipeline import text_context
from tests._shared_cases import LINT_CASES, LintCase, case_id


@pytest.mark.parametrize("case", LINT_CASES, ids=case_id)
def test_lint_cases_report_expected_codes(case: LintCase) -> None:
    result = run_lint(case.source)

    assert tuple(d.code for d in result.diagnostics) == case.expected_codes


def test_default_rules_are_ordered_and_unique() -> None:
    rules = default_lint_rules()

    assert [rule.id for rule in rules] == ["fixEndfixBalance", "ifEndifBalance", "commaPlacement"]
    assert [rule.default_severity for rule in rules] == ["error", "error", "warning"]


def test_diagnostics_are_concatenated_in_rule_order() -> None:
    result = run_lint("FIX(a, )\nIF(b)\n")

    assert [(d.code, d.severity, d.rule) for d in result.diagnostics] == [
        ("missingEndfix", "error", "fixEndfixBalance"),
        ("missingEndif", "error", "ifEndifBalance"),
        ("trailingComma", "warning", "commaPlacement"),
    ]
    assert result.diagnostics[2].range.as_tuple() == ((0, 5), (0, 6))
    assert result.has_errors


def test_disabled_rule_is_skipped() -> None:
    config = LintConfig.from_mapping({"commaPlacement": {"enabled": False}})

    result = run_lint("FIX(a, )\nENDFIX", config)

    assert result.diagnostics == []
    assert not result.has_errors


def test_severity_override_applies_to_all_rule_diagnostics() -> None:
    config = LintConfig.from_mapping(
        {
            "fixEndfixBalance": {"severity": "warning"},
            "commaPlacement": {"severity": "error"},
        }
    )

    result = run_lint("FIX(a,,b)", config)

    assert [(d.code, d.severity) for d in result.diagnostics] == [
        ("missingEndfix", "warning"),
        ("duplicateComma", "error"),
    ]


def test_garbled_config_falls_back_to_defaults(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING)

    config = LintConfig.from_mapping(
        {
            "fixEndfixBalance": 42,
            "ifEndifBalance": {"enabled": "nope", "severity": "fatal"},
            "noSuchRule": {"enabled": False},
        }
    )

    assert config.options_for("fixEndfixBalance") == RuleOptions()
    assert config.options_for("ifEndifBalance") == RuleOptions()
    assert config.options_for("noSuchRule") == RuleOptions()
    assert "noSuchRule" in caplog.text
    assert "fatal" in caplog.text

    result = run_lint("ENDFIX\nENDIF", config)
    assert [(d.code, d.severity) for d in result.diagnostics] == [
        ("unmatchedEndfix", "error"),
        ("unmatchedEndif", "error"),
    ]


def test_custom_rule_subset() -> None:
    result = run_lint("FIX\nIF", rules=(IfEndifBalanceRule(),))

    assert [d.code for d in result.diagnostics] == ["missingEndif"]


def test_comma_rule_needs_text_context() -> None:
    rule = CommaPlacementRule()
    context = text_context("a,,b")

    assert rule.apply(context.tokens) == []
    assert [d.code for d in rule.apply(context.tokens, RuleOptions(), context)] == ["duplicateComma"]


def test_run_lint_reuses_provided_context() -> None:
    context = text_context("(a,\n)")

    result = run_lint("(a,\n)", context=context)

    assert result.context is context
    assert result.comma_issues is context.comma_issues()
    assert result.tokens == []


def test_run_lint_rejects_context_for_other_text() -> None:
    with pytest.raises(ValueError, match="same text"):
        run_lint("FIX", context=text_context("ENDFIX"))


def test_run_lint_rejects_unknown_rule_kind() -> None:
    class BadRule:
        id = "badRule"

        def apply(self, tokens, options=None, context=None):
            return []

    with pytest.raises(ValueError, match="Unsupported lint rule"):
        run_lint("FIX", rules=cast(tuple[LintRule, ...], (BadRule(),)))


def test_run_lint_rejects_duplicate_rules() -> None:
    with pytest.raises(ValueError, match="more than once"):
        run_lint("FIX", rules=(FixEndfixBalanceRule(), FixEndfixBalanceRule()))
