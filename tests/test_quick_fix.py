from essbaselint.fixes import TextEdit, apply_edits, fix_last_missing_endfix, quick_fixes
from essbaselint.pipeline import run_fix, run_lint
from essbaselint.text import TextPosition


def test_missing_endfix_fix_reuses_opener_indentation() -> None:
    text = "  FIX(x)\n  a = 1;\n"
    actions = quick_fixes(text, run_lint(text).diagnostics)

    assert [action.title for action in actions] == ["Insert ENDFIX"]
    assert actions[0].edits == (TextEdit(TextPosition(1, 0), "  ENDFIX\n"),)
    assert actions[0].is_preferred
    assert apply_edits(text, actions[0].edits) == "  FIX(x)\n  ENDFIX\n  a = 1;\n"


def test_missing_endif_fix_uses_endif() -> None:
    text = "\tIF (a)\n\tx = 1;\n"
    actions = quick_fixes(text, run_lint(text).diagnostics)

    assert [action.title for action in actions] == ["Insert ENDIF"]
    assert apply_edits(text, actions[0].edits) == "\tIF (a)\n\tENDIF\n\tx = 1;\n"


def test_fix_on_last_line_without_newline() -> None:
    text = "FIX(x)"
    actions = quick_fixes(text, run_lint(text).diagnostics)

    assert apply_edits(text, actions[0].edits) == "FIX(x)\nENDFIX"


def test_fix_keeps_crlf_line_endings() -> None:
    text = "FIX(x)\r\nx;\r\n"
    actions = quick_fixes(text, run_lint(text).diagnostics)

    assert apply_edits(text, actions[0].edits) == "FIX(x)\r\nENDFIX\r\nx;\r\n"


def test_only_missing_close_diagnostics_have_fixes() -> None:
    text = "ENDFIX\nIF (a)\nELSE\nELSE\nENDIF\na,,b"

    assert quick_fixes(text, run_lint(text).diagnostics) == []


def test_apply_edits_keeps_order_at_same_position() -> None:
    edits = [
        TextEdit(TextPosition(1, 0), "first\n"),
        TextEdit(TextPosition(1, 0), "second\n"),
        TextEdit(TextPosition(0, 1), "-"),
    ]

    assert apply_edits("ab\ncd", edits) == "a-b\nfirst\nsecond\ncd"


def test_fix_last_missing_endfix_targets_last_fix() -> None:
    text = "FIX(a)\nFIX(b)\n"

    assert fix_last_missing_endfix(text) == "FIX(a)\nFIX(b)\nENDFIX\n"


def test_fix_last_missing_endfix_returns_none_when_balanced() -> None:
    assert fix_last_missing_endfix("FIX\nENDFIX") is None


def test_run_fix_inserts_every_missing_close() -> None:
    text = "FIX(a)\nIF(b)\n"

    result = run_fix(text)

    assert result.fixed_text == "FIX(a)\nENDFIX\nIF(b)\nENDIF\n"
    assert result.changed
    assert [action.diagnostic.code for action in result.applied] == ["missingEndfix", "missingEndif"]
    assert run_lint(result.fixed_text).diagnostics == []


def test_run_fix_without_fixable_diagnostics() -> None:
    result = run_fix("a,,b")

    assert result.fixed_text == "a,,b"
    assert not result.changed
    assert result.applied == []
