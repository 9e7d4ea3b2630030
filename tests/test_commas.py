from essbaselint.lexer import (
    CommaIssue,
    CommaIssueKind,
    CommaScanState,
    find_comma_issues,
    find_comma_issues_in_line,
    next_significant_char,
)

TRAILING = CommaIssueKind.TRAILING
DOUBLE = CommaIssueKind.DOUBLE


def test_dangling_comma_before_close_on_next_line_is_trailing() -> None:
    assert find_comma_issues("(a,\n)") == [CommaIssue(TRAILING, line=0, start_col=2, end_col=3)]


def test_double_comma_spans_both_commas() -> None:
    assert find_comma_issues("a,,b") == [CommaIssue(DOUBLE, line=0, start_col=1, end_col=3)]


def test_double_comma_with_whitespace_between() -> None:
    assert find_comma_issues("a, ,b") == [CommaIssue(DOUBLE, line=0, start_col=1, end_col=4)]


def test_multiline_list_continues_on_next_line() -> None:
    assert find_comma_issues("(a,\nb)") == []


def test_top_level_dangling_comma_is_a_terminator() -> None:
    assert find_comma_issues("a,\nb") == []


def test_trailing_comma_before_paren_on_same_line() -> None:
    assert find_comma_issues("f(a, )") == [CommaIssue(TRAILING, line=0, start_col=3, end_col=4)]


def test_trailing_comma_before_bracket() -> None:
    assert find_comma_issues("[a,]") == [CommaIssue(TRAILING, line=0, start_col=2, end_col=3)]


def test_top_level_double_comma_across_lines() -> None:
    assert find_comma_issues("a,\n,b") == [CommaIssue(DOUBLE, line=0, start_col=1, end_col=2)]


def test_enclosed_double_comma_across_lines() -> None:
    assert find_comma_issues("(a,\n  , b)") == [CommaIssue(DOUBLE, line=0, start_col=2, end_col=3)]


def test_commented_out_closer_is_not_significant() -> None:
    assert find_comma_issues("(a,\n/* ) */\nb)") == []


def test_lookahead_skips_multiline_comment() -> None:
    assert find_comma_issues("(a,\n/*\n)\n*/\nb)") == []


def test_lookahead_sees_closer_after_comment() -> None:
    assert find_comma_issues("(a,\n  /* note */ )") == [CommaIssue(TRAILING, line=0, start_col=2, end_col=3)]


def test_commas_inside_strings_and_comments_are_ignored() -> None:
    assert find_comma_issues('f("a,,b", ",)")') == []
    assert find_comma_issues("/* a,, */ b") == []
    assert find_comma_issues("/*\n(a,\n)\n*/") == []


def test_brackets_inside_strings_do_not_change_depth() -> None:
    assert find_comma_issues('"(" a,\n)') == []


def test_excess_closers_clamp_depth_at_zero() -> None:
    assert find_comma_issues(")) (a,\n)") == [CommaIssue(TRAILING, line=0, start_col=5, end_col=6)]


def test_dangling_comma_at_end_of_text() -> None:
    assert find_comma_issues("a,") == []
    assert find_comma_issues("(a,") == []


def test_mixed_paren_and_bracket_enclosure() -> None:
    assert find_comma_issues("[(a,\n])") == [CommaIssue(TRAILING, line=0, start_col=3, end_col=4)]


def test_crlf_line_endings() -> None:
    assert find_comma_issues("(a,\r\n)") == [CommaIssue(TRAILING, line=0, start_col=2, end_col=3)]


def test_issue_range_is_single_line() -> None:
    issue = find_comma_issues("a,,b")[0]

    assert issue.range.as_tuple() == ((0, 1), (0, 3))


def test_line_step_resumes_from_state() -> None:
    lines = ["a,", ")"]

    issues, state = find_comma_issues_in_line(lines, 0, CommaScanState(paren_depth=1))
    assert issues == [CommaIssue(TRAILING, line=0, start_col=1, end_col=2)]
    assert state == CommaScanState(paren_depth=1)

    issues, state = find_comma_issues_in_line(lines, 1, state)
    assert issues == []
    assert state.enclosure_depth == 0


def test_line_step_carries_comment_state() -> None:
    issues, state = find_comma_issues_in_line(["x /* (", ") */ (a,"], 0)

    assert issues == []
    assert state == CommaScanState(in_block_comment=True, paren_depth=0, bracket_depth=0)

    issues, state = find_comma_issues_in_line(["x /* (", ") */ (a,"], 1, state)
    assert issues == []
    assert state == CommaScanState(in_block_comment=False, paren_depth=1, bracket_depth=0)


def test_next_significant_char() -> None:
    assert next_significant_char(["  ", "/* x */ ;"], 0) == ";"
    assert next_significant_char(["x */ y"], 0, in_block_comment=True) == "y"
    assert next_significant_char(["   ", "/* open"], 0) is None
    assert next_significant_char(['  "q"'], 0) == '"'
