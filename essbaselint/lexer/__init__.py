"""Lexer."""

from essbaselint.lexer.commas import (
    CommaIssue,
    CommaIssueKind,
    CommaScanState,
    find_comma_issues,
    find_comma_issues_in_line,
    next_significant_char,
)
from essbaselint.lexer.scanner import ScanState, dump_tokens, match_keyword, scan, scan_line
from essbaselint.lexer.tokens import KEYWORD_PRIORITY, Token, TokenKind

__all__ = [
    "KEYWORD_PRIORITY",
    "CommaIssue",
    "CommaIssueKind",
    "CommaScanState",
    "ScanState",
    "Token",
    "TokenKind",
    "dump_tokens",
    "find_comma_issues",
    "find_comma_issues_in_line",
    "match_keyword",
    "next_significant_char",
    "scan",
    "scan_line",
]
