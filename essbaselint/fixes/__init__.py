"""Quick fixes for missing closing keywords."""

from essbaselint.fixes.quick_fix import (
    CLOSING_KEYWORD_BY_CODE,
    CodeAction,
    TextEdit,
    apply_edits,
    fix_last_missing_endfix,
    insert_closing_keyword,
    quick_fixes,
)

__all__ = [
    "CLOSING_KEYWORD_BY_CODE",
    "CodeAction",
    "TextEdit",
    "apply_edits",
    "fix_last_missing_endfix",
    "insert_closing_keyword",
    "quick_fixes",
]
