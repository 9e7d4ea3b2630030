"""Quick fixes keyed by diagnostic code."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
import logging
from types import MappingProxyType
from typing import Final

from essbaselint.diagnostics import FIX_MISSING_ENDFIX, IF_MISSING_ENDIF, Diagnostic
from essbaselint.lexer import TokenKind
from essbaselint.text import TextPosition, leading_whitespace, split_lines

logger = logging.getLogger(__name__)

CLOSING_KEYWORD_BY_CODE: Final[Mapping[str, TokenKind]] = MappingProxyType(
    {
        FIX_MISSING_ENDFIX.code: TokenKind.ENDFIX,
        IF_MISSING_ENDIF.code: TokenKind.ENDIF,
    }
)


@dataclass(frozen=True, slots=True)
class TextEdit:
    """Insertion of `new_text` at `position`."""

    position: TextPosition
    new_text: str


@dataclass(frozen=True, slots=True)
class CodeAction:
    title: str
    diagnostic: Diagnostic
    edits: tuple[TextEdit, ...]
    is_preferred: bool = True


def quick_fixes(text: str, diagnostics: Iterable[Diagnostic]) -> list[CodeAction]:
    """Offer a closing-keyword insertion for every missing ENDFIX/ENDIF diagnostic."""
    lines = split_lines(text)
    newline = _newline_of(text)
    actions: list[CodeAction] = []
    for diagnostic in diagnostics:
        keyword = CLOSING_KEYWORD_BY_CODE.get(diagnostic.code)
        if keyword is None:
            continue
        edit = insert_closing_keyword(lines, diagnostic.range.start.line, keyword.keyword, newline=newline)
        actions.append(
            CodeAction(
                title=f"Insert {keyword.keyword}",
                diagnostic=diagnostic,
                edits=(edit,),
            )
        )
    return actions


def insert_closing_keyword(
    lines: Sequence[str],
    opener_line: int,
    keyword: str,
    *,
    newline: str = "\n",
) -> TextEdit:
    """Insert `keyword` on its own line right after `opener_line`, reusing its indentation."""
    indent = leading_whitespace(lines[opener_line])
    insert_line = opener_line + 1
    if insert_line < len(lines):
        return TextEdit(TextPosition(insert_line, 0), f"{indent}{keyword}{newline}")
    # Opener sits on the last line and the text has no trailing newline.
    end_of_line = TextPosition(opener_line, len(lines[opener_line]))
    return TextEdit(end_of_line, f"{newline}{indent}{keyword}")


def apply_edits(text: str, edits: Iterable[TextEdit]) -> str:
    """Apply insertions bottom-up so earlier positions stay valid.

    Insertions at the same position keep their given order.
    """
    line_starts = _line_starts(text)
    indexed = [(_offset_of(line_starts, text, edit.position), index, edit) for index, edit in enumerate(edits)]
    result = text
    for offset, _, edit in sorted(indexed, key=lambda item: (item[0], item[1]), reverse=True):
        result = result[:offset] + edit.new_text + result[offset:]
    return result


def fix_last_missing_endfix(text: str, diagnostics: Iterable[Diagnostic] | None = None) -> str | None:
    """Insert ENDFIX for the last unmatched FIX only; None when nothing is missing.

    Lints `text` with the default configuration when no diagnostics are given.
    """
    if diagnostics is None:
        from essbaselint.lint import run_lint

        diagnostics = run_lint(text).diagnostics
    missing = [diagnostic for diagnostic in diagnostics if diagnostic.code == FIX_MISSING_ENDFIX.code]
    if not missing:
        logger.info("No missing ENDFIX found.")
        return None
    action = quick_fixes(text, missing[-1:])[0]
    return apply_edits(text, action.edits)


def _newline_of(text: str) -> str:
    return "\r\n" if "\r\n" in text else "\n"


def _line_starts(text: str) -> list[int]:
    starts = [0]
    for index, ch in enumerate(text):
        if ch == "\n":
            starts.append(index + 1)
    return starts


def _offset_of(line_starts: list[int], text: str, position: TextPosition) -> int:
    if position.line >= len(line_starts):
        return len(text)
    return min(line_starts[position.line] + position.character, len(text))
