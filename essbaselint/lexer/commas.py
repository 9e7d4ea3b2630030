"""Comma placement scanner.

Works over raw text rather than the keyword token stream. Alongside the
scanner's comment/string state it tracks parenthesis and bracket depth, which
decides whether a comma left dangling at the end of a line is a valid
statement terminator (top level) or a list that closes too early (enclosed).
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum
import logging
from typing import Final

from essbaselint.lexer.cursor import (
    QUOTE,
    opens_block_comment,
    skip_block_comment,
    skip_string,
    skip_whitespace,
)
from essbaselint.text import TextRange, split_lines

logger = logging.getLogger(__name__)

COMMA: Final[str] = ","
CLOSERS: Final[frozenset[str]] = frozenset({")", "]"})


class CommaIssueKind(StrEnum):
    TRAILING = "trailing"
    DOUBLE = "double"


@dataclass(frozen=True, slots=True)
class CommaIssue:
    """An anomalous comma; `end_col` is exclusive."""

    kind: CommaIssueKind
    line: int
    start_col: int
    end_col: int

    @property
    def range(self) -> TextRange:
        return TextRange.on_line(self.line, self.start_col, self.end_col)


@dataclass(frozen=True, slots=True)
class CommaScanState:
    """Comma scanner checkpoint taken at a line boundary."""

    in_block_comment: bool = False
    paren_depth: int = 0
    bracket_depth: int = 0

    @property
    def enclosure_depth(self) -> int:
        return self.paren_depth + self.bracket_depth


INITIAL_COMMA_STATE: Final[CommaScanState] = CommaScanState()


def find_comma_issues(text: str) -> list[CommaIssue]:
    """Return trailing and duplicated commas in `text`, in document order."""
    lines = split_lines(text)
    issues: list[CommaIssue] = []
    state = INITIAL_COMMA_STATE
    for line_number in range(len(lines)):
        line_issues, state = find_comma_issues_in_line(lines, line_number, state)
        issues.extend(line_issues)
    logger.debug("Found %d comma issues", len(issues))
    return issues


def find_comma_issues_in_line(
    lines: Sequence[str],
    line_number: int,
    state: CommaScanState = INITIAL_COMMA_STATE,
) -> tuple[list[CommaIssue], CommaScanState]:
    """Scan one line, resuming from `state`.

    `lines` is the whole document so that a comma at the end of the line can be
    classified by what follows on later lines.
    """
    line = lines[line_number]
    issues: list[CommaIssue] = []
    in_block_comment = state.in_block_comment
    paren_depth = state.paren_depth
    bracket_depth = state.bracket_depth
    position = 0
    length = len(line)

    while position < length:
        if in_block_comment:
            position, in_block_comment = skip_block_comment(line, position)
            continue

        if opens_block_comment(line, position):
            in_block_comment = True
            position += 2
            continue

        ch = line[position]
        if ch == QUOTE:
            position = skip_string(line, position)
            continue

        if ch == "(":
            paren_depth += 1
        elif ch == ")":
            paren_depth = max(paren_depth - 1, 0)
        elif ch == "[":
            bracket_depth += 1
        elif ch == "]":
            bracket_depth = max(bracket_depth - 1, 0)
        elif ch == COMMA:
            issue = _classify_comma(
                lines,
                line_number,
                position,
                enclosed=paren_depth + bracket_depth > 0,
                in_block_comment=in_block_comment,
            )
            if issue is not None:
                issues.append(issue)
        position += 1

    return issues, CommaScanState(
        in_block_comment=in_block_comment,
        paren_depth=paren_depth,
        bracket_depth=bracket_depth,
    )


def next_significant_char(
    lines: Sequence[str],
    start_line: int,
    *,
    in_block_comment: bool = False,
) -> str | None:
    """First character from `start_line` onward that is neither whitespace nor comment.

    Returns None when the document ends first.
    """
    for line_number in range(start_line, len(lines)):
        line = lines[line_number]
        position = 0
        length = len(line)
        while position < length:
            if in_block_comment:
                position, in_block_comment = skip_block_comment(line, position)
                continue
            if opens_block_comment(line, position):
                in_block_comment = True
                position += 2
                continue
            if line[position].isspace():
                position += 1
                continue
            return line[position]
    return None


def _classify_comma(
    lines: Sequence[str],
    line_number: int,
    position: int,
    *,
    enclosed: bool,
    in_block_comment: bool,
) -> CommaIssue | None:
    line = lines[line_number]
    follower_position = skip_whitespace(line, position + 1)

    # Same line: only whitespace is skipped.
    if follower_position < len(line):
        follower = line[follower_position]
        if follower == COMMA:
            return CommaIssue(CommaIssueKind.DOUBLE, line_number, position, follower_position + 1)
        if follower in CLOSERS:
            return CommaIssue(CommaIssueKind.TRAILING, line_number, position, position + 1)
        return None

    significant = next_significant_char(lines, line_number + 1, in_block_comment=in_block_comment)
    if significant == COMMA:
        return CommaIssue(CommaIssueKind.DOUBLE, line_number, position, position + 1)
    if enclosed and significant in CLOSERS:
        return CommaIssue(CommaIssueKind.TRAILING, line_number, position, position + 1)
    # A dangling comma at top level terminates a statement.
    return None
