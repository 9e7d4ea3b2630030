"""Structural keyword scanner."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Final

from essbaselint.lexer.cursor import (
    QUOTE,
    is_word_char,
    opens_block_comment,
    skip_block_comment,
    skip_string,
)
from essbaselint.lexer.tokens import KEYWORD_PRIORITY, Token, TokenKind
from essbaselint.text import split_lines

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ScanState:
    """Scanner checkpoint taken at a line boundary."""

    in_block_comment: bool = False


INITIAL_SCAN_STATE: Final[ScanState] = ScanState()


def scan(text: str) -> list[Token]:
    """Return the structural keywords of `text` in document order."""
    tokens: list[Token] = []
    state = INITIAL_SCAN_STATE
    for line_number, line in enumerate(split_lines(text)):
        line_tokens, state = scan_line(line, line_number, state)
        tokens.extend(line_tokens)
    if state.in_block_comment:
        logger.debug("Block comment left open at end of text")
    logger.debug("Scanned %d structural tokens", len(tokens))
    return tokens


def scan_line(
    line: str,
    line_number: int,
    state: ScanState = INITIAL_SCAN_STATE,
) -> tuple[list[Token], ScanState]:
    """Scan a single line, resuming from `state`, and return its tokens plus the next state."""
    tokens: list[Token] = []
    in_block_comment = state.in_block_comment
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

        if line[position] == QUOTE:
            position = skip_string(line, position)
            continue

        kind = match_keyword(line, position)
        if kind is not None:
            lexeme = line[position : position + len(kind.keyword)]
            tokens.append(Token(kind=kind, line=line_number, column=position, lexeme=lexeme))
            position += len(lexeme)
            continue

        position += 1

    return tokens, ScanState(in_block_comment=in_block_comment)


def match_keyword(line: str, position: int) -> TokenKind | None:
    """Match a whole-word structural keyword at `position`, case-insensitively."""
    if position > 0 and is_word_char(line[position - 1]):
        return None

    length = len(line)
    for kind in KEYWORD_PRIORITY:
        keyword = kind.keyword
        end = position + len(keyword)
        if end > length:
            continue
        candidate = line[position:end]
        # Non-ASCII letters may upper-case into ASCII (e.g. dotless i).
        if not candidate.isascii() or candidate.upper() != keyword:
            continue
        if end < length and is_word_char(line[end]):
            continue
        return kind
    return None


def dump_tokens(tokens: list[Token]) -> None:
    """Print token list with kind, position, and lexeme for debugging."""
    for i, tok in enumerate(tokens):
        print(f"{i:03d} {tok.kind.name:<8} line={tok.line} col={tok.column} lexeme={tok.lexeme!r}")
