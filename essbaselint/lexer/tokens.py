"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Final

from essbaselint.text import TextRange


class TokenKind(IntEnum):
    # -------------------------
    # Block delimiters
    # -------------------------
    FIX = 10
    ENDFIX = 11

    # -------------------------
    # Conditional chain
    # -------------------------
    IF = 20
    ELSEIF = 21
    ELSE = 22
    ENDIF = 23

    @property
    def keyword(self) -> str:
        """Canonical upper-case spelling of the keyword."""
        return self.name


# ELSEIF is tried before ELSE and IF; boundary checks alone already keep them
# apart, the order keeps it that way if matching is ever relaxed.
KEYWORD_PRIORITY: Final[tuple[TokenKind, ...]] = (
    TokenKind.ELSEIF,
    TokenKind.ELSE,
    TokenKind.IF,
    TokenKind.ENDIF,
    TokenKind.FIX,
    TokenKind.ENDFIX,
)


@dataclass(frozen=True, slots=True)
class Token:
    """One structural keyword occurrence, outside comments and strings."""

    kind: TokenKind
    line: int
    column: int
    lexeme: str

    @property
    def end_column(self) -> int:
        return self.column + len(self.lexeme)

    @property
    def range(self) -> TextRange:
        return TextRange.on_line(self.line, self.column, self.end_column)
