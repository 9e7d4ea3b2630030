"""Scan-once carrier shared by every rule in a lint run."""

from __future__ import annotations

from dataclasses import dataclass, field

from essbaselint.lexer import CommaIssue, Token, find_comma_issues, scan


@dataclass(slots=True)
class TextContext:
    """Raw document text plus its structural tokens.

    The comma pass is computed on first use and cached for the lifetime
    of this object; nothing is shared across documents or edits.
    """

    source_text: str
    tokens: list[Token]
    _comma_issues: list[CommaIssue] | None = field(default=None, init=False, repr=False)

    def comma_issues(self) -> list[CommaIssue]:
        if self._comma_issues is None:
            self._comma_issues = find_comma_issues(self.source_text)
        return self._comma_issues


def text_context(text: str) -> TextContext:
    """Scan `text` once and wrap it for rule consumption."""
    return TextContext(source_text=text, tokens=scan(text))
