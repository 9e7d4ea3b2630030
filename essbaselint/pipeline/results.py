"""Pipeline run result carriers for tool entrypoints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from essbaselint.diagnostics import Diagnostic, has_errors
from essbaselint.lexer import CommaIssue, Token
from essbaselint.pipeline.result import TextContext

if TYPE_CHECKING:
    from essbaselint.fixes.quick_fix import CodeAction


@dataclass(frozen=True, slots=True)
class LintRunResult:
    """Result of running lint rules from a shared scan."""

    context: TextContext
    diagnostics: list[Diagnostic]

    @property
    def tokens(self) -> list[Token]:
        return self.context.tokens

    @property
    def comma_issues(self) -> list[CommaIssue]:
        return self.context.comma_issues()

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)


@dataclass(frozen=True, slots=True)
class FixRunResult:
    """Result of applying quick fixes to a document."""

    context: TextContext
    fixed_text: str
    applied: list[CodeAction]
    changed: bool
