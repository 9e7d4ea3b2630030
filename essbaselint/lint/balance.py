"""Stack-based balance checks over the structural token stream."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from essbaselint.diagnostics import (
    FIX_MISSING_ENDFIX,
    FIX_UNMATCHED_ENDFIX,
    IF_DUPLICATE_ELSE,
    IF_MISSING_ENDIF,
    IF_UNEXPECTED_ELSE,
    IF_UNEXPECTED_ELSEIF,
    IF_UNMATCHED_ENDIF,
    Diagnostic,
    DiagnosticSpec,
    Severity,
    diagnostic_from_spec,
)
from essbaselint.lexer import Token, TokenKind


def check_pair_balance(
    tokens: Iterable[Token],
    *,
    opener: TokenKind = TokenKind.FIX,
    closer: TokenKind = TokenKind.ENDFIX,
    missing_close: DiagnosticSpec = FIX_MISSING_ENDFIX,
    unmatched_close: DiagnosticSpec = FIX_UNMATCHED_ENDFIX,
    severity: Severity | None = None,
    rule: str | None = None,
) -> list[Diagnostic]:
    """Match openers and closers LIFO.

    Only depth is tracked: any closer pops the most recent opener. Stray closers
    are reported where they occur, unclosed openers after the stream ends.
    """
    diagnostics: list[Diagnostic] = []
    stack: list[Token] = []

    for token in tokens:
        if token.kind == opener:
            stack.append(token)
        elif token.kind == closer:
            if stack:
                stack.pop()
            else:
                diagnostics.append(
                    diagnostic_from_spec(unmatched_close, token.range, severity=severity, rule=rule)
                )

    for unmatched in stack:
        diagnostics.append(diagnostic_from_spec(missing_close, unmatched.range, severity=severity, rule=rule))
    return diagnostics


@dataclass(slots=True)
class _ConditionalFrame:
    open_token: Token
    else_seen: bool = False


def check_conditional_chain(
    tokens: Iterable[Token],
    *,
    severity: Severity | None = None,
    rule: str | None = None,
) -> list[Diagnostic]:
    """Validate IF / ELSEIF / ELSE / ENDIF chains.

    ELSEIF is accepted anywhere inside an open IF, including after its ELSE.
    """
    diagnostics: list[Diagnostic] = []
    stack: list[_ConditionalFrame] = []

    def report(spec: DiagnosticSpec, token: Token) -> None:
        diagnostics.append(diagnostic_from_spec(spec, token.range, severity=severity, rule=rule))

    for token in tokens:
        match token.kind:
            case TokenKind.IF:
                stack.append(_ConditionalFrame(open_token=token))
            case TokenKind.ELSEIF:
                if not stack:
                    report(IF_UNEXPECTED_ELSEIF, token)
            case TokenKind.ELSE:
                if not stack:
                    report(IF_UNEXPECTED_ELSE, token)
                elif stack[-1].else_seen:
                    report(IF_DUPLICATE_ELSE, token)
                else:
                    stack[-1].else_seen = True
            case TokenKind.ENDIF:
                if stack:
                    stack.pop()
                else:
                    report(IF_UNMATCHED_ENDIF, token)
            case _:
                continue

    for frame in stack:
        report(IF_MISSING_ENDIF, frame.open_token)
    return diagnostics
