"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from essbaselint.diagnostics.codes import DiagnosticSpec
from essbaselint.diagnostics.diagnostic import Diagnostic, Severity
from essbaselint.text import TextRange


def diagnostic_from_spec(
    spec: DiagnosticSpec,
    range: TextRange,
    *,
    severity: Severity | None = None,
    rule: str | None = None,
) -> Diagnostic:
    return Diagnostic(
        code=spec.code,
        message=spec.message,
        range=range,
        severity=severity if severity is not None else spec.severity,
        hint=spec.hint,
        category=spec.category,
        rule=rule,
    )


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def sort_diagnostics(diagnostics: Iterable[Diagnostic]) -> list[Diagnostic]:
    """Order diagnostics by document position, for reporting across rules."""
    return sorted(
        diagnostics,
        key=lambda diagnostic: (
            diagnostic.range.start,
            diagnostic.range.end,
            diagnostic.code,
            diagnostic.message,
        ),
    )
