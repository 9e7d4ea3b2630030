"""Diagnostics."""

from essbaselint.diagnostics.codes import (
    COMMA_DUPLICATE,
    COMMA_TRAILING,
    FIX_MISSING_ENDFIX,
    FIX_UNMATCHED_ENDFIX,
    IF_DUPLICATE_ELSE,
    IF_MISSING_ENDIF,
    IF_UNEXPECTED_ELSE,
    IF_UNEXPECTED_ELSEIF,
    IF_UNMATCHED_ENDIF,
    DiagnosticSpec,
)
from essbaselint.diagnostics.diagnostic import SEVERITIES, Diagnostic, Severity
from essbaselint.diagnostics.report import (
    diagnostic_from_spec,
    has_errors,
    sort_diagnostics,
)

__all__ = [
    "COMMA_DUPLICATE",
    "COMMA_TRAILING",
    "FIX_MISSING_ENDFIX",
    "FIX_UNMATCHED_ENDFIX",
    "IF_DUPLICATE_ELSE",
    "IF_MISSING_ENDIF",
    "IF_UNEXPECTED_ELSE",
    "IF_UNEXPECTED_ELSEIF",
    "IF_UNMATCHED_ENDIF",
    "SEVERITIES",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "diagnostic_from_spec",
    "has_errors",
    "sort_diagnostics",
]
