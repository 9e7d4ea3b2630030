"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final

from essbaselint.diagnostics.diagnostic import Severity


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


FIX_MISSING_ENDFIX: Final[DiagnosticSpec] = DiagnosticSpec(
    code="missingEndfix",
    message="Missing ENDFIX for this FIX.",
    hint="Insert ENDFIX after the block this FIX opens.",
    severity="error",
    category="lint/block",
)

FIX_UNMATCHED_ENDFIX: Final[DiagnosticSpec] = DiagnosticSpec(
    code="unmatchedEndfix",
    message="Unmatched ENDFIX: no preceding FIX.",
    hint="Remove this ENDFIX or add the FIX it closes.",
    severity="error",
    category="lint/block",
)

IF_MISSING_ENDIF: Final[DiagnosticSpec] = DiagnosticSpec(
    code="missingEndif",
    message="Missing ENDIF for this IF.",
    hint="Insert ENDIF after the last branch of this conditional.",
    severity="error",
    category="lint/conditional",
)

IF_UNMATCHED_ENDIF: Final[DiagnosticSpec] = DiagnosticSpec(
    code="unmatchedEndif",
    message="Unmatched ENDIF: no open IF.",
    hint="Remove this ENDIF or add the IF it closes.",
    severity="error",
    category="lint/conditional",
)

IF_UNEXPECTED_ELSEIF: Final[DiagnosticSpec] = DiagnosticSpec(
    code="unexpectedElseif",
    message="ELSEIF outside of an IF block.",
    hint="ELSEIF must follow an IF and precede its ENDIF.",
    severity="error",
    category="lint/conditional",
)

IF_UNEXPECTED_ELSE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="unexpectedElse",
    message="ELSE outside of an IF block.",
    hint="ELSE must follow an IF and precede its ENDIF.",
    severity="error",
    category="lint/conditional",
)

IF_DUPLICATE_ELSE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="duplicateElse",
    message="Duplicate ELSE in the same IF block.",
    hint="An IF block may contain at most one ELSE branch.",
    severity="error",
    category="lint/conditional",
)

COMMA_TRAILING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="trailingComma",
    message="Trailing comma before closing bracket.",
    hint="Remove the comma or add the missing list item.",
    severity="warning",
    category="lint/comma",
)

COMMA_DUPLICATE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="duplicateComma",
    message="Duplicate comma.",
    hint="Remove one of the commas or add the missing list item.",
    severity="warning",
    category="lint/comma",
)
