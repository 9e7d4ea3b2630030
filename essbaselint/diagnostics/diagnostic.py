"""Diagnostics core types."""

from dataclasses import dataclass
from typing import Final, Literal

from essbaselint.text import TextRange

Severity = Literal["error", "warning", "info"]

SEVERITIES: Final[frozenset[str]] = frozenset({"error", "warning", "info"})


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by lint rules."""

    code: str
    message: str
    range: TextRange
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None
    rule: str | None = None
