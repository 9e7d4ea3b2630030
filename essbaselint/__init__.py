"""Structural linter for Essbase calc scripts.

Checks FIX/ENDFIX balance, IF/ELSEIF/ELSE/ENDIF chains and comma placement::

    from essbaselint import run_lint

    result = run_lint(text)
    for diagnostic in result.diagnostics:
        print(diagnostic.code, diagnostic.range)
"""

__version__ = "0.1.0"

from essbaselint.pipeline import run_fix, run_lint  # noqa: E402

__all__ = ["__version__", "run_fix", "run_lint"]
