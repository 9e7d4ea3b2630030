"""
Essbase calc-script structural linter.

Usage:
    essbaselint check <file>...                 # Report diagnostics
    essbaselint check <file> --format json      # Machine-readable diagnostics
    essbaselint check <file> --sort position    # Order diagnostics by location
    essbaselint fix <file> [--write]            # Insert missing ENDFIX/ENDIF
    essbaselint fix <file> --last               # Only the last missing ENDFIX
    essbaselint tokens <file>                   # Dump structural tokens and comma issues
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence
import json
import logging
from pathlib import Path
import sys

from essbaselint import __version__
from essbaselint.diagnostics import Diagnostic, sort_diagnostics
from essbaselint.fixes import fix_last_missing_endfix
from essbaselint.lexer import dump_tokens
from essbaselint.lint import ConfigError, LintConfig, load_config
from essbaselint.pipeline import run_fix, run_lint, text_context

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_LINT_ERRORS = 1
EXIT_USAGE = 2


def format_diagnostic(path: str, diagnostic: Diagnostic) -> str:
    """Render `path:line:col: severity code message` with 1-based line/column."""
    start = diagnostic.range.start
    return (
        f"{path}:{start.line + 1}:{start.character + 1}: "
        f"{diagnostic.severity} {diagnostic.code} {diagnostic.message}"
    )


def diagnostic_to_dict(path: str, diagnostic: Diagnostic) -> dict[str, object]:
    return {
        "path": path,
        "code": diagnostic.code,
        "message": diagnostic.message,
        "severity": diagnostic.severity,
        "rule": diagnostic.rule,
        "hint": diagnostic.hint,
        "range": {
            "start": {"line": diagnostic.range.start.line, "character": diagnostic.range.start.character},
            "end": {"line": diagnostic.range.end.line, "character": diagnostic.range.end.character},
        },
    }


def cmd_check(args: argparse.Namespace, config: LintConfig) -> int:
    found_errors = False
    records: list[dict[str, object]] = []
    for file_name in args.files:
        text = _read_text(Path(file_name), args.encoding)
        result = run_lint(text, config)
        found_errors = found_errors or result.has_errors
        diagnostics = sort_diagnostics(result.diagnostics) if args.sort == "position" else result.diagnostics
        for diagnostic in diagnostics:
            if args.format == "json":
                records.append(diagnostic_to_dict(file_name, diagnostic))
            else:
                print(format_diagnostic(file_name, diagnostic))
    if args.format == "json":
        print(json.dumps(records, indent=2))
    return EXIT_LINT_ERRORS if found_errors else EXIT_OK


def cmd_fix(args: argparse.Namespace, config: LintConfig) -> int:
    path = Path(args.file)
    text = _read_text(path, args.encoding)

    if args.last:
        fixed = fix_last_missing_endfix(text, run_lint(text, config).diagnostics)
        if fixed is None:
            print("No missing ENDFIX found.", file=sys.stderr)
            fixed = text
        applied = 0 if fixed == text else 1
    else:
        result = run_fix(text, config)
        fixed = result.fixed_text
        applied = len(result.applied)

    if args.write:
        if fixed != text:
            _write_text(path, fixed, args.encoding)
        print(f"Applied {applied} fix(es) to {path}")
    else:
        sys.stdout.write(fixed)
    return EXIT_OK


def cmd_tokens(args: argparse.Namespace, config: LintConfig) -> int:
    text = _read_text(Path(args.file), args.encoding)
    context = text_context(text)
    dump_tokens(context.tokens)
    issues = context.comma_issues()
    if issues:
        print("\nComma issues:")
        for issue in issues:
            print(f"- {issue.kind.value} line={issue.line} cols=[{issue.start_col}, {issue.end_col})")
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="essbaselint",
        description="Structural linter for Essbase calc scripts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--version", action="version", version=f"essbaselint {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--config", type=Path, help="TOML file with [rules.<ruleId>] tables")
    parser.add_argument("--encoding", default="utf-8", help="Source file encoding (default: utf-8)")

    subparsers = parser.add_subparsers(dest="command", required=True)

    check_p = subparsers.add_parser("check", help="Lint calc scripts")
    check_p.add_argument("files", nargs="+", help="Files to lint")
    check_p.add_argument("--format", choices=("text", "json"), default="text")
    check_p.add_argument(
        "--sort",
        choices=("rule", "position"),
        default="rule",
        help="Group diagnostics by rule (default) or order them by position in the file",
    )
    check_p.set_defaults(func=cmd_check)

    fix_p = subparsers.add_parser("fix", help="Insert missing closing keywords")
    fix_p.add_argument("file", help="File to fix")
    fix_p.add_argument("--last", action="store_true", help="Only fix the last missing ENDFIX")
    fix_p.add_argument("-w", "--write", action="store_true", help="Modify the file in place")
    fix_p.set_defaults(func=cmd_fix)

    tokens_p = subparsers.add_parser("tokens", help="Dump structural tokens (debug)")
    tokens_p.add_argument("file", help="File to scan")
    tokens_p.set_defaults(func=cmd_tokens)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config) if args.config is not None else LintConfig()
        return args.func(args, config)
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_USAGE
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_USAGE
    except UnicodeDecodeError as exc:
        print(f"error: cannot decode input as {args.encoding}: {exc}", file=sys.stderr)
        return EXIT_USAGE


def _read_text(path: Path, encoding: str) -> str:
    # newline="" keeps CRLF so fixes write back the original line endings.
    with path.open(encoding=encoding, newline="") as handle:
        return handle.read()


def _write_text(path: Path, text: str, encoding: str) -> None:
    with path.open("w", encoding=encoding, newline="") as handle:
        handle.write(text)


if __name__ == "__main__":
    raise SystemExit(main())
