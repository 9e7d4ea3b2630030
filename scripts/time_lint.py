#!/usr/bin/env python3
"""Time full lint passes over a tree of calc scripts."""

from __future__ import annotations

import argparse
import cProfile
from pathlib import Path
import pstats
import statistics
import time

from tqdm import tqdm

from essbaselint.pipeline import run_lint


def _load_scripts(root: Path) -> list[str]:
    paths = sorted(path for path in root.rglob("*") if path.is_file() and path.suffix.lower() == ".csc")
    return [path.read_text(encoding="utf-8", errors="replace") for path in paths]


def _lint_pass(texts: list[str]) -> tuple[float, int]:
    start = time.perf_counter()
    diagnostics = sum(len(run_lint(text).diagnostics) for text in texts)
    return time.perf_counter() - start, diagnostics


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark calc-script lint throughput")
    parser.add_argument("root", type=Path, help="Directory searched recursively for .csc files")
    parser.add_argument("--runs", type=int, default=5, help="Timed passes over the whole tree")
    parser.add_argument("--profile", action="store_true", help="Profile one pass and print the top 25 hotspots")
    args = parser.parse_args()

    if not args.root.is_dir():
        raise SystemExit(f"Invalid root directory: {args.root}")
    texts = _load_scripts(args.root)
    if not texts:
        raise SystemExit(f"No .csc files found under {args.root}")

    if args.profile:
        with cProfile.Profile() as profiler:
            _lint_pass(texts)
        pstats.Stats(profiler).sort_stats("cumulative").print_stats(25)
        return 0

    timings: list[float] = []
    diagnostics = 0
    for _ in tqdm(range(max(args.runs, 1)), desc="lint", unit="pass"):
        duration, diagnostics = _lint_pass(texts)
        timings.append(duration)

    best = min(timings)
    print(f"{len(texts)} files, {diagnostics} diagnostics per pass")
    print(f"best {best:.4f}s  median {statistics.median(timings):.4f}s  worst {max(timings):.4f}s")
    print(f"{len(texts) / best:.1f} files/s (best pass)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
