#!/usr/bin/env python3
"""
Convert the Playwright JSON results for the phase 1 smoke tests into a
Markdown report, written to disk and echoed to stdout.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from mpa_judge.reporting.phase1 import DEFAULT_INPUT_PATH, DEFAULT_OUTPUT_PATH, build_report, load_results
from mpa_judge.utils.env import load_env


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="phase1_report",
        description="Render reports/phase1_results.json as a Markdown table.",
    )
    parser.add_argument("--input", type=Path, default=DEFAULT_INPUT_PATH, help="Playwright JSON results file.")
    parser.add_argument("--output", type=Path, default=DEFAULT_OUTPUT_PATH, help="Markdown report path.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    load_env()

    if not args.input.exists():
        print(f"Missing report data: {args.input}", file=sys.stderr)
        return 1

    report = build_report(load_results(args.input))
    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_text(report, encoding="utf-8")
    print(report)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
