#!/usr/bin/env python3
"""
Run the phase 1 smoke tests, then always render the report.

Exits non-zero if either step fails.
"""
from __future__ import annotations

import argparse
import shlex
import subprocess
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]

DEFAULT_TEST_CMD = "npm run test:phase1"


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="phase1_verify.py",
        description="Run phase 1 smoke tests and generate the Markdown report.",
    )
    parser.add_argument("--test-cmd", default=DEFAULT_TEST_CMD, help=f"Test command (default: {DEFAULT_TEST_CMD}).")
    parser.add_argument(
        "--report-cmd",
        default=None,
        help="Report command (default: scripts/phase1_report.py with --python).",
    )
    parser.add_argument(
        "--python",
        default=sys.executable,
        help="Python interpreter for the default report command (default: current).",
    )
    return parser.parse_args(argv)


def _run(cmd: list[str]) -> int:
    print(f"\n==> {shlex.join(cmd)}")
    try:
        completed = subprocess.run(cmd, cwd=str(REPO_ROOT), check=False)
    except OSError as exc:
        print(f"ERROR: unable to run {shlex.join(cmd)}: {exc}", file=sys.stderr)
        return 1
    return completed.returncode


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    if args.report_cmd:
        report_cmd = shlex.split(args.report_cmd)
    else:
        report_cmd = [args.python, str(REPO_ROOT / "scripts" / "phase1_report.py")]

    test_status = _run(shlex.split(args.test_cmd))
    report_status = _run(report_cmd)
    return 1 if test_status or report_status else 0


if __name__ == "__main__":
    raise SystemExit(main())
