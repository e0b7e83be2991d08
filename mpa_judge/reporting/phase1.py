"""Render a Playwright JSON run into the phase 1 Markdown smoke-test report."""

from __future__ import annotations

import json
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Mapping

from mpa_judge.models.report import ReportRun, ResultRow, Suite

DEFAULT_INPUT_PATH = Path("reports") / "phase1_results.json"
DEFAULT_OUTPUT_PATH = Path("reports") / "phase1_report.md"

REPORT_TITLE = "# Phase 1 Smoke Test Report"
TABLE_HEADER = "| Test Case | Status | Details | Screenshot |"
TABLE_DIVIDER = "| --- | --- | --- | --- |"
NOT_PROVIDED = "(not provided)"


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def collect_rows(suite: Suite | None) -> list[ResultRow]:
    """
    Flatten a suite tree into report rows, depth first.

    Each test contributes one row built from its first result only.
    """

    rows: list[ResultRow] = []
    if suite is None:
        return rows
    for spec in suite.specs:
        for test in spec.tests:
            result = test.first_result
            rows.append(
                ResultRow(
                    title=spec.title.strip(),
                    status=(result.status if result else None) or "unknown",
                    error=(result.error_message if result else None) or "",
                    screenshot_path=(result.screenshot_path() if result else None) or "",
                )
            )
    for child in suite.suites:
        rows.extend(collect_rows(child))
    return rows


def format_row(row: ResultRow) -> str:
    status = "PASS" if row.passed else "FAIL"
    details = row.error.replace("\n", " ") if row.error else ""
    screenshot = f"`{row.screenshot_path}`" if row.screenshot_path else ""
    return f"| {row.title} | {status} | {details} | {screenshot} |"


def render_report(rows: list[ResultRow], *, start_time: str, base_url: str = "") -> str:
    lines = [
        REPORT_TITLE,
        "",
        f"- Timestamp: {start_time}",
        f"- Base URL: {base_url or NOT_PROVIDED}",
        "",
        TABLE_HEADER,
        TABLE_DIVIDER,
    ]
    lines.extend(format_row(row) for row in rows)
    return "\n".join(lines)


def build_report(data: Mapping[str, Any]) -> str:
    run = ReportRun.from_dict(data)
    # Sibling top-level suites are ignored.
    rows = collect_rows(run.suites[0] if run.suites else None)
    return render_report(
        rows,
        start_time=run.start_time or _utc_now_iso(),
        base_url=run.base_url or os.getenv("MPA_BASE_URL") or "",
    )


def load_results(path: Path) -> dict[str, Any]:
    return json.loads(path.read_text(encoding="utf-8"))
