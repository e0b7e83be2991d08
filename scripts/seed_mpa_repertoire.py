#!/usr/bin/env python3
"""
Import the MPA repertoire list (XLSX or PDF) into Firestore `mpaRepertoire`.
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from mpa_judge.db.firebase import create_firestore_client, get_firebase_app
from mpa_judge.seeding.repertoire import parse_pdf, parse_workbook_xlsx, seed_repertoire
from mpa_judge.utils.env import load_env, resolve_project_id


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="seed_mpa_repertoire",
        description="Parse the MPA repertoire list and write it to Firestore.",
    )
    parser.add_argument("--xlsx", default=None, help="Path to the repertoire workbook (env: MPA_XLSX_PATH).")
    parser.add_argument("--pdf", default=None, help="Path to the repertoire PDF (env: MPA_PDF_PATH).")
    parser.add_argument("--project", default=None, help="Firebase project id (default: env or mpa-judge-v2).")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    load_env()

    xlsx_arg = args.xlsx or os.getenv("MPA_XLSX_PATH")
    pdf_arg = args.pdf or os.getenv("MPA_PDF_PATH")
    if not xlsx_arg and not pdf_arg:
        print(
            'Missing source path. Use --xlsx "/path/to/list.xlsx" or --pdf "/path/to/NCBA_MPA_List.pdf".',
            file=sys.stderr,
        )
        return 1

    if xlsx_arg:
        source = Path(xlsx_arg).resolve()
        if not source.exists():
            print(f"XLSX not found at {source}", file=sys.stderr)
            return 1
        parsed = parse_workbook_xlsx(source)
    else:
        source = Path(pdf_arg).resolve()
        if not source.exists():
            print(f"PDF not found at {source}", file=sys.stderr)
            return 1
        parsed = parse_pdf(source)

    app = get_firebase_app(project_id=resolve_project_id(args.project))
    summary = seed_repertoire(create_firestore_client(app), parsed)
    print(f"Seed complete. Parsed {summary.parsed} lines, writing {summary.written} entries.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
