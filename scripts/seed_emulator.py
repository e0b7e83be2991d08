#!/usr/bin/env python3
"""
Seed the Firebase emulators (Auth + Firestore) with fixture users, a school,
an ensemble and an active event for local development.
"""
from __future__ import annotations

import argparse
import logging
import sys

from mpa_judge.db.firebase import create_auth_client, create_firestore_client, get_firebase_app
from mpa_judge.seeding.emulator import seed_emulator
from mpa_judge.utils.env import apply_emulator_defaults, load_env, resolve_project_id

logger = logging.getLogger("seed_emulator")


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="seed_emulator",
        description="Seed Firebase emulators with MPA Judge fixture data.",
    )
    parser.add_argument("--project", default=None, help="Firebase project id (default: env or mpa-judge-v2).")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    load_env()

    project_id = resolve_project_id(args.project)
    hosts = apply_emulator_defaults()
    logger.info(
        "Seeding project %s (firestore=%s auth=%s)",
        project_id,
        hosts["FIRESTORE_EMULATOR_HOST"],
        hosts["FIREBASE_AUTH_EMULATOR_HOST"],
    )

    try:
        app = get_firebase_app(project_id=project_id)
        seed_emulator(create_firestore_client(app), create_auth_client(app))
    except Exception:
        logger.exception("Seeding failed")
        return 1

    print("Seed complete.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
