from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_PROJECT_ID = "mpa-judge-v2"

EMULATOR_HOST_DEFAULTS: dict[str, str] = {
    "FIRESTORE_EMULATOR_HOST": "127.0.0.1:8080",
    "FIREBASE_AUTH_EMULATOR_HOST": "127.0.0.1:9099",
    "FIREBASE_STORAGE_EMULATOR_HOST": "127.0.0.1:9199",
}


def load_env(*, override: bool = False) -> Path | None:
    repo_root = Path(__file__).resolve().parents[2]
    candidates = [
        repo_root / ".env",
        Path.cwd() / ".env",
    ]
    for path in candidates:
        if path.is_file():
            load_dotenv(dotenv_path=path, override=override)
            return path
    return None


def resolve_project_id(explicit: str | None = None) -> str:
    for value in (explicit, os.getenv("FIREBASE_PROJECT_ID"), os.getenv("GCLOUD_PROJECT")):
        if value and value.strip():
            return value.strip()
    return DEFAULT_PROJECT_ID


def apply_emulator_defaults() -> dict[str, str]:
    """
    Point the Firebase Admin SDK at the local emulators.

    Values already present in the environment are kept. Returns the effective
    host for each emulator variable.
    """

    hosts: dict[str, str] = {}
    for name, default in EMULATOR_HOST_DEFAULTS.items():
        if not (os.getenv(name) or "").strip():
            os.environ[name] = default
        hosts[name] = os.environ[name]
    return hosts
