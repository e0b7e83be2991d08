from __future__ import annotations

import os

from mpa_judge.utils.env import DEFAULT_PROJECT_ID, apply_emulator_defaults, resolve_project_id


def test_resolve_project_id_precedence(monkeypatch) -> None:
    monkeypatch.delenv("FIREBASE_PROJECT_ID", raising=False)
    monkeypatch.delenv("GCLOUD_PROJECT", raising=False)
    assert resolve_project_id() == DEFAULT_PROJECT_ID == "mpa-judge-v2"

    monkeypatch.setenv("GCLOUD_PROJECT", "gcloud-proj")
    assert resolve_project_id() == "gcloud-proj"

    monkeypatch.setenv("FIREBASE_PROJECT_ID", "firebase-proj")
    assert resolve_project_id() == "firebase-proj"
    assert resolve_project_id("explicit") == "explicit"


def test_apply_emulator_defaults_keeps_existing(monkeypatch) -> None:
    monkeypatch.setenv("FIRESTORE_EMULATOR_HOST", "localhost:8181")
    monkeypatch.setenv("FIREBASE_AUTH_EMULATOR_HOST", "")
    monkeypatch.setenv("FIREBASE_STORAGE_EMULATOR_HOST", "")

    hosts = apply_emulator_defaults()

    assert hosts == {
        "FIRESTORE_EMULATOR_HOST": "localhost:8181",
        "FIREBASE_AUTH_EMULATOR_HOST": "127.0.0.1:9099",
        "FIREBASE_STORAGE_EMULATOR_HOST": "127.0.0.1:9199",
    }
    assert os.environ["FIREBASE_STORAGE_EMULATOR_HOST"] == "127.0.0.1:9199"
