from __future__ import annotations

import os

import firebase_admin
from firebase_admin import App, auth, credentials, firestore
from google.auth.credentials import AnonymousCredentials

from mpa_judge.utils.env import resolve_project_id


class EmulatorCredential(credentials.Base):
    """
    Credential for the local emulators, which accept unauthenticated admin calls.
    """

    def get_credential(self):
        return AnonymousCredentials()


def using_emulators() -> bool:
    return bool((os.getenv("FIRESTORE_EMULATOR_HOST") or "").strip())


def get_firebase_app(*, project_id: str | None = None) -> App:
    """
    Return the default Firebase Admin app, initializing it on first use.

    Against the emulators no real credential is needed; otherwise the
    application-default credentials are used.
    """

    try:
        return firebase_admin.get_app()
    except ValueError:
        credential = EmulatorCredential() if using_emulators() else None
        return firebase_admin.initialize_app(credential, {"projectId": resolve_project_id(project_id)})


def create_auth_client(app: App | None = None) -> auth.Client:
    return auth.Client(app or get_firebase_app())


def create_firestore_client(app: App | None = None):
    return firestore.client(app=app or get_firebase_app())
