"""
Firebase helpers for MPA Judge scripts.
"""

from mpa_judge.db.firebase import create_auth_client, create_firestore_client, get_firebase_app

__all__ = [
    "create_auth_client",
    "create_firestore_client",
    "get_firebase_app",
]
