"""
Firestore collection and field names shared by the judging app and its tooling.
"""

from __future__ import annotations

from typing import Final

COLLECTIONS: Final[dict[str, str]] = {
    "users": "users",
    "schools": "schools",
    "events": "events",
    "schedule": "schedule",
    "assignments": "assignments",
    "ensembles": "ensembles",
    "repertoire": "mpaRepertoire",
}

FIELDS: Final[dict[str, dict[str, str]]] = {
    "users": {
        "role": "role",
        "email": "email",
        "displayName": "displayName",
        "schoolId": "schoolId",
    },
    "schools": {
        "name": "name",
        "directors": "directors",
    },
    "ensembles": {
        "schoolId": "schoolId",
        "name": "name",
        "performanceGrade": "performanceGrade",
    },
    "events": {
        "isActive": "isActive",
        "name": "name",
    },
    "schedule": {
        "orderIndex": "orderIndex",
        "stageTime": "stageTime",
        "schoolId": "schoolId",
        "ensembleId": "ensembleId",
    },
}

# Singleton document under events/{eventId}/assignments.
ASSIGNMENT_POSITIONS_DOC_ID: Final = "positions"

ROLES: Final[tuple[str, ...]] = ("admin", "judge", "director")

# Judging slot -> field on the assignment positions document.
JUDGE_POSITIONS: Final[dict[str, str]] = {
    "stage1": "stage1Uid",
    "stage2": "stage2Uid",
    "stage3": "stage3Uid",
    "sight": "sightUid",
}
