from __future__ import annotations

from mpa_judge.models.constants import COLLECTIONS, FIELDS, JUDGE_POSITIONS, ROLES


def test_collection_names() -> None:
    assert COLLECTIONS == {
        "users": "users",
        "schools": "schools",
        "events": "events",
        "schedule": "schedule",
        "assignments": "assignments",
        "ensembles": "ensembles",
        "repertoire": "mpaRepertoire",
    }


def test_field_tables_use_firestore_names() -> None:
    assert set(FIELDS) == {"users", "schools", "ensembles", "events", "schedule"}
    for table in FIELDS.values():
        for key, value in table.items():
            assert key == value

    assert list(FIELDS["users"]) == ["role", "email", "displayName", "schoolId"]
    assert list(FIELDS["schedule"]) == ["orderIndex", "stageTime", "schoolId", "ensembleId"]


def test_roles_and_judge_positions() -> None:
    assert ROLES == ("admin", "judge", "director")
    assert JUDGE_POSITIONS == {
        "stage1": "stage1Uid",
        "stage2": "stage2Uid",
        "stage3": "stage3Uid",
        "sight": "sightUid",
    }
