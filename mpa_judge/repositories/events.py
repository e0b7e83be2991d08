from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from mpa_judge.models.constants import ASSIGNMENT_POSITIONS_DOC_ID, COLLECTIONS, FIELDS, JUDGE_POSITIONS


def set_school(db: Any, school_id: str, *, name: str, director_uids: list[str]) -> None:
    fields = FIELDS["schools"]
    db.collection(COLLECTIONS["schools"]).document(school_id).set(
        {
            fields["name"]: name,
            fields["directors"]: {uid: True for uid in director_uids},
        }
    )


def set_ensemble(db: Any, ensemble_id: str, *, school_id: str, name: str, performance_grade: str) -> None:
    fields = FIELDS["ensembles"]
    db.collection(COLLECTIONS["ensembles"]).document(ensemble_id).set(
        {
            fields["schoolId"]: school_id,
            fields["name"]: name,
            fields["performanceGrade"]: performance_grade,
        }
    )


def set_event(db: Any, event_id: str, *, name: str, is_active: bool) -> None:
    fields = FIELDS["events"]
    db.collection(COLLECTIONS["events"]).document(event_id).set(
        {
            fields["name"]: name,
            fields["isActive"]: is_active,
        }
    )


def add_schedule_entry(
    db: Any,
    event_id: str,
    *,
    order_index: int,
    stage_time: str,
    school_id: str,
    ensemble_id: str,
) -> Any:
    """
    Append a schedule slot under `events/{event_id}/schedule` with a generated id.

    Returns the new document reference.
    """

    fields = FIELDS["schedule"]
    _, ref = (
        db.collection(COLLECTIONS["events"])
        .document(event_id)
        .collection(COLLECTIONS["schedule"])
        .add(
            {
                fields["orderIndex"]: order_index,
                fields["stageTime"]: stage_time,
                fields["schoolId"]: school_id,
                fields["ensembleId"]: ensemble_id,
            }
        )
    )
    return ref


def set_assignment_positions(db: Any, event_id: str, positions: Mapping[str, str]) -> None:
    missing = [slot for slot in JUDGE_POSITIONS if not positions.get(slot)]
    if missing:
        raise ValueError(f"Missing judge assignment for positions: {', '.join(missing)}")
    (
        db.collection(COLLECTIONS["events"])
        .document(event_id)
        .collection(COLLECTIONS["assignments"])
        .document(ASSIGNMENT_POSITIONS_DOC_ID)
        .set({field: positions[slot] for slot, field in JUDGE_POSITIONS.items()})
    )
