"""
Fixture data for local development against the Firebase emulators.

Creates one admin, four judges and one director in Auth, then writes their
`users` profiles and a single school / ensemble / event with a schedule slot
and judge assignments.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any

from mpa_judge.models.seed import IdentitySeed
from mpa_judge.repositories.events import (
    add_schedule_entry,
    set_assignment_positions,
    set_ensemble,
    set_event,
    set_school,
)
from mpa_judge.repositories.users import build_user_profile, ensure_user, set_user_profile

logger = logging.getLogger(__name__)

EVENT_ID = "event_2026_1"
SCHOOL_ID = "school_001"
ENSEMBLE_ID = "ensemble_001"

SEED_PASSWORD = "password123"

ADMIN = IdentitySeed("admin_001", "admin@example.com", SEED_PASSWORD, "Admin User", "admin")
JUDGES: dict[str, IdentitySeed] = {
    "stage1": IdentitySeed("judge_stage1", "stage1@example.com", SEED_PASSWORD, "Stage Judge 1", "judge"),
    "stage2": IdentitySeed("judge_stage2", "stage2@example.com", SEED_PASSWORD, "Stage Judge 2", "judge"),
    "stage3": IdentitySeed("judge_stage3", "stage3@example.com", SEED_PASSWORD, "Stage Judge 3", "judge"),
    "sight": IdentitySeed("judge_sight", "sight@example.com", SEED_PASSWORD, "Sight Judge", "judge"),
}
DIRECTOR = IdentitySeed("director_001", "director@example.com", SEED_PASSWORD, "Director One", "director")

IDENTITY_SEEDS: tuple[IdentitySeed, ...] = (ADMIN, *JUDGES.values(), DIRECTOR)


@dataclass(frozen=True)
class SeedResult:
    user_uids: tuple[str, ...]
    event_id: str
    school_id: str
    ensemble_id: str
    schedule_entry_id: str | None


def _write_judge_profiles(db: Any, judges: dict[str, Any]) -> None:
    # All four writes are in flight together; the first failure is re-raised.
    with ThreadPoolExecutor(max_workers=len(judges)) as pool:
        futures = [
            pool.submit(set_user_profile, db, judge.uid, build_user_profile(judge, JUDGES[slot].role))
            for slot, judge in judges.items()
        ]
        for future in futures:
            future.result()


def seed_emulator(db: Any, auth_client: Any) -> SeedResult:
    admin_user = ensure_user(auth_client, ADMIN)
    judge_users = {slot: ensure_user(auth_client, seed) for slot, seed in JUDGES.items()}
    director = ensure_user(auth_client, DIRECTOR)

    set_user_profile(db, admin_user.uid, build_user_profile(admin_user, ADMIN.role))
    _write_judge_profiles(db, judge_users)
    set_user_profile(db, director.uid, build_user_profile(director, DIRECTOR.role, school_id=SCHOOL_ID))
    logger.info("Wrote %d user profiles", 2 + len(judge_users))

    set_school(db, SCHOOL_ID, name="Central High", director_uids=[director.uid])
    set_ensemble(
        db,
        ENSEMBLE_ID,
        school_id=SCHOOL_ID,
        name="Central Wind Ensemble",
        performance_grade="II",
    )
    set_event(db, EVENT_ID, name="MPA Regional 2026", is_active=True)
    schedule_ref = add_schedule_entry(
        db,
        EVENT_ID,
        order_index=1,
        stage_time="10:30 AM",
        school_id=SCHOOL_ID,
        ensemble_id=ENSEMBLE_ID,
    )
    set_assignment_positions(db, EVENT_ID, {slot: user.uid for slot, user in judge_users.items()})

    return SeedResult(
        user_uids=(admin_user.uid, *(u.uid for u in judge_users.values()), director.uid),
        event_id=EVENT_ID,
        school_id=SCHOOL_ID,
        ensemble_id=ENSEMBLE_ID,
        schedule_entry_id=getattr(schedule_ref, "id", None),
    )
