from __future__ import annotations

import logging
from typing import Any

from firebase_admin import auth

from mpa_judge.models.constants import COLLECTIONS, FIELDS, ROLES
from mpa_judge.models.seed import IdentitySeed

logger = logging.getLogger(__name__)


class UserRepositoryError(RuntimeError):
    pass


def ensure_user(auth_client: Any, seed: IdentitySeed) -> Any:
    """
    Get-or-create an Auth user keyed on uid.

    An existing account is returned untouched (its email/password are not
    reconciled with the seed). Lookup failures other than "user not found"
    are raised as UserRepositoryError.
    """

    try:
        return auth_client.get_user(seed.uid)
    except auth.UserNotFoundError:
        pass
    except Exception as exc:
        raise UserRepositoryError(f"Auth error looking up user {seed.uid}: {exc}") from exc

    logger.info("Creating auth user %s <%s>", seed.uid, seed.email)
    return auth_client.create_user(
        uid=seed.uid,
        email=seed.email,
        password=seed.password,
        display_name=seed.display_name,
    )


def build_user_profile(user: Any, role: str, *, school_id: str | None = None) -> dict[str, Any]:
    if role not in ROLES:
        raise ValueError(f"Unknown user role: {role!r}")
    fields = FIELDS["users"]
    profile: dict[str, Any] = {
        fields["role"]: role,
        fields["email"]: user.email,
        fields["displayName"]: user.display_name,
    }
    if school_id is not None:
        profile[fields["schoolId"]] = school_id
    return profile


def set_user_profile(db: Any, uid: str, profile: dict[str, Any]) -> None:
    db.collection(COLLECTIONS["users"]).document(uid).set(profile)
