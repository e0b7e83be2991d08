"""
Repository layer for Firebase access patterns.
"""

from mpa_judge.repositories.users import (
    UserRepositoryError,
    build_user_profile,
    ensure_user,
    set_user_profile,
)

__all__ = [
    "UserRepositoryError",
    "build_user_profile",
    "ensure_user",
    "set_user_profile",
]
