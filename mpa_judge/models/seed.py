from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class IdentitySeed:
    """
    Fixture account for the Auth emulator plus its `users/{uid}` profile role.
    """

    uid: str
    email: str
    password: str
    display_name: str
    role: str
