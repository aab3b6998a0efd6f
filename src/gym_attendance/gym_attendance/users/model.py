from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: login account.

    Note: Plain data object (no DB access code).
    """

    user_id: int
    username: str
    password_hash: str
    role: Role
    is_active: bool = True
