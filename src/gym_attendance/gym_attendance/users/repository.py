from __future__ import annotations

from datetime import date
from typing import Optional, Protocol

from ..core.enums import Gender, PlanType, Role
from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    Note (DIP): services depend on this interface, not on a concrete database.
    """

    def get_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    def get_by_username(self, username: str) -> Optional[User]:
        raise NotImplementedError

    def create_with_member(
        self,
        *,
        username: str,
        password_hash: str,
        role: Role,
        full_name: str,
        email: Optional[str],
        gender: Gender,
        plan_type: PlanType,
        join_date: date,
    ) -> int:
        """Create the account and its member profile atomically. Returns user_id."""

        raise NotImplementedError
