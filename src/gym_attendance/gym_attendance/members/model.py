from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import Gender, MemberStatus, PlanType


@dataclass(frozen=True)
class Member:
    """Domain entity: a gym member profile, owned by exactly one user account.

    Note: Plain data object (no DB access code).
    """

    member_id: int
    user_id: int
    full_name: str
    gender: Gender
    plan_type: PlanType
    join_date: date
    status: MemberStatus
    email: Optional[str] = None
    phone: Optional[str] = None

    @property
    def can_check_in(self) -> bool:
        return self.status == MemberStatus.ACTIVE
