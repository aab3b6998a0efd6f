from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Caller role used for access control."""

    ADMIN = "admin"
    TRAINER = "trainer"
    MEMBER = "member"

    @property
    def is_staff(self) -> bool:
        return self in (Role.ADMIN, Role.TRAINER)


class MemberStatus(str, Enum):
    """Membership status; only ACTIVE members may check in."""

    ACTIVE = "active"
    FROZEN = "frozen"
    INACTIVE = "inactive"


class CrowdStatus(str, Enum):
    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"
    FULL = "Full"


class PlanType(str, Enum):
    CLASSIC = "classic"
    PREMIUM = "premium"
    VIP = "vip"


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"
