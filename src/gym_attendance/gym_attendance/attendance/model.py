from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Sequence

from ..core.enums import CrowdStatus
from ..members.model import Member


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one gym visit (check-in, optionally closed by a check-out)."""

    attendance_id: int
    member_id: int
    attendance_date: date
    check_in_time: datetime
    check_out_time: Optional[datetime] = None

    @property
    def is_open(self) -> bool:
        return self.check_out_time is None


@dataclass(frozen=True)
class CheckStatus:
    is_checked_in: bool
    attendance: Optional[AttendanceRecord] = None


@dataclass(frozen=True)
class Occupancy:
    count: int
    capacity: int
    occupancy_rate: int
    crowd_status: CrowdStatus


@dataclass(frozen=True)
class LiveSnapshot:
    """Point-in-time view of who is inside. `attendees` is None when identities are withheld."""

    occupancy: Occupancy
    attendees: Optional[Sequence[Member]] = None
