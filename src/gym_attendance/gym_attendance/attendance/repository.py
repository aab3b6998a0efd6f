from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    """Storage for attendance records.

    Implementations must guarantee at most one open record per (member, date):
    `create_checkin` raises InvalidStateError when one already exists.
    """

    def get_open_for_member(self, member_id: int, attendance_date: date) -> Optional[AttendanceRecord]:
        """Most recently opened record without check-out for that member and date."""

        raise NotImplementedError

    def create_checkin(self, *, member_id: int, attendance_date: date, check_in_time: datetime) -> AttendanceRecord:
        raise NotImplementedError

    def close_checkout(self, *, attendance_id: int, check_out_time: datetime) -> bool:
        """Set check_out_time only if the record is still open. Returns False otherwise."""

        raise NotImplementedError

    def list_open(self, attendance_date: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def count_open(self, attendance_date: date) -> int:
        raise NotImplementedError

    def list_history(self, *, member_id: Optional[int] = None) -> Sequence[AttendanceRecord]:
        """Records ordered by date (then check-in time) descending."""

        raise NotImplementedError
