from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.exceptions import CapacityExceededError, InvalidStateError
from ..members.service import MemberService
from ..settings.service import SettingsService
from .model import AttendanceRecord, CheckStatus, LiveSnapshot
from .occupancy import compute_occupancy
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Check-in/check-out state per member and day, plus live and historical queries.

    A member is Present while an attendance record dated today has no
    check-out time, Absent otherwise. Each Absent -> Present -> Absent cycle
    leaves one closed record behind as history.

    Two check-in paths exist:
    - `check_in`: staff checks a member in. Status and duplicate session are
      enforced, capacity is not (staff may override a full gym).
    - `self_check_in`: the member checks in. Status, then capacity, then
      duplicate session, in that order.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        members: MemberService,
        settings: SettingsService,
    ):
        self._attendance = attendance
        self._members = members
        self._settings = settings

    # ----- state transitions -----

    def check_in(self, member_id: int, *, now: datetime | None = None) -> AttendanceRecord:
        now = now or now_local()

        member = self._members.find_member(member_id)
        if not member or not member.can_check_in:
            raise InvalidStateError("Member inactive or not found")

        if self.is_checked_in(member.member_id, today=now.date()).is_checked_in:
            raise InvalidStateError("Already checked in")

        return self._open_session(member.member_id, now)

    def check_out(self, member_id: int, *, now: datetime | None = None) -> AttendanceRecord:
        now = now or now_local()

        record = self._attendance.get_open_for_member(int(member_id), now.date())
        # A concurrent check-out may close the record between the read and the update.
        if not record or not self._attendance.close_checkout(attendance_id=record.attendance_id, check_out_time=now):
            raise InvalidStateError("No active check-in found")

        logger.info("Member %s checked out (attendance %s)", record.member_id, record.attendance_id)
        return replace(record, check_out_time=now)

    def _open_session(self, member_id: int, now: datetime) -> AttendanceRecord:
        # The repository enforces one open session per member and day, so a
        # racing duplicate surfaces here as InvalidStateError.
        record = self._attendance.create_checkin(
            member_id=member_id,
            attendance_date=now.date(),
            check_in_time=now,
        )
        logger.info("Member %s checked in (attendance %s)", member_id, record.attendance_id)
        return record

    # ----- self-service -----

    def self_check_in(self, user_id: int, *, now: datetime | None = None) -> AttendanceRecord:
        now = now or now_local()
        today = now.date()

        member = self._members.require_profile(user_id)

        if not member.can_check_in:
            logger.info("Self check-in refused for member %s: status %s", member.member_id, member.status.value)
            raise InvalidStateError(f"Membership is {member.status.value}")

        capacity = self._settings.get_capacity()
        if self._attendance.count_open(today) >= capacity:
            logger.info("Self check-in refused for member %s: gym at capacity %s", member.member_id, capacity)
            raise CapacityExceededError("Gym at full capacity")

        if self.is_checked_in(member.member_id, today=today).is_checked_in:
            raise InvalidStateError("Already checked in")

        return self._open_session(member.member_id, now)

    def self_check_out(self, user_id: int, *, now: datetime | None = None) -> AttendanceRecord:
        member = self._members.require_profile(user_id)
        return self.check_out(member.member_id, now=now)

    def self_check_status(self, user_id: int, *, today: date | None = None) -> CheckStatus:
        member = self._members.require_profile(user_id)
        return self.is_checked_in(member.member_id, today=today)

    # ----- queries -----

    def is_checked_in(self, member_id: int, *, today: date | None = None) -> CheckStatus:
        today = today or now_local().date()
        record = self._attendance.get_open_for_member(int(member_id), today)
        return CheckStatus(is_checked_in=record is not None, attendance=record)

    def get_live_attendance(self, *, today: date | None = None) -> Sequence[AttendanceRecord]:
        return self._attendance.list_open(today or now_local().date())

    def get_attendance_history(self, member_id: Optional[int] = None) -> Sequence[AttendanceRecord]:
        return self._attendance.list_history(member_id=int(member_id) if member_id is not None else None)

    def get_live_snapshot(self, *, include_attendees: bool, today: date | None = None) -> LiveSnapshot:
        records = self.get_live_attendance(today=today)
        occupancy = compute_occupancy(len(records), self._settings.get_capacity())

        attendees = None
        if include_attendees:
            by_id = {m.member_id: m for m in self._members.get_many(r.member_id for r in records)}
            attendees = [by_id[r.member_id] for r in records if r.member_id in by_id]

        return LiveSnapshot(occupancy=occupancy, attendees=attendees)
