"""JSON shapes of the API (camelCase keys, ISO-8601 timestamps)."""
from __future__ import annotations

from ..attendance.model import AttendanceRecord, CheckStatus, LiveSnapshot
from ..members.model import Member
from ..settings.model import Setting
from ..users.service import SessionUser
from .datetime_utils import isoformat_or_none


def attendance_to_json(r: AttendanceRecord) -> dict:
    return {
        "id": r.attendance_id,
        "memberId": r.member_id,
        "date": r.attendance_date.isoformat(),
        "checkInTime": isoformat_or_none(r.check_in_time),
        "checkOutTime": isoformat_or_none(r.check_out_time),
    }


def check_status_to_json(s: CheckStatus) -> dict:
    return {
        "isCheckedIn": s.is_checked_in,
        "attendance": attendance_to_json(s.attendance) if s.attendance else None,
    }


def member_to_json(m: Member) -> dict:
    return {
        "id": m.member_id,
        "userId": m.user_id,
        "fullName": m.full_name,
        "email": m.email,
        "phone": m.phone,
        "gender": m.gender.value,
        "planType": m.plan_type.value,
        "joinDate": m.join_date.isoformat(),
        "status": m.status.value,
    }


def live_snapshot_to_json(s: LiveSnapshot) -> dict:
    body = {
        "count": s.occupancy.count,
        "capacity": s.occupancy.capacity,
        "occupancyRate": s.occupancy.occupancy_rate,
        "crowdStatus": s.occupancy.crowd_status.value,
    }
    if s.attendees is not None:
        body["attendees"] = [member_to_json(m) for m in s.attendees]
    return body


def setting_to_json(s: Setting) -> dict:
    return {"key": s.key, "value": s.value}


def session_user_to_json(u: SessionUser) -> dict:
    return {"id": u.user_id, "username": u.username, "role": u.role.value}
