from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import (
    current_role,
    current_user_id,
    json_body,
    login_required,
    member_required,
    staff_required,
)
from ..common.serializers import attendance_to_json, check_status_to_json, live_snapshot_to_json
from ..common.validators import require_positive_int
from ..core.enums import Role
from ..core.exceptions import ValidationError
from ..container import Container


def _member_id_from_body() -> int:
    value = json_body().get("memberId")
    if value is None or value == "":
        raise ValidationError("memberId is required")
    # bool is an int subclass; true must not become member 1
    if isinstance(value, bool):
        raise ValidationError("memberId must be a whole number")
    return require_positive_int(value, "memberId")


def register(app: Flask, container: Container) -> None:
    attendance = container.attendance_service

    # ===== STAFF =====

    @app.route("/api/attendance/check-in", methods=["POST"], endpoint="attendance_check_in")
    @staff_required
    def attendance_check_in():
        member_id = _member_id_from_body()
        record = attendance.check_in(member_id)
        return jsonify(attendance_to_json(record))

    @app.route("/api/attendance/check-out", methods=["POST"], endpoint="attendance_check_out")
    @staff_required
    def attendance_check_out():
        member_id = _member_id_from_body()
        record = attendance.check_out(member_id)
        return jsonify(attendance_to_json(record))

    @app.route("/api/attendance/live", methods=["GET"], endpoint="attendance_live")
    @login_required
    def attendance_live():
        # Plain members see the crowd level only, never who is inside.
        snapshot = attendance.get_live_snapshot(include_attendees=current_role().is_staff)
        return jsonify(live_snapshot_to_json(snapshot))

    @app.route("/api/attendance/history", methods=["GET"], endpoint="attendance_history")
    @login_required
    def attendance_history():
        member_id = request.args.get("memberId", type=int)

        # Members can only see their own history
        if current_role() == Role.MEMBER:
            member_id = container.member_service.require_profile(current_user_id()).member_id

        history = attendance.get_attendance_history(member_id)
        return jsonify([attendance_to_json(r) for r in history])

    # ===== SELF-SERVICE =====

    @app.route("/api/profile/check-in", methods=["POST"], endpoint="profile_check_in")
    @member_required
    def profile_check_in():
        record = attendance.self_check_in(current_user_id())
        return jsonify(attendance_to_json(record))

    @app.route("/api/profile/check-out", methods=["POST"], endpoint="profile_check_out")
    @member_required
    def profile_check_out():
        record = attendance.self_check_out(current_user_id())
        return jsonify(attendance_to_json(record))

    @app.route("/api/profile/check-status", methods=["GET"], endpoint="profile_check_status")
    @member_required
    def profile_check_status():
        return jsonify(check_status_to_json(attendance.self_check_status(current_user_id())))

    @app.route("/api/profile/attendance", methods=["GET"], endpoint="profile_attendance")
    @login_required
    def profile_attendance():
        member = container.member_service.require_profile(current_user_id())
        history = attendance.get_attendance_history(member.member_id)
        return jsonify([attendance_to_json(r) for r in history])
