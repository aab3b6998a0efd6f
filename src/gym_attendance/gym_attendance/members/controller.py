from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import admin_required, current_role, current_user_id, json_error, login_required, staff_required
from ..common.serializers import member_to_json
from ..core.enums import Role
from ..container import Container


def register(app: Flask, container: Container) -> None:
    members = container.member_service

    @app.route("/api/members", methods=["GET"], endpoint="members_list")
    @staff_required
    def members_list():
        return jsonify([member_to_json(m) for m in members.list_members()])

    @app.route("/api/members/<int:member_id>", methods=["GET"], endpoint="members_get")
    @login_required
    def members_get(member_id: int):
        # Admin/Trainer can view anyone, Member can only view self
        if current_role() == Role.MEMBER:
            mine = members.get_by_user_id(current_user_id())
            if not mine or mine.member_id != member_id:
                return json_error("Forbidden", 403)

        return jsonify(member_to_json(members.get_member(member_id)))

    @app.route("/api/members/<int:member_id>/freeze", methods=["POST"], endpoint="members_freeze")
    @admin_required
    def members_freeze(member_id: int):
        member = members.toggle_freeze(current_role=current_role(), member_id=member_id)
        return jsonify(member_to_json(member))

    @app.route("/api/profile/me", methods=["GET"], endpoint="profile_me")
    @login_required
    def profile_me():
        return jsonify(member_to_json(members.require_profile(current_user_id())))
