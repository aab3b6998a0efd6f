from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import admin_required, current_role, json_body, staff_required
from ..common.serializers import setting_to_json
from ..container import Container


def register(app: Flask, container: Container) -> None:
    settings = container.settings_service

    @app.route("/api/settings", methods=["GET"], endpoint="settings_list")
    @staff_required
    def settings_list():
        return jsonify([setting_to_json(s) for s in settings.list_settings()])

    @app.route("/api/settings/<key>", methods=["GET"], endpoint="settings_get")
    @admin_required
    def settings_get(key: str):
        return jsonify(setting_to_json(settings.get_setting(key)))

    @app.route("/api/settings/<key>", methods=["PUT"], endpoint="settings_update")
    @admin_required
    def settings_update(key: str):
        data = json_body()
        setting = settings.set_setting(current_role=current_role(), key=key, value=data.get("value"))
        return jsonify(setting_to_json(setting))
