from __future__ import annotations

import logging

from flask import Flask, jsonify, request, session

from ..common.http import current_user_id, json_body, json_error
from ..common.serializers import session_user_to_json
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    auth = container.auth_service

    @app.route("/api/login", methods=["POST"], endpoint="login")
    def login():
        data = json_body() or request.form
        s_user = auth.authenticate(data.get("username", ""), data.get("password", ""))

        session.clear()
        session["user_id"] = s_user.user_id
        session["username"] = s_user.username
        session["role"] = s_user.role.value

        logger.info("User %s logged in as %s", s_user.username, s_user.role.value)
        return jsonify(session_user_to_json(s_user))

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"message": "Logged out"})

    @app.route("/api/user", methods=["GET"], endpoint="me")
    def me():
        if "user_id" not in session:
            return json_error("Unauthorized", 401)

        s_user = auth.get_session_user(current_user_id())
        if not s_user:
            session.clear()
            return json_error("Unauthorized", 401)
        return jsonify(session_user_to_json(s_user))
