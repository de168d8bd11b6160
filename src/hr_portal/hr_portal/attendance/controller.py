from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import guards
from ..container import Container


def register(app: Flask, container: Container) -> None:
    login_required, _ = guards(container)
    manager = container.session_manager
    service = container.attendance_service

    @app.route("/attendance", methods=["GET"], endpoint="attendance")
    @login_required
    def attendance():
        session = manager.current_session
        account_id = None if session.is_admin else session.account_id
        return jsonify(service.get_history_ui(account_id))

    @app.route("/attendance/today", methods=["GET"], endpoint="attendance_today")
    @login_required
    def attendance_today():
        session = manager.current_session
        return jsonify({"userId": session.account_id, "status": service.today_status(session.account_id).value})
