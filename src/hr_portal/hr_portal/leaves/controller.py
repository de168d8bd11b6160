from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import form_data, guards, route_id
from ..container import Container
from ..core.enums import Collection, LeaveStatus


def register(app: Flask, container: Container) -> None:
    login_required, admin_required = guards(container)
    manager = container.session_manager
    service = container.leave_service

    @app.route("/leaves", methods=["GET"], endpoint="leaves")
    @login_required
    def leaves():
        session = manager.current_session
        account_id = None if session.is_admin else session.account_id
        return jsonify([leave.to_record() for leave in service.for_account(account_id)])

    @app.route("/leaves", methods=["POST"], endpoint="submit_leave")
    @login_required
    def submit_leave():
        leave = manager.submit_leave(form_data())
        return jsonify(leave.to_record()), 201

    @app.route("/leaves/<leave_id>/status", methods=["POST"], endpoint="set_leave_status")
    @admin_required
    def set_leave_status(leave_id: str):
        leave = manager.set_leave_status(route_id(container, Collection.LEAVES, leave_id), form_data().get("status"))
        return jsonify(leave.to_record())

    @app.route("/leaves/<leave_id>/approve", methods=["POST"], endpoint="approve_leave")
    @admin_required
    def approve_leave(leave_id: str):
        leave = manager.set_leave_status(route_id(container, Collection.LEAVES, leave_id), LeaveStatus.APPROVED)
        return jsonify(leave.to_record())

    @app.route("/leaves/<leave_id>/reject", methods=["POST"], endpoint="reject_leave")
    @admin_required
    def reject_leave(leave_id: str):
        leave = manager.set_leave_status(route_id(container, Collection.LEAVES, leave_id), LeaveStatus.REJECTED)
        return jsonify(leave.to_record())
