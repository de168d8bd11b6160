from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import guards
from ..container import Container


def register(app: Flask, container: Container) -> None:
    login_required, _ = guards(container)
    manager = container.session_manager
    service = container.payroll_service

    @app.route("/payroll", methods=["GET"], endpoint="payroll")
    @login_required
    def payroll():
        session = manager.current_session
        account_id = None if session.is_admin else session.account_id
        return jsonify([r.to_record() for r in service.for_account(account_id)])
