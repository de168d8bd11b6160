from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import guards
from ..container import Container
from .statistics import attendance_breakdown, department_chart


def register(app: Flask, container: Container) -> None:
    login_required, _ = guards(container)
    manager = container.session_manager

    @app.route("/dashboard", methods=["GET"], endpoint="dashboard")
    @login_required
    def dashboard():
        session = manager.current_session
        if session.is_admin:
            return jsonify(
                {
                    "statistics": manager.compute_statistics().to_dict(),
                    "attendance": attendance_breakdown(container.snapshot),
                    "departments": department_chart(container.snapshot),
                }
            )

        account_id = session.account_id
        latest = container.payroll_service.latest_for(account_id)
        return jsonify(
            {
                "name": session.account.name,
                "todayStatus": container.attendance_service.today_status(account_id).value,
                "leaves": [leave.to_record() for leave in container.leave_service.for_account(account_id)],
                "latestPayroll": latest.to_record() if latest else None,
                "remainingLeaves": session.account.remaining_leaves,
            }
        )

    @app.route("/reload", methods=["POST"], endpoint="reload")
    @login_required
    def reload():
        manager.reload()
        return jsonify({"message": "Data refreshed"})
