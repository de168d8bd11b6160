from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import form_data, guards, route_id
from ..container import Container
from ..core.enums import Collection


def _account_view(account) -> dict:
    data = account.to_record(include_password=False)
    data["employeeCode"] = account.employee_code
    data["remainingLeaves"] = account.remaining_leaves
    return data


def register(app: Flask, container: Container) -> None:
    login_required, admin_required = guards(container)
    manager = container.session_manager

    @app.route("/login", methods=["POST"], endpoint="login")
    def login():
        data = form_data()
        account = manager.login(str(data.get("username", "")), str(data.get("password", "")))
        return jsonify({"account": _account_view(account), "warning": manager.last_error})

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        manager.logout()
        return jsonify({"message": "Logged out"})

    @app.route("/session", methods=["GET"], endpoint="session_info")
    def session_info():
        session = manager.current_session
        if session is None:
            return jsonify({"authenticated": False, "error": manager.last_error})
        return jsonify(
            {
                "authenticated": True,
                "origin": session.origin.value,
                "startedAt": session.started_at.isoformat(timespec="seconds"),
                "account": _account_view(session.account),
                "error": manager.last_error,
            }
        )

    @app.route("/register", methods=["POST"], endpoint="register")
    def register_account():
        account = manager.register(form_data())
        return jsonify({"account": _account_view(account), "message": "Registration successful! Please login."}), 201

    @app.route("/profile", methods=["GET"], endpoint="profile")
    @login_required
    def profile():
        return jsonify(_account_view(manager.current_session.account))

    @app.route("/departments", methods=["GET"], endpoint="departments")
    @login_required
    def departments():
        return jsonify([d.to_record() for d in container.snapshot.departments])

    @app.route("/accounts", methods=["GET"], endpoint="list_accounts")
    @admin_required
    def list_accounts():
        return jsonify([_account_view(a) for a in container.snapshot.accounts])

    @app.route("/accounts", methods=["POST"], endpoint="add_account")
    @admin_required
    def add_account():
        account = manager.add_account(form_data())
        return jsonify(_account_view(account)), 201

    @app.route("/accounts/<account_id>", methods=["PUT"], endpoint="update_account")
    @admin_required
    def update_account(account_id: str):
        account = manager.update_account(route_id(container, Collection.ACCOUNTS, account_id), form_data())
        return jsonify(_account_view(account))

    @app.route("/accounts/<account_id>", methods=["DELETE"], endpoint="delete_account")
    @admin_required
    def delete_account(account_id: str):
        manager.delete_account_cascade(route_id(container, Collection.ACCOUNTS, account_id))
        return jsonify({"message": "Account deleted"})

    @app.route("/accounts/cascades/retry", methods=["POST"], endpoint="retry_cascades")
    @admin_required
    def retry_cascades():
        remaining = manager.retry_pending_cascades()
        return jsonify({"pending": remaining})
