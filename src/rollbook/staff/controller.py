from __future__ import annotations

from flask import Flask, jsonify, request, session

from ..common.web import current_staff_code, error_response, json_body, login_required
from ..container import Container
from ..core.exceptions import AuthenticationError, ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/login", methods=["POST"], endpoint="login")
    def login():
        data = json_body() if request.is_json else request.form
        try:
            result = container.auth_service.sign_in(data.get("code", ""), data.get("password", ""))
        except ValidationError as e:
            return error_response(str(e))
        except AuthenticationError as e:
            return error_response(str(e), 401)
        except Exception:
            app.logger.exception("Sign-in failed")
            return error_response("An error occurred. Please try again.", 500)

        session["staff_code"] = result.staff.code
        message = "Account created successfully!" if result.created else "Login successful!"
        return jsonify({"success": True, "message": message, "staff": {"id": result.staff.id, "code": result.staff.code}})

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    def logout():
        container.auth_service.sign_out()
        session.clear()
        return jsonify({"success": True, "message": "Logged out successfully!"})

    @app.route("/api/session", methods=["GET"], endpoint="current_session")
    def current_session():
        # A remembered user resumes the session after a restart
        if "staff_code" not in session:
            staff = container.auth_service.current_user()
            if not staff:
                return error_response("Not signed in", 401)
            session["staff_code"] = staff.code
        return jsonify({"success": True, "staff": {"code": current_staff_code()}})

    @app.route("/api/data", methods=["DELETE"], endpoint="clear_all_data")
    @login_required
    def clear_all_data():
        container.account_service.clear_all_data(current_staff_code())
        return jsonify({"success": True, "message": "All data cleared successfully!"})
