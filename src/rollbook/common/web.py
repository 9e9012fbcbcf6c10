from __future__ import annotations

from functools import wraps

from flask import jsonify, request, session


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "staff_code" not in session:
            return jsonify({"success": False, "message": "Please sign in to continue!"}), 401
        return view(*args, **kwargs)

    return wrapper


def current_staff_code() -> str:
    return str(session["staff_code"])


def json_body() -> dict:
    """Request JSON object, or an empty dict for anything else."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def error_response(message: str, status: int = 400, **extra):
    return jsonify({"success": False, "message": message, **extra}), status


def parse_flag(value, default: bool = True) -> bool:
    if value is None or value == "":
        return default
    return str(value).strip().lower() in {"1", "true", "yes", "on"}
