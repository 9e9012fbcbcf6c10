from __future__ import annotations

from dataclasses import asdict

from flask import Flask, jsonify

from ..common.datetime_utils import today_iso
from ..common.web import current_staff_code, error_response, json_body, login_required
from ..container import Container
from ..core.exceptions import NotFoundError, ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance", methods=["POST"], endpoint="mark_attendance")
    @login_required
    def mark_attendance():
        data = json_body()
        staff_code = current_staff_code()
        try:
            if isinstance(data.get("records"), dict):
                daily = container.attendance_service.save_records(
                    staff_code, date=data.get("date", ""), records=data["records"]
                )
                unknown = []
            else:
                result = container.attendance_service.mark(
                    staff_code,
                    date=data.get("date", ""),
                    absent=data.get("absent", ""),
                    on_duty=data.get("onDuty", ""),
                )
                daily, unknown = result.attendance, result.unknown_reg_nos
        except ValidationError as e:
            return error_response(str(e))

        return jsonify(
            {
                "success": True,
                "message": "Attendance saved successfully!",
                "attendance": daily.to_dict(),
                "unknownRegNos": unknown,
            }
        )

    @app.route("/api/attendance/<date>", methods=["GET"], endpoint="saved_attendance")
    @login_required
    def saved_attendance(date: str):
        try:
            saved = container.attendance_service.load_saved(current_staff_code(), date)
        except NotFoundError as e:
            return error_response(str(e), 404)
        except ValidationError as e:
            return error_response(str(e))
        return jsonify({"success": True, "date": saved.date, "absent": saved.absent, "onDuty": saved.on_duty})

    @app.route("/api/attendance/preview", methods=["POST"], endpoint="attendance_preview")
    @login_required
    def attendance_preview():
        data = json_body()
        try:
            rows = container.attendance_service.preview(
                current_staff_code(), absent=data.get("absent", ""), on_duty=data.get("onDuty", "")
            )
        except ValidationError as e:
            return error_response(str(e))
        return jsonify({"success": True, "rows": rows})

    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    @login_required
    def dashboard():
        staff_code = current_staff_code()
        today = today_iso()
        return jsonify(
            {
                "success": True,
                "rosterCount": len(container.roster_service.get_roster(staff_code)),
                "today": asdict(container.attendance_service.day_stats(staff_code, today)),
                "recent": [asdict(s) for s in container.attendance_service.recent_summaries(staff_code)],
            }
        )
