from __future__ import annotations

import io

from flask import Flask, jsonify, request, send_file

from ..common.web import current_staff_code, error_response, json_body, login_required
from ..container import Container
from ..core.exceptions import NotFoundError, ValidationError


def register(app: Flask, container: Container) -> None:
    def _student_rows(students):
        return [{"id": s.id, "regNo": s.reg_no, "name": s.name} for s in students]

    @app.route("/api/roster", methods=["GET"], endpoint="roster")
    @login_required
    def roster():
        students = container.roster_service.search(current_staff_code(), request.args.get("q", ""))
        return jsonify({"success": True, "students": _student_rows(students)})

    @app.route("/api/roster/import", methods=["POST"], endpoint="roster_import")
    @login_required
    def roster_import():
        if request.is_json:
            csv_data = json_body().get("csv")
        else:
            csv_data = request.get_data(as_text=True)
        try:
            result = container.roster_service.import_csv(current_staff_code(), csv_data)
        except ValidationError as e:
            return error_response(str(e))

        if not result.success:
            return error_response(", ".join(result.errors), errors=result.errors)
        return jsonify(
            {
                "success": True,
                "message": f"Imported {len(result.students)} students successfully!",
                "students": _student_rows(result.students),
            }
        )

    @app.route("/api/roster/export.csv", methods=["GET"], endpoint="roster_export")
    @login_required
    def roster_export():
        staff_code = current_staff_code()
        try:
            content = container.roster_service.export_csv(staff_code)
        except ValidationError as e:
            return error_response(str(e))

        filename = container.roster_service.export_filename(staff_code)
        return send_file(
            io.BytesIO(content.encode("utf-8")), mimetype="text/csv", as_attachment=True, download_name=filename
        )

    @app.route("/api/roster/<reg_no>", methods=["DELETE"], endpoint="remove_student")
    @login_required
    def remove_student(reg_no: str):
        try:
            container.roster_service.remove_student(current_staff_code(), reg_no)
        except NotFoundError as e:
            return error_response(str(e), 404)
        return jsonify({"success": True, "message": "Student removed successfully!"})

    @app.route("/api/roster", methods=["DELETE"], endpoint="clear_roster")
    @login_required
    def clear_roster():
        container.roster_service.clear(current_staff_code())
        return jsonify({"success": True, "message": "Roster cleared successfully!"})
