from __future__ import annotations

import io

from flask import Flask, jsonify, request, send_file

from ..common.web import current_staff_code, error_response, login_required, parse_flag
from ..container import Container
from ..core.exceptions import ExportError, ValidationError
from .excel_export import XLSX_MIMETYPE
from .model import ExportOptions


def register(app: Flask, container: Container) -> None:
    @app.route("/api/report", methods=["GET"], endpoint="report")
    @login_required
    def report():
        try:
            summaries = container.report_service.build_report(
                current_staff_code(),
                start=request.args.get("start", ""),
                end=request.args.get("end", ""),
            )
        except ValidationError as e:
            return error_response(str(e))
        return jsonify({"success": True, "students": [s.to_dict() for s in summaries]})

    @app.route("/api/report.xlsx", methods=["GET"], endpoint="report_xlsx")
    @login_required
    def report_xlsx():
        options = ExportOptions(
            include_colors=parse_flag(request.args.get("colors")),
            include_summary=parse_flag(request.args.get("summary")),
        )
        try:
            filename, content = container.report_service.export_excel(
                current_staff_code(),
                start=request.args.get("start", ""),
                end=request.args.get("end", ""),
                options=options,
            )
        except ValidationError as e:
            return error_response(str(e))
        except ExportError as e:
            return error_response(str(e), 500)

        return send_file(io.BytesIO(content), mimetype=XLSX_MIMETYPE, as_attachment=True, download_name=filename)
