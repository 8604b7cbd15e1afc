from __future__ import annotations

from datetime import date

from flask import Flask, jsonify

from ..common.datetime_utils import now_local
from ..common.http import json_endpoint, read_json_body
from ..common.validators import optional_iso_datetime, require_int_range
from ..container import Container

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def register(app: Flask, container: Container) -> None:
    def _today(body: dict) -> date:
        now = optional_iso_datetime(body.get("now"), "now") or now_local()
        return now.date()

    def _attachment(payload: bytes, *, filename: str, mimetype: str):
        return app.response_class(
            payload,
            mimetype=mimetype,
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/reports/week", methods=["POST"], endpoint="api_report_week")
    @json_endpoint
    def api_report_week():
        body = read_json_body()
        offset = require_int_range(body.get("week_offset", 0), "week_offset", minimum=-520, maximum=520)

        summary = container.report_service.week_summary(body.get("entries"), today=_today(body), week_offset=offset)
        return jsonify({"success": True, "data": summary.to_dict()})

    @app.route("/api/reports/month", methods=["POST"], endpoint="api_report_month")
    @json_endpoint
    def api_report_month():
        body = read_json_body()
        offset = require_int_range(body.get("month_offset", 0), "month_offset", minimum=-120, maximum=120)

        summary = container.report_service.month_summary(body.get("entries"), today=_today(body), month_offset=offset)
        return jsonify({"success": True, "data": summary.to_dict()})

    @app.route("/api/reports/export.csv", methods=["POST"], endpoint="api_export_csv")
    @json_endpoint
    def api_export_csv():
        body = read_json_body()
        text = container.report_service.export_csv(body.get("entries"))
        filename = container.report_service.export_filename(_today(body), "csv")
        return _attachment(text.encode("utf-8-sig"), filename=filename, mimetype="text/csv")

    @app.route("/api/reports/export.xlsx", methods=["POST"], endpoint="api_export_xlsx")
    @json_endpoint
    def api_export_xlsx():
        body = read_json_body()
        content = container.report_service.export_xlsx(body.get("entries"))
        filename = container.report_service.export_filename(_today(body), "xlsx")
        return _attachment(content, filename=filename, mimetype=XLSX_MIMETYPE)
