from __future__ import annotations

from datetime import timedelta

from flask import Flask, jsonify, request

from ..common.datetime_utils import today_local
from ..common.request_args import date_value, int_value
from ..common.serialization import to_jsonable
from ..container import Container


def _range_args():
    end = date_value(request.args.get("end"), "end", default=today_local())
    start = date_value(request.args.get("start"), "start", default=end - timedelta(days=29))
    return start, end


def register(app: Flask, container: Container) -> None:
    @app.route("/api/reports/member-visits", methods=["GET"], endpoint="report_member_visits")
    def report_member_visits():
        start, end = _range_args()
        rows = container.report_service.member_visits(
            start=start,
            end=end,
            member_id=int_value(request.args.get("member_id"), "member_id"),
        )
        return jsonify({"success": True, "data": {"start": start.isoformat(), "end": end.isoformat(), "rows": to_jsonable(rows)}})

    @app.route("/api/reports/staff-hours", methods=["GET"], endpoint="report_staff_hours")
    def report_staff_hours():
        start, end = _range_args()
        rows = container.report_service.staff_hours(
            start=start,
            end=end,
            staff_id=int_value(request.args.get("staff_id"), "staff_id"),
        )
        return jsonify({"success": True, "data": {"start": start.isoformat(), "end": end.isoformat(), "rows": to_jsonable(rows)}})
