from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.request_args import date_value, json_body, query_date, time_value
from ..common.serialization import to_jsonable
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/<population>", methods=["GET"], endpoint="attendance_sheet")
    def attendance_sheet(population: str):
        sheet = container.attendance_service.daily_sheet(population, query_date("date"))
        return jsonify({"success": True, "data": to_jsonable(sheet)})

    @app.route("/api/attendance/<population>/<int:entity_id>/mark", methods=["POST"], endpoint="attendance_mark")
    def attendance_mark(population: str, entity_id: int):
        body = json_body()
        result = container.attendance_service.mark_attendance(
            population,
            entity_id,
            date_value(body.get("date"), "date"),
            body.get("status") or "",
            in_time=time_value(body.get("in_time"), "in_time"),
        )
        return jsonify({"success": True, "message": result.message, "data": to_jsonable(result)})

    @app.route("/api/attendance/<population>/auto-absent", methods=["POST"], endpoint="attendance_auto_absent")
    def attendance_auto_absent(population: str):
        body = json_body()
        target = date_value(body.get("date") or request.args.get("date"), "date")
        result = container.attendance_service.auto_mark_absent(population, target)
        return jsonify({"success": True, "message": result.message, "data": to_jsonable(result)})
