from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.request_args import int_value
from ..common.serialization import to_jsonable
from ..container import Container
from ..core.constants import DEFAULT_HISTORY_LIMIT
from .duration import format_duration


def register(app: Flask, container: Container) -> None:
    service = container.session_service

    @app.route("/api/members/<int:member_id>/check-in", methods=["POST"], endpoint="member_check_in")
    def member_check_in(member_id: int):
        session = service.check_in(member_id)
        return jsonify({"success": True, "message": "Checked in", "data": to_jsonable(session)}), 201

    @app.route("/api/members/<int:member_id>/check-out", methods=["POST"], endpoint="member_check_out")
    def member_check_out(member_id: int):
        session = service.check_out(member_id)
        minutes = service.duration(session)
        return jsonify(
            {
                "success": True,
                "message": f"Checked out after {format_duration(minutes)}",
                "data": {**to_jsonable(session), "duration_minutes": minutes},
            }
        )

    @app.route("/api/members/<int:member_id>/session", methods=["GET"], endpoint="member_session")
    def member_session(member_id: int):
        limit = int_value(request.args.get("limit"), "limit") or DEFAULT_HISTORY_LIMIT
        active = service.active_session(member_id)
        history = [
            {**to_jsonable(s), "duration_minutes": service.duration(s)}
            for s in service.recent_sessions(member_id, limit=limit)
        ]
        return jsonify({"success": True, "data": {"active": to_jsonable(active), "history": history}})

    @app.route("/api/staff/<int:staff_id>/check-in", methods=["POST"], endpoint="staff_check_in")
    def staff_check_in(staff_id: int):
        record = service.check_in_staff(staff_id)
        return jsonify({"success": True, "message": "Shift started", "data": to_jsonable(record)}), 201

    @app.route("/api/staff/<int:staff_id>/check-out", methods=["POST"], endpoint="staff_check_out")
    def staff_check_out(staff_id: int):
        record = service.check_out_staff(staff_id)
        return jsonify(
            {
                "success": True,
                "message": f"Shift ended, {record.hours_worked} hours worked",
                "data": to_jsonable(record),
            }
        )
