from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.request_args import date_value, int_value, json_body, query_date
from ..common.serialization import to_jsonable
from ..container import Container
from ..core.enums import PaymentMethod


def register(app: Flask, container: Container) -> None:
    @app.route("/api/billing/dues", methods=["GET"], endpoint="billing_dues")
    def billing_dues():
        summary = container.dues_service.summary(today=query_date("today"))
        return jsonify({"success": True, "data": to_jsonable(summary)})

    @app.route("/api/billing/reminders", methods=["GET"], endpoint="billing_reminders")
    def billing_reminders():
        reminders = container.dues_service.expiring_memberships(
            today=query_date("today"),
            within_days=int_value(request.args.get("days"), "days"),
        )
        return jsonify({"success": True, "data": to_jsonable(reminders)})

    @app.route("/api/members/<int:member_id>/payments", methods=["POST"], endpoint="member_payment")
    def member_payment(member_id: int):
        body = json_body()
        payment_date = body.get("payment_date")
        payment_id = container.payment_service.record_payment(
            member_id=member_id,
            amount=body.get("amount"),
            payment_method=body.get("payment_method") or PaymentMethod.CASH,
            payment_date=date_value(payment_date, "payment_date") if payment_date else None,
            membership_id=int_value(body.get("membership_id"), "membership_id"),
            invoice_number=body.get("invoice_number"),
            notes=body.get("notes"),
        )
        return jsonify({"success": True, "message": "Payment recorded", "data": {"payment_id": payment_id}}), 201
