from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ..core.enums import PaymentMethod
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, in_clause
from .model import PaymentRecord
from .repository import PaymentRepository

_COLUMNS = "payment_id, member_id, membership_id, amount, payment_date, payment_method, invoice_number, notes"


def _from_row(r: dict) -> PaymentRecord:
    membership_id = r.get("membership_id")
    return PaymentRecord(
        payment_id=int(r["payment_id"]),
        member_id=int(r["member_id"]),
        membership_id=int(membership_id) if membership_id is not None else None,
        amount=Decimal(str(r["amount"])),
        payment_date=r["payment_date"],
        payment_method=PaymentMethod(r.get("payment_method") or PaymentMethod.OTHER.value),
        invoice_number=r.get("invoice_number"),
        notes=r.get("notes"),
    )


class MySQLPaymentRepository(PaymentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_memberships(self, membership_ids: Sequence[int]) -> Sequence[PaymentRecord]:
        if not membership_ids:
            return []
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM payments WHERE membership_id IN ({in_clause(membership_ids)})",
                tuple(int(m) for m in membership_ids),
            )
            return [_from_row(r) for r in fetchall(cur)]

    def create(
        self,
        *,
        member_id: int,
        membership_id: Optional[int],
        amount: Decimal,
        payment_method: PaymentMethod,
        payment_date: date,
        invoice_number: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO payments(member_id, membership_id, amount, payment_method, payment_date, invoice_number, notes)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    int(member_id),
                    int(membership_id) if membership_id is not None else None,
                    amount,
                    payment_method.value,
                    payment_date,
                    invoice_number,
                    notes,
                ),
            )
            return int(cur.lastrowid)
