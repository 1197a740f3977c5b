from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Iterable, Optional, Sequence

from ..core.enums import MembershipStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, in_clause
from .model import MembershipWindow
from .repository import MembershipRepository

_SELECT = """
    SELECT ms.membership_id, ms.member_id, ms.start_date, ms.end_date, ms.status, ms.price, ms.type,
           m.name AS member_name, m.phone AS member_phone
    FROM memberships ms
    JOIN members m ON m.member_id = ms.member_id
"""


def _from_row(r: dict) -> MembershipWindow:
    return MembershipWindow(
        membership_id=int(r["membership_id"]),
        member_id=int(r["member_id"]),
        start_date=r["start_date"],
        end_date=r["end_date"],
        status=MembershipStatus(r["status"]),
        price=Decimal(str(r["price"])),
        type=r.get("type") or "normal",
        member_name=r.get("member_name"),
        member_phone=r.get("member_phone"),
    )


class MySQLMembershipRepository(MembershipRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, membership_id: int) -> Optional[MembershipWindow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE ms.membership_id=%s", (int(membership_id),))
            r = fetchone(cur)
            return _from_row(r) if r else None

    def list_by_status(self, statuses: Iterable[MembershipStatus]) -> Sequence[MembershipWindow]:
        values = [MembershipStatus(s).value for s in statuses]
        if not values:
            return []
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT + f" WHERE ms.status IN ({in_clause(values)}) ORDER BY ms.membership_id ASC",
                tuple(values),
            )
            return [_from_row(r) for r in fetchall(cur)]

    def list_ending_between(self, *, start: date, end: date, status: MembershipStatus) -> Sequence[MembershipWindow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT + " WHERE ms.status=%s AND ms.end_date BETWEEN %s AND %s ORDER BY ms.end_date ASC",
                (status.value, start, end),
            )
            return [_from_row(r) for r in fetchall(cur)]
