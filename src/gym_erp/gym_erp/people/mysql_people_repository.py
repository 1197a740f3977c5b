from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Attendee
from .repository import PeopleRepository

# The earliest active membership defines the member's window.
_MEMBER_ATTENDEE_SQL = """
    SELECT m.member_id, m.name,
           MIN(ms.start_date) AS window_start,
           MAX(ms.end_date) AS window_end
    FROM members m
    JOIN memberships ms ON ms.member_id = m.member_id AND ms.status = 'active'
    WHERE m.is_active = 1 {extra}
    GROUP BY m.member_id, m.name
    ORDER BY m.name ASC
"""

_STAFF_ATTENDEE_SQL = """
    SELECT staff_id, name, joining_date
    FROM staff
    WHERE is_active = 1 {extra}
    ORDER BY name ASC
"""


def _member_from_row(r: dict) -> Attendee:
    return Attendee(
        entity_id=int(r["member_id"]),
        name=r["name"],
        window_start=r["window_start"],
        window_end=r.get("window_end"),
    )


def _staff_from_row(r: dict) -> Attendee:
    return Attendee(entity_id=int(r["staff_id"]), name=r["name"], window_start=r.get("joining_date"))


class MySQLPeopleRepository(PeopleRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_member_attendees(self) -> Sequence[Attendee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_MEMBER_ATTENDEE_SQL.format(extra=""))
            return [_member_from_row(r) for r in fetchall(cur)]

    def get_member_attendee(self, member_id: int) -> Optional[Attendee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_MEMBER_ATTENDEE_SQL.format(extra="AND m.member_id=%s"), (int(member_id),))
            r = fetchone(cur)
            return _member_from_row(r) if r else None

    def list_staff_attendees(self) -> Sequence[Attendee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_STAFF_ATTENDEE_SQL.format(extra=""))
            return [_staff_from_row(r) for r in fetchall(cur)]

    def get_staff_attendee(self, staff_id: int) -> Optional[Attendee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_STAFF_ATTENDEE_SQL.format(extra="AND staff_id=%s"), (int(staff_id),))
            r = fetchone(cur)
            return _staff_from_row(r) if r else None
