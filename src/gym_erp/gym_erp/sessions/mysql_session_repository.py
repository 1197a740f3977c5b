from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import MemberSession
from .repository import MemberSessionRepository


def _from_row(r: dict) -> MemberSession:
    return MemberSession(
        session_id=int(r["session_id"]),
        member_id=int(r["member_id"]),
        check_in_time=r["check_in_time"],
        check_out_time=r.get("check_out_time"),
        notes=r.get("notes"),
        member_name=r.get("member_name"),
    )


class MySQLMemberSessionRepository(MemberSessionRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_open_for_member(self, member_id: int) -> Optional[MemberSession]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT session_id, member_id, check_in_time, check_out_time, notes
                FROM member_attendance
                WHERE member_id=%s AND check_out_time IS NULL
                ORDER BY check_in_time DESC
                LIMIT 1
                """,
                (int(member_id),),
            )
            r = fetchone(cur)
            return _from_row(r) if r else None

    def create(self, *, member_id: int, check_in_time: datetime, notes: Optional[str] = None) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO member_attendance(member_id, check_in_time, notes) VALUES(%s,%s,%s)",
                (int(member_id), check_in_time, notes),
            )
            return int(cur.lastrowid)

    def close(self, *, session_id: int, check_out_time: datetime) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE member_attendance
                SET check_out_time=%s
                WHERE session_id=%s AND check_out_time IS NULL
                """,
                (check_out_time, int(session_id)),
            )
            return cur.rowcount > 0

    def list_recent_for_member(self, member_id: int, limit: int) -> Sequence[MemberSession]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT session_id, member_id, check_in_time, check_out_time, notes
                FROM member_attendance
                WHERE member_id=%s
                ORDER BY check_in_time DESC
                LIMIT %s
                """,
                (int(member_id), int(limit)),
            )
            return [_from_row(r) for r in fetchall(cur)]

    def list_range(
        self,
        *,
        start: datetime,
        end: datetime,
        member_id: Optional[int] = None,
    ) -> Sequence[MemberSession]:
        clauses = ["ma.check_in_time BETWEEN %s AND %s", "m.is_active = 1"]
        params: list[object] = [start, end]
        if member_id is not None:
            clauses.append("ma.member_id=%s")
            params.append(int(member_id))

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT ma.session_id, ma.member_id, ma.check_in_time, ma.check_out_time, ma.notes,
                       m.name AS member_name
                FROM member_attendance ma
                JOIN members m ON m.member_id = ma.member_id
                WHERE {where}
                ORDER BY ma.check_in_time DESC
                """,
                tuple(params),
            )
            return [_from_row(r) for r in fetchall(cur)]
