from __future__ import annotations

from datetime import date, time
from decimal import Decimal
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, in_clause, normalize_mysql_time
from .model import MemberDailyRecord, StaffDailyRecord
from .repository import DailyAttendanceRepository, StaffAttendanceRepository


def _member_record(r: dict) -> MemberDailyRecord:
    return MemberDailyRecord(
        attendance_id=int(r["attendance_id"]),
        member_id=int(r["member_id"]),
        work_date=r["date"],
        status=AttendanceStatus(r["status"]),
        notes=r.get("notes"),
    )


def _staff_record(r: dict) -> StaffDailyRecord:
    hours = r.get("hours_worked")
    return StaffDailyRecord(
        attendance_id=int(r["attendance_id"]),
        staff_id=int(r["staff_id"]),
        work_date=r["date"],
        status=AttendanceStatus(r["status"]),
        in_time=normalize_mysql_time(r.get("in_time")),
        out_time=normalize_mysql_time(r.get("out_time")),
        hours_worked=Decimal(str(hours)) if hours is not None else None,
        notes=r.get("notes"),
    )


_STAFF_COLUMNS = "attendance_id, staff_id, date, status, in_time, out_time, hours_worked, notes"


class MySQLDailyAttendanceRepository(DailyAttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_date(self, *, work_date: date, member_ids: Sequence[int]) -> Sequence[MemberDailyRecord]:
        if not member_ids:
            return []
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT attendance_id, member_id, date, status, notes
                FROM daily_attendance
                WHERE date=%s AND member_id IN ({in_clause(member_ids)})
                """,
                (work_date, *[int(m) for m in member_ids]),
            )
            return [_member_record(r) for r in fetchall(cur)]

    def upsert(self, *, member_id: int, work_date: date, status: AttendanceStatus, notes: Optional[str]) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO daily_attendance(member_id, date, status, notes)
                VALUES(%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE status=VALUES(status), notes=VALUES(notes)
                """,
                (int(member_id), work_date, status.value, notes),
            )

            # If it was an update, lastrowid can be 0; fetch attendance_id.
            if cur.lastrowid:
                return int(cur.lastrowid)

            cur.execute(
                "SELECT attendance_id FROM daily_attendance WHERE member_id=%s AND date=%s",
                (int(member_id), work_date),
            )
            r = fetchone(cur)
            return int(r["attendance_id"]) if r else 0

    def insert_absent_batch(self, *, work_date: date, member_ids: Sequence[int], notes: str) -> int:
        if not member_ids:
            return 0
        with db_cursor(self._conn_factory) as (_, cur):
            # No-op update on duplicates: a concurrent manual mark wins.
            cur.executemany(
                """
                INSERT INTO daily_attendance(member_id, date, status, notes)
                VALUES(%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE attendance_id=attendance_id
                """,
                [(int(m), work_date, AttendanceStatus.ABSENT.value, notes) for m in member_ids],
            )
            return max(int(cur.rowcount), 0)


class MySQLStaffAttendanceRepository(StaffAttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_date(self, *, work_date: date, staff_ids: Sequence[int]) -> Sequence[StaffDailyRecord]:
        if not staff_ids:
            return []
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_STAFF_COLUMNS}
                FROM staff_attendance
                WHERE date=%s AND staff_id IN ({in_clause(staff_ids)})
                """,
                (work_date, *[int(s) for s in staff_ids]),
            )
            return [_staff_record(r) for r in fetchall(cur)]

    def get_for_staff_and_date(self, staff_id: int, work_date: date) -> Optional[StaffDailyRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_STAFF_COLUMNS} FROM staff_attendance WHERE staff_id=%s AND date=%s",
                (int(staff_id), work_date),
            )
            r = fetchone(cur)
            return _staff_record(r) if r else None

    def upsert(
        self,
        *,
        staff_id: int,
        work_date: date,
        status: AttendanceStatus,
        in_time: Optional[time],
        out_time: Optional[time],
        hours_worked: Optional[Decimal],
        notes: Optional[str],
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO staff_attendance(staff_id, date, status, in_time, out_time, hours_worked, notes)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    status=VALUES(status), in_time=VALUES(in_time), out_time=VALUES(out_time),
                    hours_worked=VALUES(hours_worked), notes=VALUES(notes)
                """,
                (int(staff_id), work_date, status.value, in_time, out_time, hours_worked, notes),
            )
            if cur.lastrowid:
                return int(cur.lastrowid)

            cur.execute(
                "SELECT attendance_id FROM staff_attendance WHERE staff_id=%s AND date=%s",
                (int(staff_id), work_date),
            )
            r = fetchone(cur)
            return int(r["attendance_id"]) if r else 0

    def insert_absent_batch(self, *, work_date: date, staff_ids: Sequence[int], notes: str) -> int:
        if not staff_ids:
            return 0
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                """
                INSERT INTO staff_attendance(staff_id, date, status, in_time, out_time, hours_worked, notes)
                VALUES(%s,%s,%s,NULL,NULL,0,%s)
                ON DUPLICATE KEY UPDATE attendance_id=attendance_id
                """,
                [(int(s), work_date, AttendanceStatus.ABSENT.value, notes) for s in staff_ids],
            )
            return max(int(cur.rowcount), 0)

    def create_check_in(self, *, staff_id: int, work_date: date, in_time: time) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO staff_attendance(staff_id, date, status, in_time)
                VALUES(%s,%s,%s,%s)
                """,
                (int(staff_id), work_date, AttendanceStatus.PRESENT.value, in_time),
            )
            return int(cur.lastrowid)

    def update_check_out(self, *, attendance_id: int, out_time: time, hours_worked: Decimal) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE staff_attendance
                SET out_time=%s, hours_worked=%s
                WHERE attendance_id=%s AND out_time IS NULL
                """,
                (out_time, hours_worked, int(attendance_id)),
            )
            return cur.rowcount > 0

    def list_range(self, *, start: date, end: date, staff_ids: Optional[Sequence[int]] = None) -> Sequence[StaffDailyRecord]:
        clauses = ["date BETWEEN %s AND %s"]
        params: list[object] = [start, end]
        if staff_ids:
            clauses.append(f"staff_id IN ({in_clause(staff_ids)})")
            params.extend(int(s) for s in staff_ids)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_STAFF_COLUMNS}
                FROM staff_attendance
                WHERE {where}
                ORDER BY date DESC, staff_id ASC
                """,
                tuple(params),
            )
            return [_staff_record(r) for r in fetchall(cur)]
