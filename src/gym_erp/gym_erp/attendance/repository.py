from __future__ import annotations

from datetime import date, time
from decimal import Decimal
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import MemberDailyRecord, StaffDailyRecord


class DailyAttendanceRepository(Protocol):
    """Member daily status records (``daily_attendance``)."""

    def list_for_date(self, *, work_date: date, member_ids: Sequence[int]) -> Sequence[MemberDailyRecord]:
        raise NotImplementedError

    def upsert(self, *, member_id: int, work_date: date, status: AttendanceStatus, notes: Optional[str]) -> int:
        """Insert or update the (member, date) record atomically. Returns attendance_id."""

        raise NotImplementedError

    def insert_absent_batch(self, *, work_date: date, member_ids: Sequence[int], notes: str) -> int:
        """Insert absent rows in one statement, leaving existing rows untouched.

        Returns the number of rows actually inserted.
        """

        raise NotImplementedError


class StaffAttendanceRepository(Protocol):
    """Staff shift records (``staff_attendance``)."""

    def list_for_date(self, *, work_date: date, staff_ids: Sequence[int]) -> Sequence[StaffDailyRecord]:
        raise NotImplementedError

    def get_for_staff_and_date(self, staff_id: int, work_date: date) -> Optional[StaffDailyRecord]:
        raise NotImplementedError

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
        raise NotImplementedError

    def insert_absent_batch(self, *, work_date: date, staff_ids: Sequence[int], notes: str) -> int:
        raise NotImplementedError

    def create_check_in(self, *, staff_id: int, work_date: date, in_time: time) -> int:
        """Plain insert; a second record for the same day raises ConflictError."""

        raise NotImplementedError

    def update_check_out(self, *, attendance_id: int, out_time: time, hours_worked: Decimal) -> bool:
        raise NotImplementedError

    def list_range(self, *, start: date, end: date, staff_ids: Optional[Sequence[int]] = None) -> Sequence[StaffDailyRecord]:
        raise NotImplementedError
