from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Optional

import structlog

from ..attendance.model import StaffDailyRecord
from ..attendance.repository import StaffAttendanceRepository
from ..attendance.window import BEFORE_JOINING_REASON, ensure_markable
from ..common.datetime_utils import now_local
from ..core.constants import DEFAULT_HISTORY_LIMIT
from ..core.enums import AttendanceStatus
from ..core.exceptions import ConflictError, NotFoundError
from ..people.repository import PeopleRepository
from .duration import duration_minutes, shift_hours
from .model import MemberSession
from .repository import MemberSessionRepository

logger = structlog.get_logger(__name__)


def _to_minute(now: datetime) -> datetime:
    return now.replace(second=0, microsecond=0)


class SessionService:
    """Check-in/check-out for member visits and staff shifts."""

    def __init__(
        self,
        sessions: MemberSessionRepository,
        staff_attendance: StaffAttendanceRepository,
        people: PeopleRepository,
    ):
        self._sessions = sessions
        self._staff_attendance = staff_attendance
        self._people = people

    # --- members -----------------------------------------------------------

    def active_session(self, member_id: int) -> Optional[MemberSession]:
        return self._sessions.get_open_for_member(int(member_id))

    def check_in(self, member_id: int, *, now: datetime | None = None) -> MemberSession:
        now = now or now_local()

        if self.active_session(member_id):
            raise ConflictError("Member is already checked in")

        session_id = self._sessions.create(member_id=int(member_id), check_in_time=now)
        logger.info("session.checked_in", member_id=int(member_id), session_id=session_id)
        return MemberSession(session_id=session_id, member_id=int(member_id), check_in_time=now)

    def check_out(self, member_id: int, *, now: datetime | None = None) -> MemberSession:
        now = now or now_local()

        session = self.active_session(member_id)
        if not session:
            raise NotFoundError("Member has no open session to check out")

        closed = replace(session, check_out_time=now)
        minutes = duration_minutes(closed)

        if not self._sessions.close(session_id=session.session_id, check_out_time=now):
            raise NotFoundError("Session was already checked out")

        logger.info("session.checked_out", member_id=int(member_id), session_id=session.session_id, minutes=minutes)
        return closed

    def duration(self, session: MemberSession) -> Optional[int]:
        return duration_minutes(session)

    def recent_sessions(self, member_id: int, *, limit: int = DEFAULT_HISTORY_LIMIT):
        return self._sessions.list_recent_for_member(int(member_id), int(limit))

    # --- staff -------------------------------------------------------------

    def check_in_staff(self, staff_id: int, *, now: datetime | None = None) -> StaffDailyRecord:
        now = _to_minute(now or now_local())
        today = now.date()

        staff = self._people.get_staff_attendee(int(staff_id))
        if not staff:
            raise NotFoundError("Staff member not found")

        ensure_markable(staff.window_start, today, today=today, pre_window_reason=BEFORE_JOINING_REASON)

        if self._staff_attendance.get_for_staff_and_date(staff.entity_id, today):
            raise ConflictError("Attendance is already recorded for today")

        attendance_id = self._staff_attendance.create_check_in(staff_id=staff.entity_id, work_date=today, in_time=now.time())
        logger.info("shift.checked_in", staff_id=staff.entity_id, attendance_id=attendance_id)

        return StaffDailyRecord(
            attendance_id=attendance_id,
            staff_id=staff.entity_id,
            work_date=today,
            status=AttendanceStatus.PRESENT,
            in_time=now.time(),
        )

    def check_out_staff(self, staff_id: int, *, now: datetime | None = None) -> StaffDailyRecord:
        now = _to_minute(now or now_local())
        today = now.date()

        record = self._staff_attendance.get_for_staff_and_date(int(staff_id), today)
        if not record or record.in_time is None or record.out_time is not None:
            raise NotFoundError("No open shift to check out today")

        hours = shift_hours(today, record.in_time, now.time())

        if not self._staff_attendance.update_check_out(
            attendance_id=record.attendance_id,
            out_time=now.time(),
            hours_worked=hours,
        ):
            raise NotFoundError("Shift was already checked out")

        logger.info(
            "shift.checked_out",
            staff_id=int(staff_id),
            attendance_id=record.attendance_id,
            hours_worked=str(hours),
        )
        return replace(record, out_time=now.time(), hours_worked=hours)
