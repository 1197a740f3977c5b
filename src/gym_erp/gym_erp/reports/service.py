from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from ..attendance.repository import StaffAttendanceRepository
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..people.repository import PeopleRepository
from ..sessions.duration import duration_minutes, minutes_to_hours
from ..sessions.repository import MemberSessionRepository

_TWO_PLACES = Decimal("0.01")


@dataclass(frozen=True)
class MemberVisitSummary:
    member_id: int
    name: str
    total_visits: int
    completed_visits: int
    total_hours: Decimal
    average_session_minutes: int


@dataclass(frozen=True)
class StaffHoursSummary:
    staff_id: int
    name: str
    total_days: int
    present_days: int
    total_hours: Decimal
    average_hours: Decimal


class AttendanceReportService:
    """Aggregates for the attendance report screen (member visits, staff hours)."""

    def __init__(
        self,
        sessions: MemberSessionRepository,
        staff_attendance: StaffAttendanceRepository,
        people: PeopleRepository,
    ):
        self._sessions = sessions
        self._staff_attendance = staff_attendance
        self._people = people

    @staticmethod
    def _check_range(start: date, end: date) -> None:
        if end < start:
            raise ValidationError("End date must not be before start date")

    def member_visits(self, *, start: date, end: date, member_id: Optional[int] = None) -> list[MemberVisitSummary]:
        self._check_range(start, end)
        sessions = self._sessions.list_range(
            start=datetime.combine(start, time.min),
            end=datetime.combine(end, time.max),
            member_id=member_id,
        )

        summary_map: dict[int, dict] = {}
        for s in sessions:
            acc = summary_map.get(s.member_id)
            if not acc:
                acc = {"name": s.member_name or "", "visits": 0, "completed": 0, "minutes": 0}
                summary_map[s.member_id] = acc
            acc["visits"] += 1
            minutes = duration_minutes(s)
            # Open sessions count as visits but add no time.
            if minutes is not None:
                acc["completed"] += 1
                acc["minutes"] += minutes

        out = []
        for mid, acc in summary_map.items():
            completed = acc["completed"]
            out.append(
                MemberVisitSummary(
                    member_id=mid,
                    name=acc["name"],
                    total_visits=acc["visits"],
                    completed_visits=completed,
                    total_hours=minutes_to_hours(acc["minutes"]),
                    average_session_minutes=round(acc["minutes"] / completed) if completed else 0,
                )
            )

        out.sort(key=lambda x: (-x.total_visits, x.name.lower()))
        return out

    def staff_hours(self, *, start: date, end: date, staff_id: Optional[int] = None) -> list[StaffHoursSummary]:
        self._check_range(start, end)
        staff = [s for s in self._people.list_staff_attendees() if staff_id is None or s.entity_id == int(staff_id)]
        if not staff:
            return []

        records = self._staff_attendance.list_range(start=start, end=end, staff_ids=[s.entity_id for s in staff])
        total_days = (end - start).days + 1

        out = []
        for s in staff:
            own = [r for r in records if r.staff_id == s.entity_id]
            present = sum(1 for r in own if r.status == AttendanceStatus.PRESENT)
            hours = sum((Decimal(r.hours_worked) for r in own if r.hours_worked is not None), Decimal("0"))
            average = (hours / present).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP) if present else Decimal("0.00")
            out.append(
                StaffHoursSummary(
                    staff_id=s.entity_id,
                    name=s.name,
                    total_days=total_days,
                    present_days=present,
                    total_hours=hours.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP),
                    average_hours=average,
                )
            )
        return out
