from __future__ import annotations

from datetime import date, time
from decimal import Decimal
from typing import Mapping, Optional, Sequence

from ...core.constants import AUTO_ABSENT_NOTE, DEFAULT_STAFF_IN_TIME, STAFF_ABSENT_NOTE
from ...core.enums import AttendanceStatus, Population
from ...people.model import Attendee
from ...people.repository import PeopleRepository
from ..model import StaffDailyRecord
from ..repository import StaffAttendanceRepository
from ..window import BEFORE_JOINING_REASON
from .base import DailyLedger


class StaffLedger(DailyLedger):
    """Staff: shift-shaped rows (in/out time, hours worked)."""

    population = Population.STAFF
    label = "staff member"
    plural_label = "staff member(s)"
    pre_window_reason = BEFORE_JOINING_REASON

    def __init__(
        self,
        people: PeopleRepository,
        records: StaffAttendanceRepository,
        *,
        default_in_time: time = DEFAULT_STAFF_IN_TIME,
    ):
        self._people = people
        self._records = records
        self._default_in_time = default_in_time

    def list_attendees(self) -> Sequence[Attendee]:
        return self._people.list_staff_attendees()

    def get_attendee(self, entity_id: int) -> Optional[Attendee]:
        return self._people.get_staff_attendee(entity_id)

    def records_for(self, work_date: date, entity_ids: Sequence[int]) -> Mapping[int, StaffDailyRecord]:
        rows = self._records.list_for_date(work_date=work_date, staff_ids=entity_ids)
        return {r.staff_id: r for r in rows}

    def write_mark(
        self,
        attendee: Attendee,
        work_date: date,
        status: AttendanceStatus,
        *,
        in_time: Optional[time] = None,
    ) -> int:
        if status == AttendanceStatus.PRESENT:
            return self._records.upsert(
                staff_id=attendee.entity_id,
                work_date=work_date,
                status=status,
                in_time=in_time or self._default_in_time,
                out_time=None,
                hours_worked=None,
                notes=None,
            )

        return self._records.upsert(
            staff_id=attendee.entity_id,
            work_date=work_date,
            status=status,
            in_time=None,
            out_time=None,
            hours_worked=Decimal("0"),
            notes=STAFF_ABSENT_NOTE,
        )

    def write_absent_batch(self, work_date: date, entity_ids: Sequence[int]) -> int:
        return self._records.insert_absent_batch(work_date=work_date, staff_ids=entity_ids, notes=AUTO_ABSENT_NOTE)
