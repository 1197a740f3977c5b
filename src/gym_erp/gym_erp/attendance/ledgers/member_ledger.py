from __future__ import annotations

from datetime import date, time
from typing import Mapping, Optional, Sequence

from ...core.constants import AUTO_ABSENT_NOTE, MEMBER_MARK_NOTE
from ...core.enums import AttendanceStatus, Population
from ...people.model import Attendee
from ...people.repository import PeopleRepository
from ..model import MemberDailyRecord
from ..repository import DailyAttendanceRepository
from ..window import BEFORE_MEMBERSHIP_REASON
from .base import DailyLedger


class MemberLedger(DailyLedger):
    """Members: explicit status per day, no hours."""

    population = Population.MEMBERS
    label = "member"
    plural_label = "member(s)"
    pre_window_reason = BEFORE_MEMBERSHIP_REASON

    def __init__(self, people: PeopleRepository, records: DailyAttendanceRepository):
        self._people = people
        self._records = records

    def list_attendees(self) -> Sequence[Attendee]:
        return self._people.list_member_attendees()

    def get_attendee(self, entity_id: int) -> Optional[Attendee]:
        return self._people.get_member_attendee(entity_id)

    def records_for(self, work_date: date, entity_ids: Sequence[int]) -> Mapping[int, MemberDailyRecord]:
        rows = self._records.list_for_date(work_date=work_date, member_ids=entity_ids)
        return {r.member_id: r for r in rows}

    def write_mark(
        self,
        attendee: Attendee,
        work_date: date,
        status: AttendanceStatus,
        *,
        in_time: Optional[time] = None,
    ) -> int:
        return self._records.upsert(
            member_id=attendee.entity_id,
            work_date=work_date,
            status=status,
            notes=MEMBER_MARK_NOTE.format(status=status.value),
        )

    def write_absent_batch(self, work_date: date, entity_ids: Sequence[int]) -> int:
        return self._records.insert_absent_batch(work_date=work_date, member_ids=entity_ids, notes=AUTO_ABSENT_NOTE)
