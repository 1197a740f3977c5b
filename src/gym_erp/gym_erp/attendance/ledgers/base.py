from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date, time
from typing import Mapping, Optional, Sequence, Union

from ...core.enums import AttendanceStatus, Population
from ...people.model import Attendee
from ..model import MemberDailyRecord, StaffDailyRecord

DailyRecord = Union[MemberDailyRecord, StaffDailyRecord]


class DailyLedger(ABC):
    """Strategy Pattern: how one population's daily records are read and written.

    Members and staff keep differently shaped rows; the reconciler only sees
    attendees, their records keyed by entity id, and the two write operations.
    """

    population: Population
    label: str
    plural_label: str
    pre_window_reason: str

    @abstractmethod
    def list_attendees(self) -> Sequence[Attendee]:
        raise NotImplementedError

    @abstractmethod
    def get_attendee(self, entity_id: int) -> Optional[Attendee]:
        raise NotImplementedError

    @abstractmethod
    def records_for(self, work_date: date, entity_ids: Sequence[int]) -> Mapping[int, DailyRecord]:
        raise NotImplementedError

    @abstractmethod
    def write_mark(
        self,
        attendee: Attendee,
        work_date: date,
        status: AttendanceStatus,
        *,
        in_time: Optional[time] = None,
    ) -> int:
        raise NotImplementedError

    @abstractmethod
    def write_absent_batch(self, work_date: date, entity_ids: Sequence[int]) -> int:
        raise NotImplementedError
