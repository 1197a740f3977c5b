from __future__ import annotations

from datetime import date
from typing import Optional, Union

from ..core.enums import AttendanceState
from ..people.model import Attendee
from .model import MemberDailyRecord, StaffDailyRecord
from .window import is_within_window

DailyRecord = Union[MemberDailyRecord, StaffDailyRecord]


def compute_status(attendee: Attendee, target_date: date, record: Optional[DailyRecord]) -> AttendanceState:
    if not is_within_window(attendee.window_start, target_date):
        return AttendanceState.NOT_APPLICABLE
    if record is None:
        return AttendanceState.NOT_MARKED
    return AttendanceState(record.status.value)
