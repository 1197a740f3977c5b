from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, time
from decimal import Decimal
from typing import Optional

from ..core.enums import AttendanceState, AttendanceStatus, AutoMarkOutcome, Population


@dataclass(frozen=True)
class MemberDailyRecord:
    """Domain entity: one member's attendance status for a calendar day."""

    attendance_id: int
    member_id: int
    work_date: date
    status: AttendanceStatus
    notes: Optional[str] = None


@dataclass(frozen=True)
class StaffDailyRecord:
    """Domain entity: one staff member's shift for a calendar day.

    Unlike member records it carries shift times and worked hours.
    """

    attendance_id: int
    staff_id: int
    work_date: date
    status: AttendanceStatus
    in_time: Optional[time] = None
    out_time: Optional[time] = None
    hours_worked: Optional[Decimal] = None
    notes: Optional[str] = None


@dataclass(frozen=True)
class SheetRow:
    entity_id: int
    name: str
    window_start: Optional[date]
    window_end: Optional[date]
    state: AttendanceState
    attendance_id: Optional[int] = None
    notes: Optional[str] = None


@dataclass(frozen=True)
class DailySheet:
    """Read-model for the manage-attendance screen."""

    population: Population
    work_date: date
    rows: list[SheetRow]
    counts: dict[str, int]


@dataclass(frozen=True)
class MarkResult:
    entity_id: int
    work_date: date
    status: AttendanceStatus
    message: str


@dataclass(frozen=True)
class Rejection:
    entity_id: int
    name: str
    reason: str


@dataclass(frozen=True)
class AutoMarkResult:
    population: Population
    work_date: date
    outcome: AutoMarkOutcome
    marked: int
    message: str
    rejected: list[Rejection] = field(default_factory=list)
