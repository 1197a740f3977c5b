from __future__ import annotations

from datetime import date

from gym_erp.attendance.model import MemberDailyRecord
from gym_erp.attendance.status import compute_status
from gym_erp.core.enums import AttendanceState, AttendanceStatus, Population
from gym_erp.people.model import Attendee


def test_compute_status_covers_all_states():
    a = Attendee(1, "Asha", date(2025, 1, 10))
    present = MemberDailyRecord(1, 1, date(2025, 1, 12), AttendanceStatus.PRESENT)
    absent = MemberDailyRecord(2, 1, date(2025, 1, 12), AttendanceStatus.ABSENT)

    assert compute_status(a, date(2025, 1, 9), None) == AttendanceState.NOT_APPLICABLE
    assert compute_status(a, date(2025, 1, 12), None) == AttendanceState.NOT_MARKED
    assert compute_status(a, date(2025, 1, 12), present) == AttendanceState.PRESENT
    assert compute_status(a, date(2025, 1, 12), absent) == AttendanceState.ABSENT


def test_record_before_window_is_not_applicable():
    a = Attendee(1, "Asha", date(2025, 1, 10))
    stray = MemberDailyRecord(1, 1, date(2025, 1, 5), AttendanceStatus.PRESENT)
    assert compute_status(a, date(2025, 1, 5), stray) == AttendanceState.NOT_APPLICABLE


def test_daily_sheet_sorts_by_name_and_counts_states(container, daily_repo):
    target = date(2025, 1, 10)
    daily_repo.upsert(member_id=3, work_date=target, status=AttendanceStatus.PRESENT, notes=None)

    sheet = container.attendance_service.daily_sheet(Population.MEMBERS, target)

    assert [r.name for r in sheet.rows] == ["Asha", "bharat", "Chitra"]
    states = {r.entity_id: r.state for r in sheet.rows}
    assert states == {
        1: AttendanceState.NOT_MARKED,
        2: AttendanceState.NOT_APPLICABLE,
        3: AttendanceState.PRESENT,
    }
    assert sheet.counts == {"not_applicable": 1, "not_marked": 1, "present": 1, "absent": 0}


def test_daily_sheet_accepts_population_as_string(container):
    sheet = container.attendance_service.daily_sheet("staff", date(2025, 1, 10))
    assert sheet.population == Population.STAFF
    assert {r.entity_id: r.state for r in sheet.rows} == {
        10: AttendanceState.NOT_APPLICABLE,
        11: AttendanceState.NOT_MARKED,
    }
