from __future__ import annotations

from datetime import date

from gym_erp.core.enums import AttendanceState, AttendanceStatus, AutoMarkOutcome, Population

TODAY = date(2025, 2, 1)


def test_auto_mark_only_touches_unmarked_in_window(container, daily_repo):
    target = date(2025, 1, 10)
    daily_repo.upsert(member_id=3, work_date=target, status=AttendanceStatus.PRESENT, notes=None)

    result = container.attendance_service.auto_mark_absent(Population.MEMBERS, target, today=TODAY)

    assert result.outcome == AutoMarkOutcome.MARKED
    assert result.marked == 1
    assert result.message == "Marked 1 member(s) as absent"
    assert daily_repo.rows[(1, target)].notes == "Marked absent - automatic system update"
    assert daily_repo.rows[(3, target)].status == AttendanceStatus.PRESENT
    # Member 2 joined later and stays not applicable.
    assert (2, target) not in daily_repo.rows


def test_auto_mark_is_idempotent(container, daily_repo):
    target = date(2025, 1, 25)
    svc = container.attendance_service

    first = svc.auto_mark_absent(Population.MEMBERS, target, today=TODAY)
    snapshot = dict(daily_repo.rows)
    second = svc.auto_mark_absent(Population.MEMBERS, target, today=TODAY)

    assert first.marked == 3
    assert second.outcome == AutoMarkOutcome.NO_UNMARKED
    assert second.marked == 0
    assert second.message == "No unmarked attendance to update"
    assert daily_repo.rows == snapshot


def test_auto_mark_future_date_has_no_eligible(container, daily_repo):
    target = date(2025, 2, 5)

    result = container.attendance_service.auto_mark_absent(Population.MEMBERS, target, today=TODAY)

    assert result.outcome == AutoMarkOutcome.NO_ELIGIBLE
    assert result.marked == 0
    assert {r.entity_id for r in result.rejected} == {1, 2, 3}
    assert all("future" in r.reason for r in result.rejected)
    assert daily_repo.rows == {}


def test_auto_mark_staff_writes_zero_hours(container, staff_repo):
    result = container.attendance_service.auto_mark_absent(Population.STAFF, date(2025, 1, 20), today=TODAY)

    assert result.outcome == AutoMarkOutcome.MARKED
    assert result.message == "Marked 2 staff member(s) as absent"
    for staff_id in (10, 11):
        rec = staff_repo.get_for_staff_and_date(staff_id, date(2025, 1, 20))
        assert rec.status == AttendanceStatus.ABSENT
        assert rec.in_time is None


def test_auto_mark_then_sheet_has_no_unmarked(container):
    svc = container.attendance_service
    target = date(2025, 1, 12)

    svc.auto_mark_absent(Population.MEMBERS, target, today=TODAY)
    sheet = svc.daily_sheet(Population.MEMBERS, target)

    assert sheet.counts[AttendanceState.NOT_MARKED.value] == 0
    assert sheet.counts[AttendanceState.ABSENT.value] == 2
