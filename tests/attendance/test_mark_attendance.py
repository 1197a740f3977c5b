from __future__ import annotations

from datetime import date, time
from decimal import Decimal

import pytest

from gym_erp.core.enums import AttendanceStatus, Population
from gym_erp.core.exceptions import NotFoundError, ValidationError

TODAY = date(2025, 2, 1)


def test_mark_member_present_then_absent_keeps_one_record(container, daily_repo):
    svc = container.attendance_service

    first = svc.mark_attendance(Population.MEMBERS, 1, date(2025, 1, 20), "present", today=TODAY)
    assert first.message == "Marked Asha as present"

    svc.mark_attendance(Population.MEMBERS, 1, date(2025, 1, 20), AttendanceStatus.ABSENT, today=TODAY)

    assert len(daily_repo.rows) == 1
    rec = daily_repo.rows[(1, date(2025, 1, 20))]
    assert rec.status == AttendanceStatus.ABSENT
    assert rec.notes == "Marked absent by staff"


def test_mark_rejects_future_date(container, daily_repo):
    with pytest.raises(ValidationError, match="future"):
        container.attendance_service.mark_attendance(Population.MEMBERS, 1, date(2025, 2, 2), "present", today=TODAY)
    assert daily_repo.rows == {}


def test_mark_rejects_date_before_membership_start(container):
    with pytest.raises(ValidationError, match="membership start"):
        container.attendance_service.mark_attendance(Population.MEMBERS, 2, date(2025, 1, 19), "present", today=TODAY)


def test_mark_unknown_member_and_bad_status(container):
    with pytest.raises(NotFoundError, match="Member not found"):
        container.attendance_service.mark_attendance(Population.MEMBERS, 99, TODAY, "present", today=TODAY)

    with pytest.raises(ValidationError, match="status"):
        container.attendance_service.mark_attendance(Population.MEMBERS, 1, TODAY, "late", today=TODAY)


def test_staff_cannot_be_marked_before_joining_date(container, staff_repo):
    svc = container.attendance_service

    with pytest.raises(ValidationError, match="joining date"):
        svc.mark_attendance(Population.STAFF, 10, date(2025, 1, 10), "present", today=TODAY)
    assert staff_repo.rows == {}

    svc.mark_attendance(Population.STAFF, 10, date(2025, 1, 15), "present", today=TODAY)
    assert staff_repo.get_for_staff_and_date(10, date(2025, 1, 15)) is not None


def test_staff_present_uses_default_in_time(container, staff_repo):
    container.attendance_service.mark_attendance(Population.STAFF, 11, TODAY, "present", today=TODAY)

    rec = staff_repo.get_for_staff_and_date(11, TODAY)
    assert rec.status == AttendanceStatus.PRESENT
    assert rec.in_time == time(9, 0)
    assert rec.out_time is None
    assert rec.hours_worked is None
    assert rec.notes is None


def test_staff_present_with_explicit_in_time(container, staff_repo):
    container.attendance_service.mark_attendance(Population.STAFF, 11, TODAY, "present", today=TODAY, in_time=time(7, 30))
    assert staff_repo.get_for_staff_and_date(11, TODAY).in_time == time(7, 30)


def test_staff_absent_clears_times_and_zeroes_hours(container, staff_repo):
    staff_repo.create_check_in(staff_id=11, work_date=TODAY, in_time=time(8, 0))

    container.attendance_service.mark_attendance(Population.STAFF, 11, TODAY, "absent", today=TODAY)

    rec = staff_repo.get_for_staff_and_date(11, TODAY)
    assert rec.status == AttendanceStatus.ABSENT
    assert rec.in_time is None
    assert rec.out_time is None
    assert rec.hours_worked == Decimal("0")
    assert rec.notes == "Marked absent by admin"
    assert len(staff_repo.rows) == 1
