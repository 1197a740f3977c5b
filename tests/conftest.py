from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime, time
from decimal import Decimal
from typing import Iterable, Optional, Sequence

import pytest

from gym_erp.attendance.model import MemberDailyRecord, StaffDailyRecord
from gym_erp.billing.model import PaymentRecord
from gym_erp.container import wire
from gym_erp.core.enums import AttendanceStatus, MembershipStatus
from gym_erp.core.exceptions import ConflictError
from gym_erp.memberships.model import MembershipWindow
from gym_erp.people.model import Attendee
from gym_erp.sessions.model import MemberSession


class InMemoryPeople:
    def __init__(self, members: Iterable[Attendee] = (), staff: Iterable[Attendee] = ()):
        self.members = {a.entity_id: a for a in members}
        self.staff = {a.entity_id: a for a in staff}

    def list_member_attendees(self) -> Sequence[Attendee]:
        return list(self.members.values())

    def get_member_attendee(self, member_id: int) -> Optional[Attendee]:
        return self.members.get(member_id)

    def list_staff_attendees(self) -> Sequence[Attendee]:
        return list(self.staff.values())

    def get_staff_attendee(self, staff_id: int) -> Optional[Attendee]:
        return self.staff.get(staff_id)


class InMemoryDailyAttendance:
    def __init__(self):
        self.rows: dict[tuple[int, date], MemberDailyRecord] = {}
        self._id = 0

    def list_for_date(self, *, work_date: date, member_ids: Sequence[int]):
        return [r for (mid, d), r in self.rows.items() if d == work_date and mid in member_ids]

    def upsert(self, *, member_id: int, work_date: date, status: AttendanceStatus, notes: Optional[str]) -> int:
        existing = self.rows.get((member_id, work_date))
        if existing:
            self.rows[(member_id, work_date)] = replace(existing, status=status, notes=notes)
            return existing.attendance_id
        self._id += 1
        self.rows[(member_id, work_date)] = MemberDailyRecord(self._id, member_id, work_date, status, notes)
        return self._id

    def insert_absent_batch(self, *, work_date: date, member_ids: Sequence[int], notes: str) -> int:
        inserted = 0
        for mid in member_ids:
            if (mid, work_date) in self.rows:
                continue
            self._id += 1
            self.rows[(mid, work_date)] = MemberDailyRecord(self._id, mid, work_date, AttendanceStatus.ABSENT, notes)
            inserted += 1
        return inserted


class InMemoryStaffAttendance:
    def __init__(self):
        self.rows: dict[tuple[int, date], StaffDailyRecord] = {}
        self._id = 0

    def list_for_date(self, *, work_date: date, staff_ids: Sequence[int]):
        return [r for (sid, d), r in self.rows.items() if d == work_date and sid in staff_ids]

    def get_for_staff_and_date(self, staff_id: int, work_date: date) -> Optional[StaffDailyRecord]:
        return self.rows.get((staff_id, work_date))

    def upsert(self, *, staff_id, work_date, status, in_time, out_time, hours_worked, notes) -> int:
        existing = self.rows.get((staff_id, work_date))
        attendance_id = existing.attendance_id if existing else self._next_id()
        self.rows[(staff_id, work_date)] = StaffDailyRecord(
            attendance_id=attendance_id,
            staff_id=staff_id,
            work_date=work_date,
            status=status,
            in_time=in_time,
            out_time=out_time,
            hours_worked=hours_worked,
            notes=notes,
        )
        return attendance_id

    def insert_absent_batch(self, *, work_date: date, staff_ids: Sequence[int], notes: str) -> int:
        inserted = 0
        for sid in staff_ids:
            if (sid, work_date) in self.rows:
                continue
            self.rows[(sid, work_date)] = StaffDailyRecord(
                attendance_id=self._next_id(),
                staff_id=sid,
                work_date=work_date,
                status=AttendanceStatus.ABSENT,
                hours_worked=Decimal("0"),
                notes=notes,
            )
            inserted += 1
        return inserted

    def create_check_in(self, *, staff_id: int, work_date: date, in_time: time) -> int:
        if (staff_id, work_date) in self.rows:
            raise ConflictError("Record already exists")
        attendance_id = self._next_id()
        self.rows[(staff_id, work_date)] = StaffDailyRecord(
            attendance_id=attendance_id,
            staff_id=staff_id,
            work_date=work_date,
            status=AttendanceStatus.PRESENT,
            in_time=in_time,
        )
        return attendance_id

    def update_check_out(self, *, attendance_id: int, out_time: time, hours_worked: Decimal) -> bool:
        for key, r in self.rows.items():
            if r.attendance_id == attendance_id and r.out_time is None:
                self.rows[key] = replace(r, out_time=out_time, hours_worked=hours_worked)
                return True
        return False

    def list_range(self, *, start: date, end: date, staff_ids=None):
        return [
            r
            for r in self.rows.values()
            if start <= r.work_date <= end and (staff_ids is None or r.staff_id in staff_ids)
        ]

    def _next_id(self) -> int:
        self._id += 1
        return self._id


class InMemorySessions:
    def __init__(self, names: Optional[dict[int, str]] = None):
        self.sessions: dict[int, MemberSession] = {}
        self.names = names or {}
        self._id = 0

    def get_open_for_member(self, member_id: int) -> Optional[MemberSession]:
        for s in self.sessions.values():
            if s.member_id == member_id and s.check_out_time is None:
                return s
        return None

    def create(self, *, member_id: int, check_in_time: datetime, notes=None) -> int:
        if self.get_open_for_member(member_id):
            raise ConflictError("Record already exists")
        self._id += 1
        self.sessions[self._id] = MemberSession(
            session_id=self._id,
            member_id=member_id,
            check_in_time=check_in_time,
            notes=notes,
            member_name=self.names.get(member_id),
        )
        return self._id

    def close(self, *, session_id: int, check_out_time: datetime) -> bool:
        s = self.sessions.get(session_id)
        if not s or s.check_out_time is not None:
            return False
        self.sessions[session_id] = replace(s, check_out_time=check_out_time)
        return True

    def list_recent_for_member(self, member_id: int, limit: int):
        items = [s for s in self.sessions.values() if s.member_id == member_id]
        items.sort(key=lambda s: s.check_in_time, reverse=True)
        return items[:limit]

    def list_range(self, *, start: datetime, end: datetime, member_id=None):
        items = [
            s
            for s in self.sessions.values()
            if start <= s.check_in_time <= end and (member_id is None or s.member_id == member_id)
        ]
        items.sort(key=lambda s: s.check_in_time, reverse=True)
        return items


class InMemoryMemberships:
    def __init__(self, memberships: Iterable[MembershipWindow] = ()):
        self.memberships = list(memberships)

    def get_by_id(self, membership_id: int) -> Optional[MembershipWindow]:
        return next((m for m in self.memberships if m.membership_id == membership_id), None)

    def list_by_status(self, statuses):
        wanted = set(statuses)
        return [m for m in self.memberships if m.status in wanted]

    def list_ending_between(self, *, start: date, end: date, status: MembershipStatus):
        rows = [m for m in self.memberships if m.status == status and start <= m.end_date <= end]
        return sorted(rows, key=lambda m: m.end_date)


class InMemoryPayments:
    def __init__(self, payments: Iterable[PaymentRecord] = ()):
        self.payments = list(payments)

    def list_for_memberships(self, membership_ids):
        return [p for p in self.payments if p.membership_id in membership_ids]

    def create(self, *, member_id, membership_id, amount, payment_method, payment_date, invoice_number=None, notes=None) -> int:
        payment_id = len(self.payments) + 1
        self.payments.append(
            PaymentRecord(
                payment_id=payment_id,
                member_id=member_id,
                membership_id=membership_id,
                amount=amount,
                payment_date=payment_date,
                payment_method=payment_method,
                invoice_number=invoice_number,
                notes=notes,
            )
        )
        return payment_id


@pytest.fixture
def people():
    return InMemoryPeople(
        members=[
            Attendee(1, "Asha", date(2025, 1, 1), date(2025, 12, 31)),
            Attendee(2, "bharat", date(2025, 1, 20), date(2025, 4, 19)),
            Attendee(3, "Chitra", date(2025, 1, 5), date(2025, 7, 4)),
        ],
        staff=[
            Attendee(10, "Ravi", date(2025, 1, 15)),
            Attendee(11, "Meera", None),
        ],
    )


@pytest.fixture
def daily_repo():
    return InMemoryDailyAttendance()


@pytest.fixture
def staff_repo():
    return InMemoryStaffAttendance()


@pytest.fixture
def sessions_repo():
    return InMemorySessions({1: "Asha", 2: "bharat", 3: "Chitra"})


@pytest.fixture
def memberships_repo():
    return InMemoryMemberships()


@pytest.fixture
def payments_repo():
    return InMemoryPayments()


@pytest.fixture
def container(people, daily_repo, staff_repo, sessions_repo, memberships_repo, payments_repo):
    return wire(
        conn=None,
        people_repo=people,
        memberships_repo=memberships_repo,
        payments_repo=payments_repo,
        daily_attendance_repo=daily_repo,
        staff_attendance_repo=staff_repo,
        sessions_repo=sessions_repo,
    )
