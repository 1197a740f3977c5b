from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from typing import Optional

from .attendance.ledgers.member_ledger import MemberLedger
from .attendance.ledgers.staff_ledger import StaffLedger
from .attendance.mysql_attendance_repository import MySQLDailyAttendanceRepository, MySQLStaffAttendanceRepository
from .attendance.repository import DailyAttendanceRepository, StaffAttendanceRepository
from .attendance.service import AttendanceService
from .billing.mysql_payment_repository import MySQLPaymentRepository
from .billing.repository import PaymentRepository
from .billing.service import DuesService, PaymentService
from .core.constants import DEFAULT_REMINDER_WINDOW_DAYS, DEFAULT_STAFF_IN_TIME
from .core.enums import Population
from .database.connection import DBConfig, DatabaseConnection
from .memberships.mysql_membership_repository import MySQLMembershipRepository
from .memberships.repository import MembershipRepository
from .people.mysql_people_repository import MySQLPeopleRepository
from .people.repository import PeopleRepository
from .reports.service import AttendanceReportService
from .sessions.mysql_session_repository import MySQLMemberSessionRepository
from .sessions.repository import MemberSessionRepository
from .sessions.service import SessionService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    people_repo: PeopleRepository
    memberships_repo: MembershipRepository
    payments_repo: PaymentRepository
    daily_attendance_repo: DailyAttendanceRepository
    staff_attendance_repo: StaffAttendanceRepository
    sessions_repo: MemberSessionRepository

    attendance_service: AttendanceService
    dues_service: DuesService
    payment_service: PaymentService
    session_service: SessionService
    report_service: AttendanceReportService


def wire(
    *,
    conn: Optional[DatabaseConnection],
    people_repo: PeopleRepository,
    memberships_repo: MembershipRepository,
    payments_repo: PaymentRepository,
    daily_attendance_repo: DailyAttendanceRepository,
    staff_attendance_repo: StaffAttendanceRepository,
    sessions_repo: MemberSessionRepository,
    default_staff_in_time: time = DEFAULT_STAFF_IN_TIME,
    reminder_window_days: int = DEFAULT_REMINDER_WINDOW_DAYS,
) -> Container:
    """Build services on top of the given repositories (MySQL or in-memory)."""

    attendance_service = AttendanceService(
        {
            Population.MEMBERS: MemberLedger(people_repo, daily_attendance_repo),
            Population.STAFF: StaffLedger(people_repo, staff_attendance_repo, default_in_time=default_staff_in_time),
        }
    )
    dues_service = DuesService(memberships_repo, payments_repo, reminder_window_days=reminder_window_days)
    payment_service = PaymentService(payments_repo, memberships_repo)
    session_service = SessionService(sessions_repo, staff_attendance_repo, people_repo)
    report_service = AttendanceReportService(sessions_repo, staff_attendance_repo, people_repo)

    return Container(
        conn=conn,
        people_repo=people_repo,
        memberships_repo=memberships_repo,
        payments_repo=payments_repo,
        daily_attendance_repo=daily_attendance_repo,
        staff_attendance_repo=staff_attendance_repo,
        sessions_repo=sessions_repo,
        attendance_service=attendance_service,
        dues_service=dues_service,
        payment_service=payment_service,
        session_service=session_service,
        report_service=report_service,
    )


def build_container(
    *,
    db_config: dict,
    default_staff_in_time: time = DEFAULT_STAFF_IN_TIME,
    reminder_window_days: int = DEFAULT_REMINDER_WINDOW_DAYS,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return wire(
        conn=conn,
        people_repo=MySQLPeopleRepository(conn),
        memberships_repo=MySQLMembershipRepository(conn),
        payments_repo=MySQLPaymentRepository(conn),
        daily_attendance_repo=MySQLDailyAttendanceRepository(conn),
        staff_attendance_repo=MySQLStaffAttendanceRepository(conn),
        sessions_repo=MySQLMemberSessionRepository(conn),
        default_staff_in_time=default_staff_in_time,
        reminder_window_days=reminder_window_days,
    )
