from __future__ import annotations

from enum import Enum


class Population(str, Enum):
    """Who a daily attendance sheet is about."""

    MEMBERS = "members"
    STAFF = "staff"


class AttendanceStatus(str, Enum):
    """Status stored on a daily attendance record."""

    PRESENT = "present"
    ABSENT = "absent"


class AttendanceState(str, Enum):
    """Reconciled status of an entity for a given date."""

    NOT_APPLICABLE = "not_applicable"
    NOT_MARKED = "not_marked"
    PRESENT = "present"
    ABSENT = "absent"


class MembershipStatus(str, Enum):
    ACTIVE = "active"
    EXPIRED = "expired"
    FROZEN = "frozen"
    HOLD = "hold"
    CANCELLED = "cancelled"


class PaymentMethod(str, Enum):
    CASH = "cash"
    CARD = "card"
    UPI = "upi"
    BANK_TRANSFER = "bank_transfer"
    OTHER = "other"


class AutoMarkOutcome(str, Enum):
    MARKED = "marked"
    NO_UNMARKED = "no_unmarked"
    NO_ELIGIBLE = "no_eligible"


class Urgency(str, Enum):
    CRITICAL = "critical"
    WARNING = "warning"
    INFO = "info"


# Memberships that still accrue dues; cancelled/expired ones are written off.
DUES_TRACKED_STATUSES = frozenset({MembershipStatus.ACTIVE, MembershipStatus.FROZEN, MembershipStatus.HOLD})
