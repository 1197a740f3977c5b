from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from ..core.enums import PaymentMethod, Urgency
from ..memberships.model import MembershipWindow


@dataclass(frozen=True)
class PaymentRecord:
    """Immutable payment; ``membership_id`` is None for walk-in payments."""

    payment_id: int
    member_id: int
    membership_id: Optional[int]
    amount: Decimal
    payment_date: date
    payment_method: PaymentMethod
    invoice_number: Optional[str] = None
    notes: Optional[str] = None


@dataclass(frozen=True)
class OutstandingDue:
    membership: MembershipWindow
    paid_total: Decimal
    due: Decimal
    days_until_due: int
    is_overdue: bool


@dataclass(frozen=True)
class DuesSummary:
    dues: list[OutstandingDue]
    total_outstanding: Decimal
    overdue_count: int


@dataclass(frozen=True)
class ExpiringMembership:
    membership: MembershipWindow
    days_remaining: int
    urgency: Urgency
