from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal
from typing import Optional

import structlog

from ..common.datetime_utils import today_local
from ..common.validators import optional_text, require_choice, require_positive_amount
from ..core.constants import DEFAULT_REMINDER_WINDOW_DAYS, URGENCY_CRITICAL_DAYS, URGENCY_WARNING_DAYS
from ..core.enums import DUES_TRACKED_STATUSES, MembershipStatus, PaymentMethod, Urgency
from ..core.exceptions import NotFoundError, ValidationError
from ..memberships.repository import MembershipRepository
from .dues import compute_outstanding
from .model import DuesSummary, ExpiringMembership, OutstandingDue
from .repository import PaymentRepository

logger = structlog.get_logger(__name__)


def urgency_for(days_remaining: int) -> Urgency:
    if days_remaining <= URGENCY_CRITICAL_DAYS:
        return Urgency.CRITICAL
    if days_remaining <= URGENCY_WARNING_DAYS:
        return Urgency.WARNING
    return Urgency.INFO


class DuesService:
    def __init__(
        self,
        memberships: MembershipRepository,
        payments: PaymentRepository,
        *,
        reminder_window_days: int = DEFAULT_REMINDER_WINDOW_DAYS,
    ):
        self._memberships = memberships
        self._payments = payments
        self._reminder_window_days = int(reminder_window_days)

    def outstanding(self, *, today: Optional[date] = None) -> list[OutstandingDue]:
        memberships = list(self._memberships.list_by_status(DUES_TRACKED_STATUSES))
        if not memberships:
            return []
        payments = self._payments.list_for_memberships([m.membership_id for m in memberships])
        return compute_outstanding(memberships, payments, today=today)

    def summary(self, *, today: Optional[date] = None) -> DuesSummary:
        dues = self.outstanding(today=today)
        return DuesSummary(
            dues=dues,
            total_outstanding=sum((d.due for d in dues), Decimal("0")),
            overdue_count=sum(1 for d in dues if d.is_overdue),
        )

    def expiring_memberships(
        self,
        *,
        today: Optional[date] = None,
        within_days: Optional[int] = None,
    ) -> list[ExpiringMembership]:
        """Active memberships ending between today and ``within_days`` from now."""
        today = today or today_local()
        within_days = self._reminder_window_days if within_days is None else int(within_days)
        if within_days < 0:
            raise ValidationError("Reminder window cannot be negative")

        rows = self._memberships.list_ending_between(
            start=today,
            end=today + timedelta(days=within_days),
            status=MembershipStatus.ACTIVE,
        )
        out = []
        for m in rows:
            days = (m.end_date - today).days
            out.append(ExpiringMembership(membership=m, days_remaining=days, urgency=urgency_for(days)))
        return out


class PaymentService:
    def __init__(self, payments: PaymentRepository, memberships: MembershipRepository):
        self._payments = payments
        self._memberships = memberships

    def record_payment(
        self,
        *,
        member_id: int,
        amount: object,
        payment_method: PaymentMethod | str = PaymentMethod.CASH,
        payment_date: Optional[date] = None,
        membership_id: Optional[int] = None,
        invoice_number: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> int:
        value = require_positive_amount(amount)
        method = require_choice(payment_method, PaymentMethod, "payment_method")
        invoice_number = optional_text(invoice_number, "invoice_number")
        notes = optional_text(notes, "notes")

        if membership_id is not None:
            membership = self._memberships.get_by_id(int(membership_id))
            if not membership:
                raise NotFoundError("Membership not found")
            if membership.member_id != int(member_id):
                raise ValidationError("Membership belongs to a different member")

        payment_id = self._payments.create(
            member_id=int(member_id),
            membership_id=int(membership_id) if membership_id is not None else None,
            amount=value,
            payment_method=method,
            payment_date=payment_date or today_local(),
            invoice_number=invoice_number,
            notes=notes,
        )
        logger.info(
            "payment.recorded",
            payment_id=payment_id,
            member_id=int(member_id),
            membership_id=membership_id,
            amount=str(value),
            method=method.value,
        )
        return payment_id
