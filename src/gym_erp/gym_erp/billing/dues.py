"""Outstanding dues per membership."""

from __future__ import annotations

from collections import defaultdict
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional

from ..common.datetime_utils import today_local
from ..core.enums import DUES_TRACKED_STATUSES
from ..memberships.model import MembershipWindow
from .model import OutstandingDue, PaymentRecord


def paid_totals(payments: Iterable[PaymentRecord]) -> dict[int, Decimal]:
    """Sum payments per membership; unlinked payments are skipped."""
    totals: dict[int, Decimal] = defaultdict(lambda: Decimal("0"))
    for p in payments:
        if p.membership_id is not None:
            totals[p.membership_id] += Decimal(p.amount)
    return dict(totals)


def compute_outstanding(
    memberships: Iterable[MembershipWindow],
    payments: Iterable[PaymentRecord],
    *,
    today: Optional[date] = None,
) -> list[OutstandingDue]:
    """Memberships that still owe money, most urgent (or most overdue) first.

    A due is reported regardless of how far away the end date is. Ties keep
    the input order.
    """
    today = today or today_local()
    totals = paid_totals(payments)

    out: list[OutstandingDue] = []
    for m in memberships:
        if m.status not in DUES_TRACKED_STATUSES:
            continue
        paid = totals.get(m.membership_id, Decimal("0"))
        due = Decimal(m.price) - paid
        if due <= 0:
            continue
        days = (m.end_date - today).days
        out.append(
            OutstandingDue(
                membership=m,
                paid_total=paid,
                due=due,
                days_until_due=days,
                is_overdue=days < 0,
            )
        )

    out.sort(key=lambda d: d.days_until_due)
    return out
