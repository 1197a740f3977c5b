from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal
from typing import Optional

from gym_erp.billing.dues import compute_outstanding, paid_totals
from gym_erp.billing.model import PaymentRecord
from gym_erp.billing.service import DuesService
from gym_erp.core.enums import MembershipStatus, PaymentMethod
from gym_erp.memberships.model import MembershipWindow

TODAY = date(2025, 3, 1)


def _membership(membership_id: int, *, end_date: date, price: str = "6000",
                status: MembershipStatus = MembershipStatus.ACTIVE) -> MembershipWindow:
    return MembershipWindow(
        membership_id=membership_id,
        member_id=membership_id,
        start_date=date(2025, 1, 1),
        end_date=end_date,
        status=status,
        price=Decimal(price),
    )


def _payment(payment_id: int, membership_id: Optional[int], amount: str) -> PaymentRecord:
    return PaymentRecord(
        payment_id=payment_id,
        member_id=1,
        membership_id=membership_id,
        amount=Decimal(amount),
        payment_date=date(2025, 1, 1),
        payment_method=PaymentMethod.CASH,
    )


def test_partial_payments_leave_due():
    m = _membership(1, end_date=TODAY + timedelta(days=10))
    payments = [_payment(1, 1, "2000"), _payment(2, 1, "1500")]

    dues = compute_outstanding([m], payments, today=TODAY)

    assert len(dues) == 1
    assert dues[0].due == Decimal("2500")
    assert dues[0].paid_total == Decimal("3500")
    assert dues[0].days_until_due == 10
    assert dues[0].is_overdue is False


def test_fully_paid_and_written_off_memberships_are_excluded():
    memberships = [
        _membership(1, end_date=TODAY, price="1000"),
        _membership(2, end_date=TODAY, status=MembershipStatus.CANCELLED),
        _membership(3, end_date=TODAY, status=MembershipStatus.EXPIRED),
        _membership(4, end_date=TODAY, status=MembershipStatus.FROZEN, price="500"),
    ]
    payments = [_payment(1, 1, "1000"), _payment(2, 1, "200")]

    dues = compute_outstanding(memberships, payments, today=TODAY)

    assert [d.membership.membership_id for d in dues] == [4]
    assert all(d.due > 0 for d in dues)


def test_unlinked_payments_do_not_reduce_dues():
    assert paid_totals([_payment(1, None, "900"), _payment(2, 7, "100")]) == {7: Decimal("100")}


def test_overdue_first_and_ties_keep_input_order():
    memberships = [
        _membership(1, end_date=TODAY + timedelta(days=5)),
        _membership(2, end_date=TODAY - timedelta(days=3)),
        _membership(3, end_date=TODAY + timedelta(days=5)),
        _membership(4, end_date=TODAY + timedelta(days=1)),
    ]

    dues = compute_outstanding(memberships, [], today=TODAY)

    assert [d.membership.membership_id for d in dues] == [2, 4, 1, 3]
    assert dues[0].is_overdue is True
    assert dues[0].days_until_due == -3


def test_dues_summary_totals(memberships_repo, payments_repo):
    memberships_repo.memberships = [
        _membership(1, end_date=TODAY - timedelta(days=1), price="1000"),
        _membership(2, end_date=TODAY + timedelta(days=30), price="2500"),
    ]
    payments_repo.payments = [_payment(1, 2, "500")]

    summary = DuesService(memberships_repo, payments_repo).summary(today=TODAY)

    assert summary.total_outstanding == Decimal("3000")
    assert summary.overdue_count == 1
    assert len(summary.dues) == 2
