from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Protocol, Sequence

from ..core.enums import PaymentMethod
from .model import PaymentRecord


class PaymentRepository(Protocol):
    def list_for_memberships(self, membership_ids: Sequence[int]) -> Sequence[PaymentRecord]:
        raise NotImplementedError

    def create(
        self,
        *,
        member_id: int,
        membership_id: Optional[int],
        amount: Decimal,
        payment_method: PaymentMethod,
        payment_date: date,
        invoice_number: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> int:
        raise NotImplementedError
