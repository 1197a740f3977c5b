from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from ..core.enums import MembershipStatus


@dataclass(frozen=True)
class MembershipWindow:
    """A sold membership: the date range it covers and what it costs.

    ``status`` is set by staff; it is not derived from the dates.
    """

    membership_id: int
    member_id: int
    start_date: date
    end_date: date
    status: MembershipStatus
    price: Decimal
    type: str = "normal"
    member_name: Optional[str] = None
    member_phone: Optional[str] = None
