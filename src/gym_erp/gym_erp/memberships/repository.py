from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Protocol, Sequence

from ..core.enums import MembershipStatus
from .model import MembershipWindow


class MembershipRepository(Protocol):
    def get_by_id(self, membership_id: int) -> Optional[MembershipWindow]:
        raise NotImplementedError

    def list_by_status(self, statuses: Iterable[MembershipStatus]) -> Sequence[MembershipWindow]:
        raise NotImplementedError

    def list_ending_between(self, *, start: date, end: date, status: MembershipStatus) -> Sequence[MembershipWindow]:
        """Memberships whose end_date falls in [start, end], ordered by end_date."""

        raise NotImplementedError
