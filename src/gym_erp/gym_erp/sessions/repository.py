from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import MemberSession


class MemberSessionRepository(Protocol):
    def get_open_for_member(self, member_id: int) -> Optional[MemberSession]:
        raise NotImplementedError

    def create(self, *, member_id: int, check_in_time: datetime, notes: Optional[str] = None) -> int:
        """Open a session; a second open session for the member raises ConflictError."""

        raise NotImplementedError

    def close(self, *, session_id: int, check_out_time: datetime) -> bool:
        """Set check_out_time on a still-open session. False if it was already closed."""

        raise NotImplementedError

    def list_recent_for_member(self, member_id: int, limit: int) -> Sequence[MemberSession]:
        raise NotImplementedError

    def list_range(
        self,
        *,
        start: datetime,
        end: datetime,
        member_id: Optional[int] = None,
    ) -> Sequence[MemberSession]:
        """Sessions whose check-in falls in [start, end], newest first, with member names."""

        raise NotImplementedError
