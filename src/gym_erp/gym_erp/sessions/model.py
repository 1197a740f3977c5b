from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class MemberSession:
    """A member's visit: open until ``check_out_time`` is recorded."""

    session_id: int
    member_id: int
    check_in_time: datetime
    check_out_time: Optional[datetime] = None
    notes: Optional[str] = None
    member_name: Optional[str] = None

    @property
    def is_open(self) -> bool:
        return self.check_out_time is None
