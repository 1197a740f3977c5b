from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class Attendee:
    """A member or staff member together with the window attendance may be recorded in.

    ``window_start`` is the membership start (members) or the joining date
    (staff). ``None`` means the window is open-ended on both sides.
    """

    entity_id: int
    name: str
    window_start: Optional[date]
    window_end: Optional[date] = None
