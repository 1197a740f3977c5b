from __future__ import annotations

from datetime import date, datetime, time
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from ..common.datetime_utils import minutes_between
from ..core.exceptions import DataIntegrityError
from .model import MemberSession

_HOURS_QUANT = Decimal("0.01")


def elapsed_minutes(start: datetime, end: datetime) -> int:
    """Whole minutes from start to end; a negative span is a data error, never clamped."""
    minutes = minutes_between(start, end)
    if minutes < 0:
        raise DataIntegrityError(
            f"Check-out time {end.isoformat()} is before check-in time {start.isoformat()}"
        )
    return minutes


def duration_minutes(session: MemberSession) -> Optional[int]:
    """Length of a closed session in whole minutes; None while it is still open."""
    if session.check_out_time is None:
        return None
    return elapsed_minutes(session.check_in_time, session.check_out_time)


def shift_hours(work_date: date, in_time: time, out_time: time) -> Decimal:
    """Hours between two same-day clock times, rounded to 2 decimals."""
    minutes = elapsed_minutes(datetime.combine(work_date, in_time), datetime.combine(work_date, out_time))
    return minutes_to_hours(minutes)


def minutes_to_hours(minutes: int) -> Decimal:
    return (Decimal(minutes) / Decimal(60)).quantize(_HOURS_QUANT, rounding=ROUND_HALF_UP)


def format_duration(minutes: Optional[int]) -> str:
    if minutes is None:
        return "-"
    hours, mins = divmod(int(minutes), 60)
    if hours:
        return f"{hours}h {mins}m"
    return f"{mins}m"
