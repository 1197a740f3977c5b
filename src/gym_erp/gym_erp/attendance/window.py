"""Membership/employment window rules for attendance marking."""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Union

from ..common.datetime_utils import as_date, today_local
from ..core.exceptions import ValidationError

DateLike = Union[date, datetime]

FUTURE_DATE_REASON = "Cannot mark attendance for future dates"
BEFORE_MEMBERSHIP_REASON = "Cannot mark attendance before membership start date"
BEFORE_JOINING_REASON = "Cannot mark attendance before joining date"


def is_within_window(window_start: Optional[DateLike], target_date: DateLike) -> bool:
    """False only when ``target_date`` falls before the start of the window's first day."""
    if window_start is None:
        return True
    return as_date(target_date) >= as_date(window_start)


def is_future(target_date: DateLike, *, today: Optional[date] = None) -> bool:
    today = today or today_local()
    return as_date(target_date) > today


def is_eligible_for_attendance(
    window_start: Optional[DateLike],
    target_date: DateLike,
    *,
    today: Optional[date] = None,
) -> bool:
    return is_within_window(window_start, target_date) and not is_future(target_date, today=today)


def check_markable(
    window_start: Optional[DateLike],
    target_date: DateLike,
    *,
    today: Optional[date] = None,
    pre_window_reason: str = BEFORE_MEMBERSHIP_REASON,
) -> Optional[str]:
    """Return why attendance cannot be marked for ``target_date``, or None if it can."""
    if is_future(target_date, today=today):
        return FUTURE_DATE_REASON
    if not is_within_window(window_start, target_date):
        return pre_window_reason
    return None


def ensure_markable(
    window_start: Optional[DateLike],
    target_date: DateLike,
    *,
    today: Optional[date] = None,
    pre_window_reason: str = BEFORE_MEMBERSHIP_REASON,
) -> None:
    reason = check_markable(window_start, target_date, today=today, pre_window_reason=pre_window_reason)
    if reason:
        raise ValidationError(reason)
