from __future__ import annotations

from datetime import date, datetime, time
from decimal import Decimal

import pytest

from gym_erp.core.exceptions import DataIntegrityError
from gym_erp.sessions.duration import duration_minutes, elapsed_minutes, format_duration, shift_hours
from gym_erp.sessions.model import MemberSession


def test_open_session_has_no_duration():
    s = MemberSession(session_id=1, member_id=1, check_in_time=datetime(2025, 2, 1, 9, 0))
    assert duration_minutes(s) is None
    assert format_duration(None) == "-"


def test_partial_minutes_are_truncated():
    assert elapsed_minutes(datetime(2025, 2, 1, 9, 0, 0), datetime(2025, 2, 1, 9, 44, 59)) == 44


def test_negative_elapsed_raises():
    with pytest.raises(DataIntegrityError):
        elapsed_minutes(datetime(2025, 2, 1, 9, 0), datetime(2025, 2, 1, 8, 59))


def test_shift_hours_rounds_to_two_places():
    assert shift_hours(date(2025, 2, 1), time(9, 0), time(9, 20)) == Decimal("0.33")
    assert shift_hours(date(2025, 2, 1), time(9, 0), time(9, 0)) == Decimal("0.00")


@pytest.mark.parametrize("minutes,text", [(0, "0m"), (45, "45m"), (60, "1h 0m"), (125, "2h 5m")])
def test_format_duration(minutes, text):
    assert format_duration(minutes) == text
