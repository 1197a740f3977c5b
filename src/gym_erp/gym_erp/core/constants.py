"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time

DEFAULT_STAFF_IN_TIME = time(9, 0)
DEFAULT_REMINDER_WINDOW_DAYS = 14
DEFAULT_HISTORY_LIMIT = 30

MEMBER_MARK_NOTE = "Marked {status} by staff"
STAFF_ABSENT_NOTE = "Marked absent by admin"
AUTO_ABSENT_NOTE = "Marked absent - automatic system update"

URGENCY_CRITICAL_DAYS = 2
URGENCY_WARNING_DAYS = 5
