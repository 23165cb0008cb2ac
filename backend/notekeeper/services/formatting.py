"""
NoteKeeper Backend — Display Formatting
=========================================

What:  Relative-age labels shown on note cards ("Edited 3h ago").
Who:   Registered as the `format_date` global of the Jinja2 environment.

Rules (elapsed time truncated to whole hours, then whole days):
    < 1 hour        "Just now"          (also for timestamps in the future)
    1 to 23 hours   "Edited Nh ago"
    1 day           "Edited yesterday"
    2 to 6 days     "Edited N days ago"
    7+ days         M/D/YYYY
"""

from datetime import datetime, timezone
from typing import Optional

SECONDS_PER_HOUR = 60 * 60


def format_relative_age(timestamp: datetime, now: Optional[datetime] = None) -> str:
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    now = now or datetime.now(timezone.utc)

    hours = int((now - timestamp).total_seconds() // SECONDS_PER_HOUR)
    if hours < 1:
        return "Just now"
    if hours < 24:
        return f"Edited {hours}h ago"

    days = hours // 24
    if days == 1:
        return "Edited yesterday"
    if days < 7:
        return f"Edited {days} days ago"
    return f"{timestamp.month}/{timestamp.day}/{timestamp.year}"
