"""Timestamp helpers for parse results and exports."""

import time
from datetime import datetime
from typing import Optional

from dateutil.parser import parse as dateutil_parse


def now_iso() -> str:
    """Current local time as an ISO 8601 string."""
    return datetime.now().isoformat()


def epoch_millis() -> int:
    """Milliseconds since the epoch, used for template ids."""
    return int(time.time() * 1000)


def parse_timestamp(value) -> Optional[datetime]:
    """Parse a timestamp carried in an imported export.

    Handles formats like:
    - "2024-03-01T12:30:00.000Z"
    - "2024-03-01 12:30"
    - "March 1, 2024"

    Args:
        value: Timestamp string (anything else is ignored)

    Returns:
        Parsed datetime or None if parsing fails
    """
    if not value or not isinstance(value, str):
        return None

    try:
        return dateutil_parse(value.strip())
    except (ValueError, OverflowError):
        return None
