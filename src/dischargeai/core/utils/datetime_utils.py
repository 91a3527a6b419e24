"""
Date and time utility functions for Discharge-AI application.
"""

import re
from datetime import date, datetime, timezone
from typing import Optional

# Calendar dates only: no week or ordinal forms
_ISO_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def get_current_timestamp() -> datetime:
    """Get current UTC timestamp."""
    return datetime.now(timezone.utc)


def ensure_utc(timestamp: datetime) -> datetime:
    """Attach UTC to naive timestamps (MongoDB returns naive UTC datetimes)."""
    if timestamp.tzinfo is None:
        return timestamp.replace(tzinfo=timezone.utc)
    return timestamp


def is_valid_iso_date(date_str: str) -> bool:
    """Check if string is a calendar date in ISO form (YYYY-MM-DD)."""
    return parse_iso_date(date_str) is not None


def parse_iso_date(date_str: str) -> Optional[date]:
    """Parse a YYYY-MM-DD string, returning None when it is not a valid date."""
    if not isinstance(date_str, str) or not _ISO_DATE_RE.fullmatch(date_str):
        return None
    try:
        return datetime.strptime(date_str, "%Y-%m-%d").date()
    except ValueError:
        return None


def format_display_date(date_str: Optional[str]) -> str:
    """Render an ISO date as DD-MM-YYYY for documents; unknown values pass through."""
    if not date_str:
        return ""
    parsed = parse_iso_date(date_str)
    if parsed is None:
        return date_str
    return parsed.strftime("%d-%m-%Y")
