"""
Utility functions for Discharge-AI application.
"""

from .datetime_utils import (
    ensure_utc,
    format_display_date,
    get_current_timestamp,
    is_valid_iso_date,
    parse_iso_date,
)
from .file_utils import build_export_filename, safe_filename_part

__all__ = [
    # Date/time utilities
    "get_current_timestamp",
    "ensure_utc",
    "is_valid_iso_date",
    "parse_iso_date",
    "format_display_date",
    # File utilities
    "safe_filename_part",
    "build_export_filename",
]
