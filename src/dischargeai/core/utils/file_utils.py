"""
File utility functions for Discharge-AI application.
"""

import re

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]")


def safe_filename_part(value: str, fallback: str = "unknown") -> str:
    """Make a value safe to embed in a Content-Disposition filename."""
    cleaned = _UNSAFE_FILENAME_CHARS.sub("_", (value or "").strip())
    return cleaned or fallback


def build_export_filename(ip_number: str, extension: str) -> str:
    """Export filename embedding the admission (IP) number."""
    return f"discharge_{safe_filename_part(ip_number)}.{extension.lstrip('.')}"
