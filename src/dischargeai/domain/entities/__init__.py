"""
Domain entities for Discharge-AI.
"""

from .discharge_summary import DischargeSummary

__all__ = ["DischargeSummary"]
