"""
API schemas package.
"""

from .common import ApiResponse, MessageResponse, ValidationErrorResponse
from .discharge import CamelModel, DischargeSummaryCreate, DischargeSummaryResponse

__all__ = [
    "ApiResponse",
    "MessageResponse",
    "ValidationErrorResponse",
    "CamelModel",
    "DischargeSummaryCreate",
    "DischargeSummaryResponse",
]
