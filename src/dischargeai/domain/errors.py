"""
Domain-specific error types for business rule violations.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base domain error."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class InvalidDischargeDataError(DomainError):
    """A discharge summary field violates an invariant."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message, "INVALID_DISCHARGE_DATA", {"field": field})

    @property
    def field(self) -> str:
        return self.details["field"]
