"""
Common response schemas.
"""

import uuid
from datetime import datetime, timezone
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Envelope used by the operational (health) endpoints."""

    success: bool = Field(True, description="Operation success status")
    message: str = Field("", description="Response message")
    timestamp: str = Field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat(),
        description="Response timestamp",
    )
    request_id: str = Field(default_factory=lambda: str(uuid.uuid4()), description="Request ID for tracking")
    data: Optional[T] = Field(None, description="Response payload")


class MessageResponse(BaseModel):
    """Error body returned by the discharge endpoints."""

    message: str = Field(..., description="Human-readable error message")


class ValidationErrorResponse(MessageResponse):
    """Error body for rejected input, naming the first failing field."""

    field: Optional[str] = Field(None, description="camelCase name of the failing field")
