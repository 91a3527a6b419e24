"""
Observability module for tracing.

Provides custom tracing spans for completion calls and document exports.
Logging lives in ``dischargeai.core.structured_logger``.
"""

from .tracing import (
    add_span_attribute,
    set_span_status,
    trace_operation,
)

__all__ = [
    "trace_operation",
    "set_span_status",
    "add_span_attribute",
]
