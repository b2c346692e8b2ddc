"""Utility functions for cloudtrace."""

from cloudtrace.utils.helpers import (
    MAX_SPAN_ID,
    MAX_TRACE_ID,
    format_trace_id,
    format_span_id,
    is_valid_trace_id,
    is_valid_span_id,
)

__all__ = [
    "MAX_SPAN_ID",
    "MAX_TRACE_ID",
    "format_trace_id",
    "format_span_id",
    "is_valid_trace_id",
    "is_valid_span_id",
]
