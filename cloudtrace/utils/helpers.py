"""Identifier helpers for the Cloud Trace header format."""

from __future__ import annotations

MAX_TRACE_ID = (1 << 128) - 1
MAX_SPAN_ID = (1 << 64) - 1


def format_trace_id(trace_id: int) -> str:
    """
    Format OTel trace_id (int128) to hex string.

    Args:
        trace_id: OTel trace_id as int128

    Returns:
        32-character lowercase hex string
    """
    return format(trace_id, '032x')


def format_span_id(span_id: int) -> str:
    """
    Format OTel span_id (int64) the way Cloud Trace carries it.

    Args:
        span_id: OTel span_id as int64

    Returns:
        Unsigned decimal string, no padding
    """
    return str(span_id)


def is_valid_trace_id(trace_id: int) -> bool:
    return 0 < trace_id <= MAX_TRACE_ID


def is_valid_span_id(span_id: int) -> bool:
    # Cloud Trace reserves no span id value; only the range is checked.
    return 0 <= span_id <= MAX_SPAN_ID
