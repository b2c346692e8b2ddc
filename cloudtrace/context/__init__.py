"""Context utilities for Cloud Trace propagation."""

from cloudtrace.context.context import (
    get_span_context,
    is_deferred_parent,
    with_empty_span_context,
    with_remote_span_context,
)
from cloudtrace.context.header import (
    CLOUD_TRACE_HEADER,
    decode_cloud_trace_context,
    format_cloud_trace_context,
    parse_cloud_trace_context,
    parse_cloud_trace_header,
)
from cloudtrace.context.propagators import (
    FIELDS,
    CloudTraceFormatPropagator,
    extract_cloud_trace_context,
    inject_cloud_trace_context,
)

__all__ = [
    "get_span_context",
    "is_deferred_parent",
    "with_remote_span_context",
    "with_empty_span_context",
    "CLOUD_TRACE_HEADER",
    "FIELDS",
    "parse_cloud_trace_context",
    "parse_cloud_trace_header",
    "decode_cloud_trace_context",
    "format_cloud_trace_context",
    "CloudTraceFormatPropagator",
    "inject_cloud_trace_context",
    "extract_cloud_trace_context",
]
