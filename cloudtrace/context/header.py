"""Codec for the ``x-cloud-trace-context`` header.

Grammar::

    <32-lowercase-hex trace id>/<decimal span id>[;o=<0|1>]

``parse_*`` functions raise a :class:`~cloudtrace.errors.HeaderDecodeError`
subclass naming the failing field. ``decode_cloud_trace_context`` folds all of
them into ``None``.
"""

from __future__ import annotations

import re
from typing import Optional, Tuple

from opentelemetry.trace import SpanContext

from cloudtrace.errors import (
    HeaderDecodeError,
    InvalidSpanIdError,
    InvalidTraceIdError,
    MissingSeparatorError,
)
from cloudtrace.tracer.span_context import SamplingDecision, remote_span_context
from cloudtrace.utils.helpers import (
    format_span_id,
    format_trace_id,
    is_valid_span_id,
    is_valid_trace_id,
)

CLOUD_TRACE_HEADER = "x-cloud-trace-context"

_TRACE_ID_RE = re.compile(r"[0-9a-f]{32}")
_SPAN_ID_RE = re.compile(r"[0-9]+")


def split_header(header_value: str) -> Tuple[str, str, Optional[str]]:
    """Split a stripped header into (trace id, span id, suffix or None)."""
    trace_field, sep, rest = header_value.partition("/")
    if not sep:
        raise MissingSeparatorError("missing '/' separator", {"header": header_value})
    span_field, sep, suffix = rest.partition(";")
    return trace_field, span_field, (suffix if sep else None)


def parse_trace_id(field: str) -> int:
    if not _TRACE_ID_RE.fullmatch(field):
        raise InvalidTraceIdError("trace id must be 32 lowercase hex characters", {"field": field})
    trace_id = int(field, 16)
    if not is_valid_trace_id(trace_id):
        raise InvalidTraceIdError("trace id must not be zero", {"field": field})
    return trace_id


def parse_span_id(field: str) -> int:
    if not _SPAN_ID_RE.fullmatch(field):
        raise InvalidSpanIdError("span id must be an unsigned decimal integer", {"field": field})
    span_id = int(field)
    if not is_valid_span_id(span_id):
        raise InvalidSpanIdError("span id does not fit in 64 bits", {"field": field})
    return span_id


def parse_cloud_trace_header(header_value: Optional[str]) -> Tuple[SpanContext, SamplingDecision]:
    """
    Parse an ``x-cloud-trace-context`` value into a remote SpanContext and its decision.

    The decision is returned separately because a DEFERRED parent is not
    representable in TraceFlags; its span context carries the sampled bit clear.

    Raises:
        MissingSeparatorError: no '/' in the value
        InvalidTraceIdError: trace id has the wrong shape or is zero
        InvalidSpanIdError: span id is not numeric or out of range
    """
    value = (header_value or "").strip()
    trace_field, span_field, suffix = split_header(value)
    trace_id = parse_trace_id(trace_field)
    span_id = parse_span_id(span_field)
    decision = SamplingDecision.from_suffix(suffix)
    return remote_span_context(trace_id, span_id, decision), decision


def parse_cloud_trace_context(header_value: Optional[str]) -> SpanContext:
    """Parse an ``x-cloud-trace-context`` value into a remote SpanContext."""
    span_context, _ = parse_cloud_trace_header(header_value)
    return span_context


def decode_cloud_trace_context(header_value: Optional[str]) -> Optional[SpanContext]:
    """Decode a header value, returning None for any malformed input."""
    try:
        return parse_cloud_trace_context(header_value)
    except HeaderDecodeError:
        return None


def format_cloud_trace_context(span_context: SpanContext,
                               decision: Optional[SamplingDecision] = None) -> str:
    """
    Format a SpanContext as an ``x-cloud-trace-context`` value.

    The caller is responsible for checking ``span_context.is_valid`` first.
    Without an explicit decision the sampled trace flag picks ``o=1``/``o=0``.
    A DEFERRED decision produces ``trace_id/span_id`` with no ';' at all.
    """
    value = f"{format_trace_id(span_context.trace_id)}/{format_span_id(span_context.span_id)}"
    if decision is None:
        decision = SamplingDecision.from_trace_flags(span_context.trace_flags)
    if decision is SamplingDecision.DEFERRED:
        return value
    return f"{value};{decision.value}"
