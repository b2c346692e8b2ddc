"""HTTP server helpers for extracting context and creating server spans."""

from __future__ import annotations

from typing import Dict, Optional

from opentelemetry.context import Context
from opentelemetry.trace import SpanKind, Tracer
from opentelemetry.util.types import Attributes

from cloudtrace.context import CloudTraceFormatPropagator

_propagator = CloudTraceFormatPropagator()


def extract_parent_context(headers: Dict[str, str]) -> Context:
    """
    Parse x-cloud-trace-context from headers and return the parent Context.

    Header names are matched case-insensitively. A missing or malformed header
    yields a Context with no usable parent, so the server span starts a new trace.
    """
    carrier = {k.lower(): v for k, v in headers.items()}
    return _propagator.extract(carrier)


def start_server_span(tracer: Tracer, name: str, headers: Dict[str, str],
                      attributes: Optional[Attributes] = None):
    """
    Convenience helper to start a server span with extracted parent context.

    Returns the span context manager (caller should use 'with').
    """
    parent_ctx = extract_parent_context(headers)
    return tracer.start_as_current_span(
        name, context=parent_ctx, kind=SpanKind.SERVER, attributes=attributes
    )
