"""Span context value types for the Cloud Trace format."""

from cloudtrace.tracer.span_context import SamplingDecision, remote_span_context

__all__ = [
    "SamplingDecision",
    "remote_span_context",
]
