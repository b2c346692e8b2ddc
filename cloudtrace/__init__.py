"""Google Cloud Trace (x-cloud-trace-context) propagation for OpenTelemetry."""

from cloudtrace.context import (
    CLOUD_TRACE_HEADER,
    CloudTraceFormatPropagator,
    decode_cloud_trace_context,
    extract_cloud_trace_context,
    format_cloud_trace_context,
    inject_cloud_trace_context,
)
from cloudtrace.propagate import get_cloud_trace_propagator, set_cloud_trace_propagator
from cloudtrace.tracer import SamplingDecision

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "CLOUD_TRACE_HEADER",
    "CloudTraceFormatPropagator",
    "SamplingDecision",
    "decode_cloud_trace_context",
    "format_cloud_trace_context",
    "inject_cloud_trace_context",
    "extract_cloud_trace_context",
    "get_cloud_trace_propagator",
    "set_cloud_trace_propagator",
]
