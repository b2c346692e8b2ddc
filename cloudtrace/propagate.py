"""Registering the Cloud Trace propagator with OpenTelemetry."""

from __future__ import annotations

import logging
from typing import Optional

from opentelemetry.propagate import set_global_textmap
from opentelemetry.propagators.composite import CompositePropagator
from opentelemetry.propagators.textmap import TextMapPropagator
from opentelemetry.trace.propagation.tracecontext import TraceContextTextMapPropagator

from cloudtrace import runtime_config
from cloudtrace.context.propagators import CloudTraceFormatPropagator

logger = logging.getLogger(__name__)


def get_cloud_trace_propagator(include_w3c: Optional[bool] = None) -> TextMapPropagator:
    """
    Build the propagator to install.

    Args:
        include_w3c: Also carry W3C traceparent/tracestate. Defaults to the
            ``include_w3c`` runtime setting.
    """
    if include_w3c is None:
        include_w3c = runtime_config.get_include_w3c()
    if not include_w3c:
        return CloudTraceFormatPropagator()
    return CompositePropagator([
        CloudTraceFormatPropagator(),
        TraceContextTextMapPropagator(),
    ])


def set_cloud_trace_propagator(include_w3c: Optional[bool] = None) -> TextMapPropagator:
    """Install the Cloud Trace propagator as the global text-map propagator."""
    propagator = get_cloud_trace_propagator(include_w3c)
    set_global_textmap(propagator)
    logger.info("Trace propagation configured with %s (fields=%s)",
                type(propagator).__name__, sorted(propagator.fields))
    return propagator
