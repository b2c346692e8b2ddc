"""Google Cloud Trace context propagation as an OpenTelemetry text-map propagator."""

from __future__ import annotations

import logging
from typing import Dict, FrozenSet, Optional

from opentelemetry.context import Context
from opentelemetry.propagators.textmap import (
    CarrierT,
    Getter,
    Setter,
    TextMapPropagator,
    default_getter,
    default_setter,
)
from opentelemetry.trace import SpanContext

from cloudtrace import runtime_config
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
    parse_cloud_trace_header,
)
from cloudtrace.errors import HeaderDecodeError
from cloudtrace.tracer.span_context import SamplingDecision

logger = logging.getLogger(__name__)

FIELDS: FrozenSet[str] = frozenset({CLOUD_TRACE_HEADER})


class CloudTraceFormatPropagator(TextMapPropagator):
    """
    Extracts and injects span contexts using the ``x-cloud-trace-context`` header.

    Usable anywhere OpenTelemetry expects a TextMapPropagator:

        from opentelemetry.propagate import set_global_textmap
        set_global_textmap(CloudTraceFormatPropagator())

    or by name through ``OTEL_PROPAGATORS=gcp_cloud_trace``.
    """

    def extract(
        self,
        carrier: CarrierT,
        context: Optional[Context] = None,
        getter: Getter[CarrierT] = default_getter,
    ) -> Context:
        values = getter.get(carrier, CLOUD_TRACE_HEADER)
        if not values:
            return with_empty_span_context(context)

        header_value = values[0]
        try:
            span_context, decision = parse_cloud_trace_header(header_value)
        except HeaderDecodeError as exc:
            if runtime_config.get_log_decode_failures():
                logger.debug("Ignoring %s header: %s", type(exc).__name__, exc)
            return with_empty_span_context(context)

        deferred = decision is SamplingDecision.DEFERRED
        return with_remote_span_context(span_context, context, deferred=deferred)

    def inject(
        self,
        carrier: CarrierT,
        context: Optional[Context] = None,
        setter: Setter[CarrierT] = default_setter,
    ) -> None:
        span_context = get_span_context(context)
        if not span_context.is_valid:
            return
        # Only the extracted parent itself keeps an open decision; spans
        # started under it report what the local sampler decided.
        decision = None
        if is_deferred_parent(span_context, context):
            decision = SamplingDecision.DEFERRED
        setter.set(carrier, CLOUD_TRACE_HEADER, format_cloud_trace_context(span_context, decision))

    @property
    def fields(self) -> FrozenSet[str]:
        return FIELDS


_propagator = CloudTraceFormatPropagator()


def inject_cloud_trace_context(headers: Dict[str, str], context: Optional[Context] = None) -> None:
    """
    Inject the x-cloud-trace-context header into a headers dict.

    Uses the current context when none is given. Leaves headers untouched if
    there is no valid span.
    """
    _propagator.inject(headers, context=context)


def extract_cloud_trace_context(headers: Dict[str, str]) -> Optional[SpanContext]:
    """
    Extract and decode the x-cloud-trace-context header (case-insensitive).

    Returns None when the header is absent or malformed.
    """
    for key, value in headers.items():
        if key.lower() == CLOUD_TRACE_HEADER:
            return decode_cloud_trace_context(value)
    return None
