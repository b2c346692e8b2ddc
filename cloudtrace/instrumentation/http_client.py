"""HTTP client helpers for context propagation."""

from __future__ import annotations

from typing import Dict, Optional

from opentelemetry.context import Context

from cloudtrace.context import inject_cloud_trace_context


def inject_headers(headers: Dict[str, str], context: Optional[Context] = None) -> Dict[str, str]:
    """
    Inject x-cloud-trace-context into the provided headers dict if a valid span is current.

    Returns the same headers mapping for convenience.
    """
    inject_cloud_trace_context(headers, context=context)
    return headers
