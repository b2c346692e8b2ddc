"""Instrumentation helpers for HTTP clients and servers."""

from cloudtrace.instrumentation.http_client import inject_headers as inject_http_headers
from cloudtrace.instrumentation.http_server import extract_parent_context, start_server_span

__all__ = [
    "inject_http_headers",
    "extract_parent_context",
    "start_server_span",
]
