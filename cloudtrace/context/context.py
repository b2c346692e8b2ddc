"""Reading the current span context and deriving Contexts with a replaced remote parent.

A parent decoded without a sampling suffix is recorded under its own context
key so that re-injecting that exact span context keeps the decision open.
"""

from typing import Optional

from opentelemetry.context import Context, create_key, get_value, set_value
from opentelemetry.trace import (
    INVALID_SPAN,
    NonRecordingSpan,
    SpanContext,
    get_current_span,
    set_span_in_context,
)

_DEFERRED_PARENT_KEY = create_key("cloudtrace-deferred-parent")


def get_span_context(context: Optional[Context] = None) -> SpanContext:
    """
    Return the span context of the span held by ``context``.

    Falls back to the current context. Returns INVALID_SPAN_CONTEXT when no
    span is set.
    """
    return get_current_span(context).get_span_context()


def with_remote_span_context(span_context: SpanContext, context: Optional[Context] = None,
                             deferred: bool = False) -> Context:
    """Derive a Context whose current span is a non-recording remote parent."""
    ctx = set_span_in_context(NonRecordingSpan(span_context), context)
    return set_value(_DEFERRED_PARENT_KEY, span_context if deferred else None, ctx)


def with_empty_span_context(context: Optional[Context] = None) -> Context:
    """Derive a Context that carries no usable span context."""
    ctx = set_span_in_context(INVALID_SPAN, context)
    return set_value(_DEFERRED_PARENT_KEY, None, ctx)


def is_deferred_parent(span_context: SpanContext, context: Optional[Context] = None) -> bool:
    """True if ``span_context`` is the extracted parent whose decision was left open."""
    return get_value(_DEFERRED_PARENT_KEY, context) == span_context
