"""Sampling decisions carried by the Cloud Trace header."""

from enum import Enum

from opentelemetry.trace import SpanContext, TraceFlags, TraceState


class SamplingDecision(Enum):
    SAMPLED = "o=1"
    NOT_SAMPLED = "o=0"
    DEFERRED = ""

    @classmethod
    def from_suffix(cls, suffix) -> "SamplingDecision":
        """Map the text after ';' to a decision. Unknown or missing is DEFERRED."""
        if suffix == cls.SAMPLED.value:
            return cls.SAMPLED
        if suffix == cls.NOT_SAMPLED.value:
            return cls.NOT_SAMPLED
        return cls.DEFERRED

    @classmethod
    def from_trace_flags(cls, trace_flags: TraceFlags) -> "SamplingDecision":
        """
        Read the decision a span carries.

        TraceFlags only records sampled or not; DEFERRED is tracked on the
        Context next to the extracted parent, never in the flags.
        """
        return cls.SAMPLED if trace_flags.sampled else cls.NOT_SAMPLED

    def to_trace_flags(self) -> TraceFlags:
        # DEFERRED leaves the sampled bit clear; other bits (e.g. random
        # trace id) belong to the W3C flags and are never set here.
        if self is SamplingDecision.SAMPLED:
            return TraceFlags(TraceFlags.SAMPLED)
        return TraceFlags(TraceFlags.DEFAULT)


def remote_span_context(trace_id: int, span_id: int, decision: SamplingDecision) -> SpanContext:
    """Build the span context of a parent observed in another process."""
    return SpanContext(
        trace_id=trace_id,
        span_id=span_id,
        is_remote=True,
        trace_flags=decision.to_trace_flags(),
        trace_state=TraceState(),
    )
