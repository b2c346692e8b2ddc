"""Tests for x-cloud-trace-context parsing and formatting."""

import pytest
from opentelemetry.trace import SpanContext, TraceFlags

from cloudtrace.context.header import (
    decode_cloud_trace_context,
    format_cloud_trace_context,
    parse_cloud_trace_context,
    parse_cloud_trace_header,
    parse_span_id,
    parse_trace_id,
    split_header,
)
from cloudtrace.errors import (
    HeaderDecodeError,
    InvalidSpanIdError,
    InvalidTraceIdError,
    MissingSeparatorError,
)
from cloudtrace.tracer.span_context import SamplingDecision

TRACE_ID_HEX = "105445aa7843bc8bf206b12000100000"
TRACE_ID = int(TRACE_ID_HEX, 16)


class TestDecode:
    """Decoding header values into remote span contexts."""

    def test_sampled_header(self):
        ctx = parse_cloud_trace_context(f"{TRACE_ID_HEX}/1;o=1")
        assert ctx.trace_id == TRACE_ID
        assert ctx.span_id == 1
        assert SamplingDecision.from_trace_flags(ctx.trace_flags) is SamplingDecision.SAMPLED
        assert ctx.trace_flags.sampled
        assert ctx.is_remote is True
        assert len(ctx.trace_state) == 0

    def test_not_sampled_header(self):
        ctx = parse_cloud_trace_context(f"{TRACE_ID_HEX}/42;o=0")
        assert ctx.span_id == 42
        assert SamplingDecision.from_trace_flags(ctx.trace_flags) is SamplingDecision.NOT_SAMPLED
        assert not ctx.trace_flags.sampled

    @pytest.mark.parametrize("suffix", ["", ";", ";x=9", ";o=2", ";o=1;extra", ";O=1", "; o=1"])
    def test_unrecognized_or_missing_suffix_is_deferred(self, suffix):
        ctx, decision = parse_cloud_trace_header(f"{TRACE_ID_HEX}/1{suffix}")
        assert decision is SamplingDecision.DEFERRED
        assert ctx.trace_flags == TraceFlags.DEFAULT

    def test_explicit_decisions_are_returned(self):
        _, sampled = parse_cloud_trace_header(f"{TRACE_ID_HEX}/1;o=1")
        _, not_sampled = parse_cloud_trace_header(f"{TRACE_ID_HEX}/1;o=0")
        assert sampled is SamplingDecision.SAMPLED
        assert not_sampled is SamplingDecision.NOT_SAMPLED

    def test_surrounding_whitespace_is_trimmed(self):
        ctx = parse_cloud_trace_context(f"  {TRACE_ID_HEX}/7;o=0 \n")
        assert ctx.trace_id == TRACE_ID
        assert ctx.span_id == 7
        assert SamplingDecision.from_trace_flags(ctx.trace_flags) is SamplingDecision.NOT_SAMPLED

    def test_zero_span_id_is_accepted(self):
        ctx = parse_cloud_trace_context(f"{TRACE_ID_HEX}/0;o=1")
        assert ctx.span_id == 0
        assert ctx.trace_id == TRACE_ID

    def test_max_span_id(self):
        ctx = parse_cloud_trace_context(f"{TRACE_ID_HEX}/18446744073709551615")
        assert ctx.span_id == 2 ** 64 - 1

    @pytest.mark.parametrize("value", [None, "", "abc", TRACE_ID_HEX, "   "])
    def test_missing_separator(self, value):
        with pytest.raises(MissingSeparatorError):
            parse_cloud_trace_context(value)

    @pytest.mark.parametrize("trace_field", [
        "00000000000000000000000000000000",
        "00f067aa0ba902b7",
        TRACE_ID_HEX.upper(),
        TRACE_ID_HEX + "0",
        "g05445aa7843bc8bf206b12000100000",
        "",
    ])
    def test_invalid_trace_id(self, trace_field):
        with pytest.raises(InvalidTraceIdError):
            parse_cloud_trace_context(f"{trace_field}/1;o=1")

    @pytest.mark.parametrize("span_field", [
        "",
        "x",
        "-1",
        "+1",
        "1_0",
        "1/2",
        "0x10",
        "18446744073709551616",
        "١",
    ])
    def test_invalid_span_id(self, span_field):
        with pytest.raises(InvalidSpanIdError):
            parse_cloud_trace_context(f"{TRACE_ID_HEX}/{span_field};o=1")

    def test_trace_id_checked_before_span_id(self):
        with pytest.raises(InvalidTraceIdError):
            parse_cloud_trace_context("zz/zz")

    def test_all_failures_share_one_base(self):
        for value in ("abc", f"{'0' * 32}/1", f"{TRACE_ID_HEX}/x"):
            with pytest.raises(HeaderDecodeError):
                parse_cloud_trace_context(value)

    def test_decode_folds_failures_to_none(self):
        assert decode_cloud_trace_context("abc") is None
        assert decode_cloud_trace_context("00000000000000000000000000000000/1;o=1") is None
        assert decode_cloud_trace_context("00f067aa0ba902b7/5") is None
        assert decode_cloud_trace_context(f"{TRACE_ID_HEX}/nope") is None
        assert decode_cloud_trace_context(None) is None

    def test_decode_success(self):
        ctx = decode_cloud_trace_context(f"{TRACE_ID_HEX}/1;o=1")
        assert isinstance(ctx, SpanContext)
        assert ctx.trace_id == TRACE_ID

    def test_error_details_name_the_field(self):
        with pytest.raises(InvalidSpanIdError) as excinfo:
            parse_cloud_trace_context(f"{TRACE_ID_HEX}/abc")
        assert excinfo.value.details == {"field": "abc"}
        assert "abc" in str(excinfo.value)


class TestFieldParsers:
    def test_split_header_without_suffix(self):
        assert split_header("a/b") == ("a", "b", None)

    def test_split_header_with_empty_suffix(self):
        assert split_header("a/b;") == ("a", "b", "")

    def test_split_header_splits_once(self):
        assert split_header("a/b/c;d;e") == ("a", "b/c", "d;e")

    def test_parse_trace_id(self):
        assert parse_trace_id("00000000000000000000000000000001") == 1

    def test_parse_span_id(self):
        assert parse_span_id("0012") == 12


class TestEncode:
    """Formatting span contexts as header values."""

    def _ctx(self, trace_id=TRACE_ID, span_id=1, flags=TraceFlags(TraceFlags.SAMPLED)):
        return SpanContext(trace_id=trace_id, span_id=span_id, is_remote=False, trace_flags=flags)

    def test_sampled(self):
        assert format_cloud_trace_context(self._ctx()) == f"{TRACE_ID_HEX}/1;o=1"

    def test_not_sampled(self):
        ctx = self._ctx(flags=TraceFlags(TraceFlags.DEFAULT))
        assert format_cloud_trace_context(ctx) == f"{TRACE_ID_HEX}/1;o=0"

    def test_deferred_has_no_trailing_separator(self):
        value = format_cloud_trace_context(self._ctx(), SamplingDecision.DEFERRED)
        assert value == f"{TRACE_ID_HEX}/1"
        assert ";" not in value

    def test_random_trace_id_flag_does_not_hide_decision(self):
        # 0x02 is the W3C random-trace-id bit set by the SDK id generator.
        sampled = self._ctx(flags=TraceFlags(0x03))
        not_sampled = self._ctx(flags=TraceFlags(0x02))
        assert format_cloud_trace_context(sampled) == f"{TRACE_ID_HEX}/1;o=1"
        assert format_cloud_trace_context(not_sampled) == f"{TRACE_ID_HEX}/1;o=0"

    def test_explicit_decision_overrides_flags(self):
        ctx = self._ctx(flags=TraceFlags(TraceFlags.SAMPLED))
        assert format_cloud_trace_context(ctx, SamplingDecision.NOT_SAMPLED) == f"{TRACE_ID_HEX}/1;o=0"

    def test_trace_id_is_zero_padded(self):
        value = format_cloud_trace_context(self._ctx(trace_id=1))
        assert value == "00000000000000000000000000000001/1;o=1"

    def test_span_id_is_decimal(self):
        value = format_cloud_trace_context(self._ctx(span_id=0xFFFFFFFFFFFFFFFF))
        assert value == f"{TRACE_ID_HEX}/18446744073709551615;o=1"

    @pytest.mark.parametrize("decision", [SamplingDecision.SAMPLED, SamplingDecision.NOT_SAMPLED])
    def test_decode_reverses_encode(self, decision):
        original = self._ctx(trace_id=0xABCDEF, span_id=987654321, flags=decision.to_trace_flags())
        decoded = parse_cloud_trace_context(format_cloud_trace_context(original))
        assert decoded.trace_id == original.trace_id
        assert decoded.span_id == original.span_id
        assert decoded.trace_flags == original.trace_flags


class TestSamplingDecision:
    def test_from_suffix(self):
        assert SamplingDecision.from_suffix("o=1") is SamplingDecision.SAMPLED
        assert SamplingDecision.from_suffix("o=0") is SamplingDecision.NOT_SAMPLED
        assert SamplingDecision.from_suffix(None) is SamplingDecision.DEFERRED
        assert SamplingDecision.from_suffix("") is SamplingDecision.DEFERRED

    def test_from_trace_flags_reads_only_sampled_bit(self):
        assert SamplingDecision.from_trace_flags(TraceFlags(0x03)) is SamplingDecision.SAMPLED
        assert SamplingDecision.from_trace_flags(TraceFlags(0x02)) is SamplingDecision.NOT_SAMPLED

    def test_deferred_flags_leave_sampled_bit_clear(self):
        assert SamplingDecision.DEFERRED.to_trace_flags() == TraceFlags.DEFAULT
