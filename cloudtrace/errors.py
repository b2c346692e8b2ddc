"""cloudtrace error hierarchy and exceptions."""

from __future__ import annotations


class CloudTraceError(Exception):
    """Base exception for all cloudtrace errors."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


class ConfigError(CloudTraceError):
    """Raised when a runtime configuration value is invalid."""
    pass


class HeaderDecodeError(CloudTraceError):
    """Raised when an x-cloud-trace-context value cannot be decoded.

    Callers outside the codec only ever see this base class folded into a
    ``None`` result; the subclasses exist so each failure cause can be told
    apart in tests and debug logs.
    """
    pass


class MissingSeparatorError(HeaderDecodeError):
    """Raised when the header has no '/' between trace id and span id."""
    pass


class InvalidTraceIdError(HeaderDecodeError):
    """Raised when the trace id is not 32 lowercase hex characters or is zero."""
    pass


class InvalidSpanIdError(HeaderDecodeError):
    """Raised when the span id is not an unsigned 64-bit decimal integer."""
    pass
