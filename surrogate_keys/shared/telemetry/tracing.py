"""Span helpers for recording projection details on the current trace.

No-op when no span is recording (telemetry disabled).
"""

from opentelemetry import trace


def add_span_event(name: str, attributes: dict | None = None) -> None:
    """Add an event to the current span."""
    span = trace.get_current_span()
    if span and span.is_recording():
        span.add_event(name, attributes=attributes or {})
