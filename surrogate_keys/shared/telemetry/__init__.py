"""Shared telemetry: logging setup, OpenTelemetry config, and span helpers."""

from surrogate_keys.shared.telemetry.logging import get_logger, setup_logging
from surrogate_keys.shared.telemetry.telemetry import (
    TelemetryConfig,
    build_span_exporter,
    get_telemetry,
    set_telemetry,
)
from surrogate_keys.shared.telemetry.tracing import add_span_event

__all__ = [
    "setup_logging",
    "get_logger",
    "TelemetryConfig",
    "build_span_exporter",
    "get_telemetry",
    "set_telemetry",
    "add_span_event",
]
