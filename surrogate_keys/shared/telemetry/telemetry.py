"""OpenTelemetry tracing for the surrogate-key service.

Request spans come from the FastAPI instrumentation; the projector adds a
surrogate_key.compressed event to the request span whenever it replaces
the cache tags with fingerprints. Exporters: console, otlp, or none.
"""

import logging
import threading

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.logging import LoggingInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SpanExporter,
)
from opentelemetry.sdk.trace.sampling import TraceIdRatioBased

logger = logging.getLogger(__name__)

# Liveness probes are not traced.
UNTRACED_URLS = "/api/v1/health"


def build_span_exporter(
    exporter_type: str, otlp_endpoint: str | None = None
) -> SpanExporter | None:
    """Return the span exporter for exporter_type, or None for "none".

    An otlp exporter without an endpoint, or an unknown type, falls back to
    the console exporter with a warning.
    """
    if exporter_type == "none":
        return None
    if exporter_type == "otlp" and otlp_endpoint:
        return OTLPSpanExporter(
            endpoint=otlp_endpoint, insecure=otlp_endpoint.startswith("http://")
        )
    if exporter_type != "console":
        logger.warning("Unknown exporter type '%s', using console", exporter_type)
    return ConsoleSpanExporter()


class TelemetryConfig:
    """Tracer provider plus FastAPI and logging instrumentation.

    Nothing is instrumented unless enabled and setup_telemetry succeeded.
    """

    def __init__(
        self,
        service_name: str,
        service_version: str,
        enabled: bool = True,
        environment: str = "development",
    ) -> None:
        self.service_name = service_name
        self.service_version = service_version
        self.enabled = enabled
        self.environment = environment
        self.tracer_provider: TracerProvider | None = None

    @property
    def active(self) -> bool:
        return self.enabled and self.tracer_provider is not None

    def setup_telemetry(
        self,
        exporter_type: str = "console",
        otlp_endpoint: str | None = None,
        sample_rate: float = 1.0,
    ) -> TracerProvider | None:
        """Create the tracer provider and install it globally.

        Args:
            exporter_type: "console", "otlp", or "none" (spans recorded, not exported).
            otlp_endpoint: OTLP gRPC endpoint (e.g. http://localhost:4317).
            sample_rate: Sampling rate 0.0–1.0.

        Returns:
            TracerProvider, or None when disabled or setup failed.
        """
        if not self.enabled:
            logger.info("Telemetry disabled")
            return None
        try:
            provider = TracerProvider(
                resource=Resource(
                    attributes={
                        SERVICE_NAME: self.service_name,
                        SERVICE_VERSION: self.service_version,
                        "deployment.environment": self.environment,
                    }
                ),
                sampler=TraceIdRatioBased(sample_rate),
            )
            exporter = build_span_exporter(exporter_type, otlp_endpoint)
            if exporter is not None:
                provider.add_span_processor(BatchSpanProcessor(exporter))
            trace.set_tracer_provider(provider)
        except Exception as e:
            logger.exception("Failed to initialize telemetry: %s", e)
            return None
        self.tracer_provider = provider
        logger.info(
            "OpenTelemetry initialized: service=%s, version=%s, exporter=%s",
            self.service_name,
            self.service_version,
            exporter_type,
        )
        return provider

    def instrument_fastapi(self, app: FastAPI) -> None:
        """Open a server span per request so projection events attach to it."""
        if not self.active:
            return
        try:
            FastAPIInstrumentor.instrument_app(
                app,
                tracer_provider=self.tracer_provider,
                excluded_urls=UNTRACED_URLS,
            )
        except Exception as e:
            logger.exception("Failed to instrument FastAPI: %s", e)

    def instrument_logging(self) -> None:
        """Add otelTraceID/otelSpanID to log records (e.g. the compression notice)."""
        if not self.active:
            return
        try:
            LoggingInstrumentor().instrument(
                tracer_provider=self.tracer_provider,
                set_logging_format=True,
            )
        except Exception as e:
            logger.exception("Failed to instrument logging: %s", e)

    def shutdown(self) -> None:
        """Flush remaining spans and release the provider."""
        if self.tracer_provider is None:
            return
        try:
            self.tracer_provider.shutdown()
            logger.info("Telemetry shutdown complete")
        except Exception as e:
            logger.exception("Error during telemetry shutdown: %s", e)


_telemetry: TelemetryConfig | None = None
_telemetry_lock = threading.RLock()


def get_telemetry() -> TelemetryConfig | None:
    """Return the global telemetry instance (set at startup)."""
    with _telemetry_lock:
        return _telemetry


def set_telemetry(telemetry: TelemetryConfig | None) -> None:
    """Set (or clear with None) the global telemetry instance."""
    global _telemetry
    with _telemetry_lock:
        _telemetry = telemetry
