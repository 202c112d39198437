"""
OpenTelemetry Exporter for CloudLink

Architectural Intent:
- Exports dispatch telemetry (latency, faults, spans) to OTLP-compatible backends
- Implements TelemetryPort for the dispatch engine
- Keeps a bounded local buffer of recent metrics while export is off; once
  the SDK is initialized it owns export and nothing is buffered

Security:
- Endpoint defaults to empty string (must be explicitly configured)
- Non-localhost http:// endpoints rejected unless insecure=True
- Validation in __post_init__ prevents accidental plaintext export
"""

from __future__ import annotations
from collections import deque
from dataclasses import dataclass
from typing import Optional, Any
from urllib.parse import urlparse
import logging
from datetime import datetime, UTC

logger = logging.getLogger(__name__)

METRICS_BUFFER_SIZE = 1024


@dataclass
class OTELConfig:
    endpoint: str = ""
    service_name: str = "cloudlink"
    environment: str = "development"
    enable_traces: bool = True
    enable_metrics: bool = True
    insecure: bool = False

    def __post_init__(self) -> None:
        if self.endpoint:
            parsed = urlparse(self.endpoint)
            is_localhost = parsed.hostname in ("localhost", "127.0.0.1", "::1")
            if parsed.scheme == "http" and not is_localhost and not self.insecure:
                raise ValueError(
                    f"Non-localhost HTTP endpoint '{self.endpoint}' requires "
                    "insecure=True or use https://. "
                    "Set insecure=True to explicitly allow plaintext export."
                )


class OTELExporter:
    """
    OpenTelemetry exporter for dispatch metrics and traces.

    Records:
    - cloudlink.dispatch.duration_ms (histogram)
    - cloudlink.dispatch.faults (counter)
    - one span per dispatched message
    """

    def __init__(self, config: OTELConfig):
        self.config = config
        self._initialized = False
        self._metrics_buffer: deque[dict[str, Any]] = deque(maxlen=METRICS_BUFFER_SIZE)
        self._meter: Any = None
        self._instruments: dict[str, Any] = {}

    def initialize(self) -> None:
        """Initialize OpenTelemetry SDK and exporters."""
        if not self.config.endpoint:
            logger.info("OTEL endpoint not configured, telemetry disabled")
            return

        try:
            from opentelemetry import metrics, trace
            from opentelemetry.sdk.trace import TracerProvider
            from opentelemetry.sdk.trace.export import BatchSpanProcessor
            from opentelemetry.sdk.resources import Resource, SERVICE_NAME
            from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import (
                OTLPSpanExporter,
            )
            from opentelemetry.sdk.metrics import MeterProvider
            from opentelemetry.sdk.metrics.export import PeriodicExportingMetricReader
            from opentelemetry.exporter.otlp.proto.grpc.metric_exporter import (
                OTLPMetricExporter,
            )

            resource = Resource(
                attributes={
                    SERVICE_NAME: self.config.service_name,
                    "environment": self.config.environment,
                }
            )

            if self.config.enable_traces:
                trace.set_tracer_provider(TracerProvider(resource=resource))
                span_processor = BatchSpanProcessor(
                    OTLPSpanExporter(
                        endpoint=self.config.endpoint, insecure=self.config.insecure
                    )
                )
                trace.get_tracer_provider().add_span_processor(span_processor)

            if self.config.enable_metrics:
                metric_reader = PeriodicExportingMetricReader(
                    OTLPMetricExporter(
                        endpoint=self.config.endpoint, insecure=self.config.insecure
                    )
                )
                provider = MeterProvider(
                    resource=resource, metric_readers=[metric_reader]
                )
                metrics.set_meter_provider(provider)
                self._meter = metrics.get_meter(__name__)
                self._instruments["cloudlink.dispatch.duration_ms"] = (
                    self._meter.create_histogram(
                        "cloudlink.dispatch.duration_ms", unit="ms"
                    )
                )
                self._instruments["cloudlink.dispatch.faults"] = (
                    self._meter.create_counter("cloudlink.dispatch.faults")
                )

            self._initialized = True
            self.export()

        except Exception as e:
            logger.error("Failed to initialize OTEL: %s", e)
            self._initialized = False

    def record_metric(
        self,
        name: str,
        value: float,
        unit: str = "",
        attributes: Optional[dict[str, str]] = None,
    ) -> None:
        """Record a metric value.

        Sent straight to the SDK instrument once initialized; otherwise kept in
        the local buffer, which holds at most METRICS_BUFFER_SIZE entries.
        """
        if self._initialized:
            instrument = self._instruments.get(name)
            if instrument is None:
                return
            if hasattr(instrument, "record"):
                instrument.record(value, attributes=attributes or {})
            else:
                instrument.add(value, attributes=attributes or {})
            return

        self._metrics_buffer.append(
            {
                "name": name,
                "value": value,
                "unit": unit,
                "attributes": attributes or {},
                "timestamp": datetime.now(UTC).isoformat(),
            }
        )

    def record_dispatch(
        self,
        kind: str,
        operation: str,
        fault: bool,
        duration_ms: float,
    ) -> None:
        """Record one dispatched message."""
        attributes = {"kind": kind, "operation": operation, "fault": str(fault)}
        self.record_metric(
            "cloudlink.dispatch.duration_ms", duration_ms, unit="ms", attributes=attributes
        )
        if fault:
            self.record_metric("cloudlink.dispatch.faults", 1.0, attributes=attributes)

    def start_span(
        self,
        name: str,
        attributes: Optional[dict[str, str]] = None,
    ) -> Optional[Any]:
        """Start a tracing span."""
        if not self._initialized:
            return None

        from opentelemetry import trace

        tracer = trace.get_tracer(__name__)
        return tracer.start_span(name, attributes=attributes or {})

    def end_span(self, span: Any) -> None:
        """End a tracing span."""
        if span:
            span.end()

    def export(self) -> None:
        """Drop metrics buffered before the SDK took over export."""
        if not self._initialized:
            return

        # PeriodicExportingMetricReader exports on its own schedule.
        exported_count = len(self._metrics_buffer)
        self._metrics_buffer.clear()

        if exported_count:
            logger.debug("Flushed %d buffered metrics", exported_count)


def create_exporter(
    endpoint: Optional[str] = None,
    service_name: str = "cloudlink",
    insecure: bool = False,
) -> OTELExporter:
    """Factory function to create an initialized OTEL exporter."""
    config = OTELConfig(
        endpoint=endpoint or "",
        service_name=service_name,
        insecure=insecure,
    )
    exporter = OTELExporter(config)
    exporter.initialize()
    return exporter
