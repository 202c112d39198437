"""
CloudLink Telemetry Infrastructure

Architectural Intent:
- OpenTelemetry integration for dispatch observability
- Metrics and traces export over OTLP
"""

from cloudlink.infrastructure.telemetry.otel_exporter import (
    OTELExporter,
    OTELConfig,
    create_exporter,
)

__all__ = [
    "OTELExporter",
    "OTELConfig",
    "create_exporter",
]
