"""
Telemetry Port

Architectural Intent:
- What the dispatch engine needs from an observability backend
- Implemented by the OpenTelemetry exporter; engines built without one
  record nothing
"""

from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class TelemetryPort(Protocol):
    def record_dispatch(
        self, kind: str, operation: str, fault: bool, duration_ms: float
    ) -> None: ...

    def start_span(
        self, name: str, attributes: Optional[dict[str, str]] = None
    ) -> Optional[Any]: ...

    def end_span(self, span: Any) -> None: ...
