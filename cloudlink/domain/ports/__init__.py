"""
Domain Ports Package

Architectural Intent:
- Contains port interfaces (abstract contracts) for external dependencies
- Ports define what the dispatch pipeline needs, adapters implement how
- Follows Hexagonal Architecture principles
"""

from cloudlink.domain.ports.message_port import MessagePort
from cloudlink.domain.ports.cloud_client_port import (
    CloudClientPort,
    KeypairServicePort,
    ResourceServicePort,
    UpdatableServicePort,
)
from cloudlink.domain.ports.telemetry_port import TelemetryPort

__all__ = [
    "MessagePort",
    "TelemetryPort",
    "CloudClientPort",
    "KeypairServicePort",
    "ResourceServicePort",
    "UpdatableServicePort",
]
