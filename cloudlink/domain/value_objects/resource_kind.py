"""
ResourceKind Value Object

Architectural Intent:
- Tag naming the cloud entity type a producer is bound to
- Used in diagnostics ("operation update not supported for subnet")
"""

from enum import Enum


class ResourceKind(Enum):
    PORT = "port"
    SUBNET = "subnet"
    NETWORK = "network"
    ROUTER = "router"
    KEYPAIR = "keypair"

    def __str__(self) -> str:
        return self.value
