"""
Resource Descriptor

Architectural Intent:
- Everything the dispatch engine needs to know about one resource kind:
  its tag, its value type, how to reach its service on the client facade,
  how to build a create request from headers, and which id header it prefers
- A descriptor is the only thing a new resource kind has to supply

Design Decisions:
- create_handler replaces the build-then-create path for kinds whose create
  call is not resource-shaped (keypairs)
- operations is the closed set the kind's service implements; anything else
  faults before the service is touched
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from cloudlink.domain import constants
from cloudlink.domain.ports.cloud_client_port import CloudClientPort
from cloudlink.domain.ports.message_port import MessagePort
from cloudlink.domain.services.request_builders import RequestBuilder
from cloudlink.domain.value_objects.operation import Operation
from cloudlink.domain.value_objects.resource_kind import ResourceKind

ServiceAccessor = Callable[[CloudClientPort], Any]
CreateHandler = Callable[[Any, MessagePort], Any]


@dataclass(frozen=True)
class ResourceDescriptor:
    kind: ResourceKind
    resource_type: type
    service_accessor: ServiceAccessor
    builder: Optional[RequestBuilder] = None
    id_header: Optional[str] = None
    operations: frozenset[Operation] = field(default_factory=lambda: frozenset(Operation))
    create_handler: Optional[CreateHandler] = None

    @property
    def id_headers(self) -> tuple[str, ...]:
        """Headers searched for the resource id, preferred name first."""
        if self.id_header and self.id_header != constants.ID:
            return (self.id_header, constants.ID)
        return (constants.ID,)

    def supports(self, operation: Operation) -> bool:
        return operation in self.operations
