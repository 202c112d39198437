"""
Port Producer

Neutron ports: all five operations, id from the ID header.
"""

from cloudlink.application.producers.base import ResourceProducer
from cloudlink.application.resource_descriptor import ResourceDescriptor
from cloudlink.domain.entities.port import Port
from cloudlink.domain.services.request_builders import get_builder
from cloudlink.domain.value_objects.resource_kind import ResourceKind

PORT_DESCRIPTOR = ResourceDescriptor(
    kind=ResourceKind.PORT,
    resource_type=Port,
    service_accessor=lambda client: client.ports(),
    builder=get_builder(ResourceKind.PORT),
)


class PortProducer(ResourceProducer):
    descriptor = PORT_DESCRIPTOR
