"""
Router Producer

Neutron routers: all five operations; GET and DELETE prefer the routerId header.
"""

from cloudlink.application.producers.base import ResourceProducer
from cloudlink.application.resource_descriptor import ResourceDescriptor
from cloudlink.domain import constants
from cloudlink.domain.entities.router import Router
from cloudlink.domain.services.request_builders import get_builder
from cloudlink.domain.value_objects.resource_kind import ResourceKind

ROUTER_DESCRIPTOR = ResourceDescriptor(
    kind=ResourceKind.ROUTER,
    resource_type=Router,
    service_accessor=lambda client: client.routers(),
    builder=get_builder(ResourceKind.ROUTER),
    id_header=constants.ROUTER_ID,
)


class RouterProducer(ResourceProducer):
    descriptor = ROUTER_DESCRIPTOR
