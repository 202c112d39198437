"""
Subnet Producer

Neutron subnets: no update; GET and DELETE prefer the subnetId header.
"""

from cloudlink.application.producers.base import ResourceProducer
from cloudlink.application.resource_descriptor import ResourceDescriptor
from cloudlink.domain import constants
from cloudlink.domain.entities.subnet import Subnet
from cloudlink.domain.services.request_builders import get_builder
from cloudlink.domain.value_objects.operation import Operation
from cloudlink.domain.value_objects.resource_kind import ResourceKind

SUBNET_DESCRIPTOR = ResourceDescriptor(
    kind=ResourceKind.SUBNET,
    resource_type=Subnet,
    service_accessor=lambda client: client.subnets(),
    builder=get_builder(ResourceKind.SUBNET),
    id_header=constants.SUBNET_ID,
    operations=frozenset(
        {Operation.CREATE, Operation.GET, Operation.GET_ALL, Operation.DELETE}
    ),
)


class SubnetProducer(ResourceProducer):
    descriptor = SUBNET_DESCRIPTOR
