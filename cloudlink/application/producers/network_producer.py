"""
Network Producer
"""

from cloudlink.application.producers.base import ResourceProducer
from cloudlink.application.resource_descriptor import ResourceDescriptor
from cloudlink.domain import constants
from cloudlink.domain.entities.network import Network
from cloudlink.domain.services.request_builders import get_builder
from cloudlink.domain.value_objects.operation import Operation
from cloudlink.domain.value_objects.resource_kind import ResourceKind

NETWORK_DESCRIPTOR = ResourceDescriptor(
    kind=ResourceKind.NETWORK,
    resource_type=Network,
    service_accessor=lambda client: client.networks(),
    builder=get_builder(ResourceKind.NETWORK),
    id_header=constants.NETWORK_ID,
    operations=frozenset(
        {Operation.CREATE, Operation.GET, Operation.GET_ALL, Operation.DELETE}
    ),
)


class NetworkProducer(ResourceProducer):
    descriptor = NETWORK_DESCRIPTOR
