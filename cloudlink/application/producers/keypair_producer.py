"""
Keypair Producer

Architectural Intent:
- Nova keypairs are addressed by name and created from (name, public_key)
  rather than from a built resource
- The public key comes from the body when the body is a non-empty string;
  otherwise the remote side generates the pair and returns the private key
"""

from typing import Any, Optional

from cloudlink.application.producers.base import ResourceProducer
from cloudlink.application.resource_descriptor import ResourceDescriptor
from cloudlink.domain import constants
from cloudlink.domain.entities.keypair import Keypair
from cloudlink.domain.exceptions import MissingHeaderError
from cloudlink.domain.ports.message_port import MessagePort
from cloudlink.domain.value_objects.operation import Operation
from cloudlink.domain.value_objects.resource_kind import ResourceKind


def create_keypair(service: Any, message: MessagePort) -> Optional[Keypair]:
    if not message.has_header(constants.NAME):
        raise MissingHeaderError(constants.NAME, Operation.CREATE, ResourceKind.KEYPAIR)
    name = message.header(constants.NAME, str).unwrap()
    body = message.body_as(str)
    public_key = body.value if body.ok and body.value else None
    return service.create(name, public_key)


KEYPAIR_DESCRIPTOR = ResourceDescriptor(
    kind=ResourceKind.KEYPAIR,
    resource_type=Keypair,
    service_accessor=lambda client: client.keypairs(),
    id_header=constants.NAME,
    operations=frozenset(
        {Operation.CREATE, Operation.GET, Operation.GET_ALL, Operation.DELETE}
    ),
    create_handler=create_keypair,
)


class KeypairProducer(ResourceProducer):
    descriptor = KEYPAIR_DESCRIPTOR
