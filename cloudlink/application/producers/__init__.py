"""
Resource Producers Package

Architectural Intent:
- One thin producer per resource kind, each a descriptor bound to the
  shared DispatchEngine
"""

from cloudlink.application.producers.base import ResourceProducer
from cloudlink.application.producers.port_producer import PORT_DESCRIPTOR, PortProducer
from cloudlink.application.producers.subnet_producer import (
    SUBNET_DESCRIPTOR,
    SubnetProducer,
)
from cloudlink.application.producers.network_producer import (
    NETWORK_DESCRIPTOR,
    NetworkProducer,
)
from cloudlink.application.producers.router_producer import (
    ROUTER_DESCRIPTOR,
    RouterProducer,
)
from cloudlink.application.producers.keypair_producer import (
    KEYPAIR_DESCRIPTOR,
    KeypairProducer,
)

__all__ = [
    "ResourceProducer",
    "PortProducer",
    "SubnetProducer",
    "NetworkProducer",
    "RouterProducer",
    "KeypairProducer",
    "PORT_DESCRIPTOR",
    "SUBNET_DESCRIPTOR",
    "NETWORK_DESCRIPTOR",
    "ROUTER_DESCRIPTOR",
    "KEYPAIR_DESCRIPTOR",
]
