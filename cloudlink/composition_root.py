"""
Composition Root

Architectural Intent:
- Dependency injection composition root for CloudLink
- Single place where the client facade, dispatch engine, producers and bus
  are wired together
- No adapter instantiation should occur outside this module (except CLI)

Design Decisions:
- Uses a simple dataclass container instead of a DI framework
- One DispatchEngine is shared by every producer; it holds no per-message state
- Endpoint names follow <service>:<kind>
"""

from dataclasses import dataclass, field
from typing import Optional

from cloudlink.application.dispatch_engine import DispatchEngine
from cloudlink.application.producers.base import ResourceProducer
from cloudlink.application.producers.keypair_producer import KeypairProducer
from cloudlink.application.producers.network_producer import NetworkProducer
from cloudlink.application.producers.port_producer import PortProducer
from cloudlink.application.producers.router_producer import RouterProducer
from cloudlink.application.producers.subnet_producer import SubnetProducer
from cloudlink.domain.ports.cloud_client_port import CloudClientPort
from cloudlink.infrastructure.adapters.openstack_adapter import InMemoryOpenStackClient
from cloudlink.infrastructure.config import CloudLinkConfig
from cloudlink.infrastructure.message_bus import MessageBus
from cloudlink.infrastructure.telemetry.otel_exporter import (
    OTELExporter,
    create_exporter,
)

ENDPOINTS: dict[str, type[ResourceProducer]] = {
    "neutron:port": PortProducer,
    "neutron:subnet": SubnetProducer,
    "neutron:network": NetworkProducer,
    "neutron:router": RouterProducer,
    "nova:keypair": KeypairProducer,
}


@dataclass
class CloudLinkContainer:
    """DI container holding all wired dependencies."""

    client: CloudClientPort
    telemetry: OTELExporter
    engine: DispatchEngine
    bus: MessageBus
    producers: dict[str, ResourceProducer] = field(default_factory=dict)


def create_container(
    config: Optional[CloudLinkConfig] = None,
    client: Optional[CloudClientPort] = None,
) -> CloudLinkContainer:
    """Create and wire all dependencies."""
    config = config or CloudLinkConfig()
    if client is None:
        client = InMemoryOpenStackClient(
            region=config.openstack.region,
            project=config.openstack.project,
            user_id=config.openstack.username,
        )

    telemetry = create_exporter(
        endpoint=config.telemetry.endpoint,
        service_name=config.telemetry.service_name,
        insecure=config.telemetry.insecure,
    )
    engine = DispatchEngine(telemetry=telemetry)
    bus = MessageBus(dead_letter=config.bus.dead_letter)

    producers: dict[str, ResourceProducer] = {}
    for endpoint, producer_cls in ENDPOINTS.items():
        producer = producer_cls(client, engine)
        bus.register(endpoint, producer)
        producers[endpoint] = producer

    return CloudLinkContainer(
        client=client,
        telemetry=telemetry,
        engine=engine,
        bus=bus,
        producers=producers,
    )
