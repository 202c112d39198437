"""
Network Entity

Architectural Intent:
- Neutron network: the L2 segment ports and subnets attach to
- Provider attributes (network_type, physical_network, segment_id) are
  optional and forwarded as given; the remote API validates combinations
"""

from dataclasses import dataclass
from typing import Optional

from cloudlink.domain.entities.resource import Resource, ResourceBuilder


@dataclass(frozen=True)
class Network(Resource):
    id: Optional[str] = None
    name: Optional[str] = None
    tenant_id: Optional[str] = None
    admin_state_up: Optional[bool] = None
    network_type: Optional[str] = None
    physical_network: Optional[str] = None
    segment_id: Optional[int] = None
    shared: Optional[bool] = None
    router_external: Optional[bool] = None
    status: Optional[str] = None

    @staticmethod
    def builder() -> "NetworkBuilder":
        return NetworkBuilder()


class NetworkBuilder(ResourceBuilder[Network]):
    resource_type = Network

    def name(self, name: Optional[str]) -> "NetworkBuilder":
        return self._set("name", name)

    def tenant_id(self, tenant_id: Optional[str]) -> "NetworkBuilder":
        return self._set("tenant_id", tenant_id)

    def admin_state_up(self, admin_state_up: Optional[bool]) -> "NetworkBuilder":
        return self._set("admin_state_up", admin_state_up)

    def network_type(self, network_type: Optional[str]) -> "NetworkBuilder":
        return self._set("network_type", network_type)

    def physical_network(self, physical_network: Optional[str]) -> "NetworkBuilder":
        return self._set("physical_network", physical_network)

    def segment_id(self, segment_id: Optional[int]) -> "NetworkBuilder":
        return self._set("segment_id", segment_id)

    def shared(self, shared: Optional[bool]) -> "NetworkBuilder":
        return self._set("shared", shared)

    def router_external(self, router_external: Optional[bool]) -> "NetworkBuilder":
        return self._set("router_external", router_external)
