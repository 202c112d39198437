"""
Port Entity

Architectural Intent:
- Neutron port: a virtual NIC attached to a network
- Immutable value; PortBuilder is the only way request objects are assembled
  from message headers
"""

from dataclasses import dataclass
from typing import Optional

from cloudlink.domain.entities.resource import Resource, ResourceBuilder


@dataclass(frozen=True)
class Port(Resource):
    id: Optional[str] = None
    name: Optional[str] = None
    tenant_id: Optional[str] = None
    network_id: Optional[str] = None
    mac_address: Optional[str] = None
    device_id: Optional[str] = None
    device_owner: Optional[str] = None
    status: Optional[str] = None

    @staticmethod
    def builder() -> "PortBuilder":
        return PortBuilder()


class PortBuilder(ResourceBuilder[Port]):
    resource_type = Port

    def name(self, name: Optional[str]) -> "PortBuilder":
        return self._set("name", name)

    def tenant_id(self, tenant_id: Optional[str]) -> "PortBuilder":
        return self._set("tenant_id", tenant_id)

    def network_id(self, network_id: Optional[str]) -> "PortBuilder":
        return self._set("network_id", network_id)

    def mac_address(self, mac_address: Optional[str]) -> "PortBuilder":
        return self._set("mac_address", mac_address)

    def device_id(self, device_id: Optional[str]) -> "PortBuilder":
        return self._set("device_id", device_id)
