"""
Subnet Entity

Architectural Intent:
- Neutron subnet: an address block carved out of a network
- ip_version is coerced to IPVersion on construction so loose encodings
  from JSON or headers never leak into the value
"""

from dataclasses import dataclass
from typing import Optional

from cloudlink.domain.entities.resource import Resource, ResourceBuilder
from cloudlink.domain.value_objects.ip_version import IPVersion


@dataclass(frozen=True)
class Subnet(Resource):
    id: Optional[str] = None
    name: Optional[str] = None
    network_id: Optional[str] = None
    tenant_id: Optional[str] = None
    ip_version: Optional[IPVersion] = None
    cidr: Optional[str] = None
    gateway_ip: Optional[str] = None
    enable_dhcp: bool = True

    def __post_init__(self) -> None:
        if self.ip_version is not None and not isinstance(self.ip_version, IPVersion):
            object.__setattr__(self, "ip_version", IPVersion.parse(self.ip_version))

    @staticmethod
    def builder() -> "SubnetBuilder":
        return SubnetBuilder()


class SubnetBuilder(ResourceBuilder[Subnet]):
    resource_type = Subnet

    def name(self, name: Optional[str]) -> "SubnetBuilder":
        return self._set("name", name)

    def network_id(self, network_id: Optional[str]) -> "SubnetBuilder":
        return self._set("network_id", network_id)

    def tenant_id(self, tenant_id: Optional[str]) -> "SubnetBuilder":
        return self._set("tenant_id", tenant_id)

    def ip_version(self, ip_version: Optional[IPVersion]) -> "SubnetBuilder":
        return self._set("ip_version", ip_version)
