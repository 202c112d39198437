"""
Router Entity

Architectural Intent:
- Neutron router connecting subnets to each other and to external networks
"""

from dataclasses import dataclass
from typing import Optional

from cloudlink.domain.entities.resource import Resource, ResourceBuilder


@dataclass(frozen=True)
class Router(Resource):
    id: Optional[str] = None
    name: Optional[str] = None
    tenant_id: Optional[str] = None
    admin_state_up: Optional[bool] = None
    status: Optional[str] = None

    @staticmethod
    def builder() -> "RouterBuilder":
        return RouterBuilder()


class RouterBuilder(ResourceBuilder[Router]):
    resource_type = Router

    def name(self, name: Optional[str]) -> "RouterBuilder":
        return self._set("name", name)

    def tenant_id(self, tenant_id: Optional[str]) -> "RouterBuilder":
        return self._set("tenant_id", tenant_id)

    def admin_state_up(self, admin_state_up: Optional[bool]) -> "RouterBuilder":
        return self._set("admin_state_up", admin_state_up)
