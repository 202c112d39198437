"""
Cloud Client Port

Architectural Intent:
- Port interface for the remote cloud control API (Neutron, Nova)
- One accessor per resource kind on a single root facade; each accessor
  returns a service exposing the same lifecycle methods
- Implemented by the in-memory OpenStack adapter; a real SDK adapter plugs
  in behind the same signatures

Design Decisions:
- Uses Protocol for structural typing (no inheritance needed)
- get/create/update signal failure by returning None or raising; delete
  returns an ActionResponse
- Keypair services differ: create takes (name, public_key) and keypairs
  are addressed by name
- Not every service implements update; the dispatch engine checks before
  calling
- Calls are blocking; implementations must be thread-safe when producers
  share them across threads
"""

from typing import Any, Optional, Protocol, Sequence, runtime_checkable

from cloudlink.domain.entities.keypair import Keypair
from cloudlink.domain.value_objects.action_response import ActionResponse


@runtime_checkable
class ResourceServicePort(Protocol):
    """Lifecycle operations for one resource kind."""

    def create(self, resource: Any) -> Optional[Any]: ...

    def get(self, resource_id: str) -> Optional[Any]: ...

    def list(self) -> Sequence[Any]: ...

    def delete(self, resource_id: str) -> ActionResponse: ...


@runtime_checkable
class UpdatableServicePort(ResourceServicePort, Protocol):
    def update(self, resource: Any) -> Optional[Any]: ...


@runtime_checkable
class KeypairServicePort(Protocol):
    def create(self, name: str, public_key: Optional[str] = None) -> Optional[Keypair]: ...

    def get(self, name: str) -> Optional[Keypair]: ...

    def list(self) -> Sequence[Keypair]: ...

    def delete(self, name: str) -> ActionResponse: ...


@runtime_checkable
class CloudClientPort(Protocol):
    """Root facade over the remote API."""

    def ports(self) -> UpdatableServicePort: ...

    def subnets(self) -> ResourceServicePort: ...

    def networks(self) -> ResourceServicePort: ...

    def routers(self) -> UpdatableServicePort: ...

    def keypairs(self) -> KeypairServicePort: ...
