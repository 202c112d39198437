"""
Keypair Entity

Architectural Intent:
- Nova SSH keypair, addressed by name rather than by a generated id
- Never built from headers: keypair create takes (name, public_key) directly
- private_key is only populated when the remote side generated the pair
"""

from dataclasses import dataclass
from typing import Optional

from cloudlink.domain.entities.resource import Resource


@dataclass(frozen=True)
class Keypair(Resource):
    name: Optional[str] = None
    public_key: Optional[str] = None
    private_key: Optional[str] = None
    fingerprint: Optional[str] = None
    user_id: Optional[str] = None

    @property
    def id(self) -> Optional[str]:
        return self.name

    def with_id(self, resource_id: str) -> "Keypair":
        raise TypeError("Keypairs are identified by name")
