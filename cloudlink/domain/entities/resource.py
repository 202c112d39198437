"""
Resource Base

Architectural Intent:
- Common shape of every cloud resource value: immutable, server-assigned id
- Builders are explicit setter chains producing an immutable value; each
  concrete builder lists its own setters so the field set stays auditable
- to_dict/from_dict serialize resources for the replay CLI and test fixtures
"""

import dataclasses
from enum import Enum
from typing import Any, ClassVar, Generic, Optional, TypeVar


class Resource:
    """Mixin for frozen resource dataclasses. Subclasses declare an `id` field."""

    id: Optional[str]

    @property
    def has_id(self) -> bool:
        return bool(self.id)

    def with_id(self, resource_id: str):
        return dataclasses.replace(self, id=resource_id)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            data[f.name] = value.value if isinstance(value, Enum) else value
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]):
        """Build from a dict, ignoring unknown keys."""
        valid_fields = {f.name for f in dataclasses.fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in valid_fields})


R = TypeVar("R", bound=Resource)


class ResourceBuilder(Generic[R]):
    resource_type: ClassVar[type]

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}

    def _set(self, field_name: str, value: Any) -> "ResourceBuilder[R]":
        self._values[field_name] = value
        return self

    def id(self, resource_id: str) -> "ResourceBuilder[R]":
        return self._set("id", resource_id)

    def build(self) -> R:
        return self.resource_type(**self._values)
