"""
Result Value Object

Architectural Intent:
- Return variant for Message Adapter reads, which never raise
- Carries either a value (possibly None for an absent header) or a
  CallerError describing why the read failed
- unwrap() is how the engine turns a failed read back into its exception
"""

from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

from cloudlink.domain.exceptions import CallerError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    value: Optional[T] = None
    error: Optional[CallerError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Any = None) -> "Result":
        return cls(value=value)

    @classmethod
    def failure(cls, error: CallerError) -> "Result":
        return cls(error=error)

    def unwrap(self) -> Optional[T]:
        if self.error is not None:
            raise self.error
        return self.value
