"""
Operation Value Object

Architectural Intent:
- Closed set of lifecycle operations every resource kind is dispatched on
- Encoded on the wire as the value of the `operation` header
- Decoding is exact-match; casing is significant
"""

from enum import Enum
from typing import Any, Optional


class Operation(Enum):
    CREATE = "create"
    GET = "get"
    GET_ALL = "getAll"
    UPDATE = "update"
    DELETE = "delete"

    @property
    def token(self) -> str:
        return self.value

    @classmethod
    def decode(cls, value: Any) -> Optional["Operation"]:
        """Return the Operation for a header value, or None if unrecognized."""
        if isinstance(value, Operation):
            return value
        if not isinstance(value, str):
            return None
        for op in cls:
            if op.value == value:
                return op
        return None

    def __str__(self) -> str:
        return self.value
