"""
IPVersion Value Object

Architectural Intent:
- Address family of a subnet
- Accepts the loose header encodings callers put on messages (4, "4", "V4")
"""

from enum import Enum
from typing import Any


class IPVersion(Enum):
    V4 = 4
    V6 = 6

    @classmethod
    def parse(cls, value: Any) -> "IPVersion":
        """Coerce a header value to an IPVersion. Raises ValueError if not possible."""
        if isinstance(value, IPVersion):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Invalid IP version: {value!r}")
        if isinstance(value, int):
            return cls(value)
        if isinstance(value, str):
            text = value.strip().upper()
            if text in ("V4", "IPV4", "4"):
                return cls.V4
            if text in ("V6", "IPV6", "6"):
                return cls.V6
        raise ValueError(f"Invalid IP version: {value!r}")
