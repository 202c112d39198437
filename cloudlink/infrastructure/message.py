"""
In-Process Message

Architectural Intent:
- Concrete MessagePort: the mutable envelope carried by the message bus
- Header map is frozen behind a read-only view once the message is built;
  producers can only replace the body and raise the fault flag
- Reads report type mismatches through Result values instead of raising
"""

import uuid
from types import MappingProxyType
from typing import Any, Mapping, Optional

from cloudlink.domain.exceptions import BodyTypeError, HeaderTypeError
from cloudlink.domain.value_objects.result import Result


class Message:
    def __init__(
        self,
        headers: Optional[Mapping[str, Any]] = None,
        body: Any = None,
        message_id: Optional[str] = None,
    ) -> None:
        self.message_id = message_id or str(uuid.uuid4())
        self._headers: dict[str, Any] = dict(headers or {})
        self._body = body
        self._fault = False

    @property
    def headers(self) -> Mapping[str, Any]:
        return MappingProxyType(self._headers)

    @property
    def fault(self) -> bool:
        return self._fault

    def has_header(self, name: str) -> bool:
        return name in self._headers

    def header(self, name: str, expected_type: Optional[type] = None) -> Result:
        value = self._headers.get(name)
        if value is None or expected_type is None or isinstance(value, expected_type):
            return Result.success(value)
        return Result.failure(HeaderTypeError(name, value))

    def body(self) -> Any:
        return self._body

    def body_as(self, expected_type: type) -> Result:
        if isinstance(self._body, expected_type):
            return Result.success(self._body)
        return Result.failure(BodyTypeError(expected_type.__name__, self._body))

    def set_body(self, value: Any) -> None:
        self._body = value

    def set_fault(self, flag: bool) -> None:
        self._fault = bool(flag)

    def __repr__(self) -> str:
        return (
            f"Message(id={self.message_id!r}, headers={self._headers!r}, "
            f"fault={self._fault})"
        )
