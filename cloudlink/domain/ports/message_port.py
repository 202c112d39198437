"""
Message Port

Architectural Intent:
- Abstract view over a message travelling on the in-process bus
- Headers are read-only to the dispatch pipeline; only the body and the
  fault flag are written back
- Reads return Result values and never raise, so the dispatch engine can
  translate every failure the same way

Design Decisions:
- Uses Protocol for structural typing (no inheritance needed)
- has_header distinguishes a missing header from one set to an empty value
"""

from typing import Any, Mapping, Optional, Protocol, runtime_checkable

from cloudlink.domain.value_objects.result import Result


@runtime_checkable
class MessagePort(Protocol):
    @property
    def headers(self) -> Mapping[str, Any]:
        """Read-only view of the header map."""
        ...

    @property
    def fault(self) -> bool: ...

    def has_header(self, name: str) -> bool: ...

    def header(self, name: str, expected_type: Optional[type] = None) -> Result:
        """Typed header read. Absent header is a successful None."""
        ...

    def body(self) -> Any: ...

    def body_as(self, expected_type: type) -> Result:
        """Body as an instance of expected_type; absent or mismatched is a failure."""
        ...

    def set_body(self, value: Any) -> None: ...

    def set_fault(self, flag: bool) -> None: ...
