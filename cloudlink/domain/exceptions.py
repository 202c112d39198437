"""
Domain Exceptions

Architectural Intent:
- One hierarchy for every failure the dispatch pipeline can report
- Raised inside builders and engine helpers, converted to a message fault
  in exactly one place (DispatchEngine.process)
- str(exc) is the diagnostic written to the message body
"""

from typing import Any, Optional


class CloudLinkError(Exception):
    """Base class for dispatch failures."""


class CallerError(CloudLinkError):
    """The message itself is malformed for the requested operation."""


class UnsupportedOperationError(CallerError):
    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"unsupported operation: {value}")


class OperationNotSupportedError(CallerError):
    def __init__(self, operation: Any, kind: Any) -> None:
        self.operation = operation
        self.kind = kind
        super().__init__(f"operation {operation} not supported for {kind}")


class MissingHeaderError(CallerError):
    def __init__(self, header: str, operation: Any = None, kind: Any = None) -> None:
        self.header = header
        self.operation = operation
        self.kind = kind
        super().__init__(f"missing header {header} for {operation} on {kind}")


class MissingIdHeaderError(CallerError):
    def __init__(self) -> None:
        super().__init__("missing id header")


class HeaderTypeError(CallerError):
    def __init__(self, header: str, value: Any, kind: Any = None) -> None:
        self.header = header
        self.value = value
        self.kind = kind
        message = f"header {header} has invalid type {type(value).__name__}"
        if kind is not None:
            message += f" for {kind}"
        super().__init__(message)


class BodyTypeError(CallerError):
    def __init__(self, expected: str, actual: Any) -> None:
        self.expected = expected
        self.actual = actual
        actual_name = "absent" if actual is None else type(actual).__name__
        super().__init__(f"body must be a {expected}, got {actual_name}")


class ResourceNotFoundError(CloudLinkError):
    def __init__(self, resource_id: str) -> None:
        self.resource_id = resource_id
        super().__init__(f"not found: {resource_id}")


class RemoteFailureError(CloudLinkError):
    def __init__(self, message: str, code: Optional[int] = None) -> None:
        self.message = message
        self.code = code
        super().__init__(message if code is None else f"{code}: {message}")


class InvariantViolationError(CloudLinkError):
    """The remote API or client facade returned something it must not."""
