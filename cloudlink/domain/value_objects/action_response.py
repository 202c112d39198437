"""
ActionResponse Value Object

Architectural Intent:
- Result of remote operations that return no resource (delete)
- Sum type: success, or failed with the remote message and status code
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ActionResponse:
    success: bool
    message: Optional[str] = None
    code: Optional[int] = None

    def __post_init__(self) -> None:
        if self.success and (self.message or self.code is not None):
            raise ValueError("A successful ActionResponse carries no fault details")

    @classmethod
    def action_success(cls) -> "ActionResponse":
        return cls(success=True)

    @classmethod
    def action_failed(cls, message: str, code: int) -> "ActionResponse":
        return cls(success=False, message=message, code=code)

    @property
    def fault_message(self) -> str:
        """Diagnostic text for a failed response, `<code>: <message>`."""
        if self.success:
            return ""
        if self.code is None:
            return self.message or ""
        return f"{self.code}: {self.message or ''}"

    def __str__(self) -> str:
        return "success" if self.success else f"failed({self.fault_message})"
