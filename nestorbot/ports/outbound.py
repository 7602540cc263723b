"""Outbound ports — interfaces for response delivery."""

from dataclasses import dataclass
from typing import List, Optional, Protocol, runtime_checkable


@dataclass
class DeliveryResult:
    """Outcome of a send/reply call. Truthy when delivery succeeded."""

    success: bool
    status_code: Optional[int] = None
    error: Optional[str] = None

    def __bool__(self) -> bool:
        return self.success


@runtime_checkable
class DeliveryPort(Protocol):
    """Interface for delivering response strings to a chat room."""

    def deliver(
        self,
        team_id: str,
        user_id: Optional[str],
        room: Optional[str],
        strings: List[str],
        reply: bool,
    ) -> DeliveryResult: ...
