"""Port interfaces (Hexagonal Architecture)."""

from nestorbot.ports.inbound import ListenerScript
from nestorbot.ports.outbound import DeliveryPort, DeliveryResult

__all__ = [
    "DeliveryPort",
    "DeliveryResult",
    "ListenerScript",
]
