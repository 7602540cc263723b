"""Nestorbot — message routing core for Nestor chat bots."""

from nestorbot.config import __version__, RelayConfig, RuntimeConfig
from nestorbot.domain import Completion, Listener, Message, TextMessage, User, respond_pattern
from nestorbot.ports.outbound import DeliveryResult
from nestorbot.response import CapturedOutput, Response, capture_output
from nestorbot.robot import Robot

__all__ = [
    "__version__",
    "Completion",
    "DeliveryResult",
    "Listener",
    "Message",
    "RelayConfig",
    "CapturedOutput",
    "Response",
    "Robot",
    "RuntimeConfig",
    "TextMessage",
    "User",
    "capture_output",
    "respond_pattern",
]
