"""Domain layer — pure Python, no framework dependencies."""

from nestorbot.domain.addressing import respond_pattern
from nestorbot.domain.listener import Completion, Listener
from nestorbot.domain.models import Message, TextMessage, User

__all__ = [
    "Completion",
    "Listener",
    "Message",
    "TextMessage",
    "User",
    "respond_pattern",
]
