"""Chat users and messages carried through the dispatch pipeline."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class User:
    """A chat user. `room` is the room the user last spoke in, if known."""

    id: str
    name: Optional[str] = None
    room: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)


@dataclass
class Message:
    """An inbound chat message.

    When no room is given, the message inherits the user's room.
    """

    user: Optional[User]
    text: str = ""
    room: Optional[str] = None
    finished: bool = False

    def __post_init__(self):
        if self.room is None and self.user is not None:
            self.room = self.user.room

    def finish(self):
        """Stop dispatching this message to further listeners."""
        self.finished = True


class TextMessage(Message):
    """Plain text message, the only kind listeners match against."""

    def match(self, regex):
        return regex.search(self.text)
