"""Responses are handed to matching listeners.

A Response knows the message that triggered the listener, the regex match,
and how to deliver text back to the room the message came from.
"""

import random
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterator, List, Mapping, Optional, Sequence

from nestorbot.domain.models import Message
from nestorbot.ports.outbound import DeliveryResult

if TYPE_CHECKING:
    from nestorbot.robot import Robot


@dataclass
class CapturedOutput:
    """Strings buffered in debug mode while a capture is active."""

    to_send: List[str] = field(default_factory=list)
    to_reply: List[str] = field(default_factory=list)


_capture: ContextVar[Optional[CapturedOutput]] = ContextVar("nestorbot_capture", default=None)


@contextmanager
def capture_output() -> Iterator[CapturedOutput]:
    """Collect debug output produced in the current context.

    Each asyncio task has its own context, so concurrent receive cycles
    run under separate captures never see each other's output.
    """
    output = CapturedOutput()
    token = _capture.set(output)
    try:
        yield output
    finally:
        _capture.reset(token)


class Response:
    def __init__(self, robot: "Robot", message: Message, match):
        self.robot = robot
        self.message = message
        self.match = match

    def send(self, *strings: str) -> DeliveryResult:
        """Post one or more strings back to the room, in order."""
        return self._deliver(list(strings), reply=False)

    def reply(self, *strings: str) -> DeliveryResult:
        """Post one or more strings addressed to the message's author."""
        return self._deliver(list(strings), reply=True)

    def finish(self):
        """Tell the message to stop dispatching to listeners."""
        self.message.finish()

    def random(self, items: Sequence[Any]) -> Any:
        return random.choice(items)

    def http(self, url: str, options: Optional[Mapping[str, Any]] = None):
        return self.robot.http(url, options)

    def _deliver(self, strings: List[str], reply: bool) -> DeliveryResult:
        # Debug mode buffers output for the caller instead of posting it
        if self.robot.debug_mode:
            captured = _capture.get()
            if reply:
                self.robot.to_reply.extend(strings)
                if captured is not None:
                    captured.to_reply.extend(strings)
            else:
                self.robot.to_send.extend(strings)
                if captured is not None:
                    captured.to_send.extend(strings)
            return DeliveryResult(success=True)

        user = self.message.user
        return self.robot.relay.deliver(
            team_id=self.robot.team_id,
            user_id=user.id if user is not None else None,
            room=self.message.room,
            strings=strings,
            reply=reply,
        )
