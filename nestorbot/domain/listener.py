"""Listeners and the completion handle passed to their callbacks."""

import asyncio
import inspect
import re
from typing import Any, Callable, Optional, Pattern, Union

from nestorbot.domain.models import Message, TextMessage


class Completion:
    """Signals that a listener callback has finished its work.

    Calling it more than once is harmless.
    """

    def __init__(self):
        self._event = asyncio.Event()

    def __call__(self):
        self._event.set()

    @property
    def is_set(self) -> bool:
        return self._event.is_set()

    async def wait(self):
        await self._event.wait()


Callback = Callable[..., Any]


def accepts_completion(callback: Callable) -> bool:
    """True if `callback` can take a second positional argument."""
    try:
        params = inspect.signature(callback).parameters.values()
    except (TypeError, ValueError):
        # builtins without a signature get the one-argument form
        return False
    positional = 0
    for param in params:
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return True
        if param.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD):
            positional += 1
    return positional >= 2


class Listener:
    """A (pattern, callback) pair matched against text messages."""

    def __init__(self, regex: Union[str, Pattern], callback: Callback):
        if isinstance(regex, str):
            regex = re.compile(regex)
        self.regex = regex
        self.callback = callback
        self.accepts_done = accepts_completion(callback)

    def match(self, message: Message) -> Optional[re.Match]:
        if not isinstance(message, TextMessage):
            return None
        return message.match(self.regex)

    def __repr__(self):
        return f"Listener({self.regex.pattern!r})"
