"""Robot — listener registry and message dispatcher.

Listeners are evaluated in registration order and only the first one whose
pattern matches a message runs. A callback may take one or two arguments:

- ``callback(response)`` completes when it returns, or when the awaitable
  it returns is done;
- ``callback(response, done)`` completes when it calls ``done()``, either
  before it returns or later from work it scheduled. A coroutine function
  of this shape also completes when it returns.

There is no timeout. A callback that never completes leaves its receive
cycle pending. Errors raised by a callback propagate out of ``receive``.
"""

import inspect
import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Pattern, Union

from nestorbot.adapters import scripts
from nestorbot.adapters.relay import RelayClient
from nestorbot.adapters.scoped_http import ScopedHttpClient
from nestorbot.config import __version__
from nestorbot.domain.addressing import respond_pattern
from nestorbot.domain.listener import Callback, Completion, Listener
from nestorbot.domain.models import Message
from nestorbot.ports.outbound import DeliveryPort
from nestorbot.response import Response


class Robot:
    """A bot identity plus the listeners registered for it.

    In debug mode responses are buffered in ``to_send``/``to_reply``
    instead of being posted to the relay.
    """

    def __init__(
        self,
        team_id: str,
        bot_id: str,
        debug_mode: bool = False,
        relay: Optional[DeliveryPort] = None,
    ):
        self.team_id = team_id
        self.bot_id = bot_id
        self.debug_mode = debug_mode
        self.relay: DeliveryPort = relay or RelayClient()
        self.version = __version__
        self.listeners: List[Listener] = []
        self.to_send: List[str] = []
        self.to_reply: List[str] = []
        self.global_http_options: Dict[str, Any] = {}
        self.logger = logging.getLogger("nestorbot")

    # -- Registration --

    def hear(self, regex: Union[str, Pattern], callback: Callback):
        """Listen to every message whose text matches `regex`."""
        self.listeners.append(Listener(regex, callback))

    def respond(self, regex: Union[str, Pattern], callback: Callback):
        """Listen to messages addressed to the bot whose content matches `regex`."""
        self.listeners.append(Listener(self.respond_pattern(regex), callback))

    def respond_pattern(self, regex: Union[str, Pattern]) -> Pattern:
        return respond_pattern(regex, self.bot_id)

    # -- Dispatch --

    async def receive(
        self,
        message: Message,
        on_complete: Optional[Callable[[], Any]] = None,
    ) -> bool:
        """Run the first listener matching `message`, then `on_complete`.

        Returns True if a listener handled the message.
        """
        handled = False
        for listener in list(self.listeners):
            if message.finished:
                break
            match = listener.match(message)
            if match is None:
                continue

            response = Response(self, message, match)
            done = Completion()
            if listener.accepts_done:
                result = listener.callback(response, done)
            else:
                result = listener.callback(response)
            if inspect.isawaitable(result):
                await result
                done()
            elif not listener.accepts_done:
                done()
            await done.wait()
            handled = True
            break

        if on_complete is not None:
            completed = on_complete()
            if inspect.isawaitable(completed):
                await completed
        return handled

    # -- Helpers for scripts --

    def http(self, url: str, options: Optional[Mapping[str, Any]] = None) -> ScopedHttpClient:
        """Create a ScopedHttpClient; call-site options beat global ones."""
        return ScopedHttpClient.create(url, self.global_http_options, options)

    def load_file(self, path: Union[str, Path], filename: str) -> bool:
        return scripts.load_file(self, path, filename)

    def load(self, path: Union[str, Path]) -> List[str]:
        """Load every listener script in a directory."""
        self.logger.debug("Loading scripts from %s", path)
        return scripts.load_directory(self, path)

    def reset_buffers(self):
        """Drop any output buffered in debug mode."""
        self.to_send.clear()
        self.to_reply.clear()
