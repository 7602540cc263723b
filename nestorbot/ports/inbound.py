"""Inbound port — what a listener script must provide."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ListenerScript(Protocol):
    """A loaded script module that registers listeners on a robot."""

    def register_listeners(self, robot: Any) -> None: ...
