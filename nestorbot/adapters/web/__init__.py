"""Web adapter — HTTP surface for handing messages to the robot."""

from nestorbot.adapters.web.server import create_app

__all__ = ["create_app"]
