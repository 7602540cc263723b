"""Relay client — posts response strings to the Nestor message API."""

import json
import logging
from typing import List, Optional

import requests

from nestorbot.config import RelayConfig
from nestorbot.ports.outbound import DeliveryResult

logger = logging.getLogger("nestorbot.relay")

ACCEPTED = 202


class RelayClient:
    """DeliveryPort implementation using a blocking requests.post.

    Without an explicit config, the environment is read on every delivery.
    """

    def __init__(self, config: Optional[RelayConfig] = None):
        self._config = config

    @property
    def config(self) -> RelayConfig:
        return self._config or RelayConfig.from_env()

    @staticmethod
    def build_payload(user_id: str, room: str, strings: List[str], reply: bool) -> dict:
        """Form fields, nested the way the relay's query-string parser expects."""
        return {
            "message[user_uid]": user_id,
            "message[channel_uid]": room,
            "message[strings]": json.dumps(strings),
            "message[reply]": "true" if reply else "false",
        }

    def deliver(
        self,
        team_id: str,
        user_id: Optional[str],
        room: Optional[str],
        strings: List[str],
        reply: bool,
    ) -> DeliveryResult:
        if user_id is None:
            return DeliveryResult(success=False, error="message has no user")
        if room is None:
            return DeliveryResult(success=False, error="message has no room")
        if not strings:
            return DeliveryResult(success=False, error="nothing to send")

        config = self.config
        headers = {}
        if config.auth_token:
            headers["Authorization"] = config.auth_token
        else:
            logger.warning("__NESTOR_AUTH_TOKEN is not set; relay will likely reject the message")

        try:
            resp = requests.post(
                f"{config.api_host}/teams/{team_id}/messages",
                headers=headers,
                data=self.build_payload(user_id, room, strings, reply),
                timeout=config.timeout,
            )
        except requests.RequestException as e:
            logger.warning("Relay delivery failed: %s", e)
            return DeliveryResult(success=False, error=str(e))

        if resp.status_code != ACCEPTED:
            logger.warning("Relay rejected message: HTTP %s", resp.status_code)
            return DeliveryResult(
                success=False,
                status_code=resp.status_code,
                error=f"relay responded with HTTP {resp.status_code}",
            )
        return DeliveryResult(success=True, status_code=resp.status_code)
