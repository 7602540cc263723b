"""Tests for RelayClient with an explicit config."""

from unittest.mock import MagicMock, patch

from nestorbot.adapters.relay import RelayClient
from nestorbot.config import RelayConfig
from nestorbot.ports.outbound import DeliveryPort


def test_implements_delivery_port():
    assert isinstance(RelayClient(), DeliveryPort)


def test_explicit_config_used():
    client = RelayClient(RelayConfig(auth_token="tok", api_host="http://relay", timeout=2.5))
    resp = MagicMock(status_code=202)
    with patch("nestorbot.adapters.relay.requests.post", return_value=resp) as mock_post:
        result = client.deliver("T1", "U1", "C1", ["hi"], reply=False)
    assert result.success is True
    args, kwargs = mock_post.call_args
    assert args[0] == "http://relay/teams/T1/messages"
    assert kwargs["timeout"] == 2.5


def test_missing_token_sends_without_authorization():
    client = RelayClient(RelayConfig(auth_token=""))
    resp = MagicMock(status_code=401)
    with patch("nestorbot.adapters.relay.requests.post", return_value=resp) as mock_post:
        result = client.deliver("T1", "U1", "C1", ["hi"], reply=False)
    assert result.success is False
    assert "Authorization" not in mock_post.call_args.kwargs["headers"]


def test_build_payload():
    payload = RelayClient.build_payload("U1", "C1", ["a", "b"], reply=True)
    assert payload == {
        "message[user_uid]": "U1",
        "message[channel_uid]": "C1",
        "message[strings]": '["a", "b"]',
        "message[reply]": "true",
    }
