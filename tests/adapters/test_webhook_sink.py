"""Unit tests for webhook sinks."""

import pytest
from unittest.mock import patch

from gemini_bridge.adapters.webhook.sink import HttpWebhookSink, NullWebhookSink, create_webhook_sink
from gemini_bridge.ports.outbound import WebhookRecord

RECORD = WebhookRecord(
    title="hello",
    description="Hi there",
    timestamp="2024-05-01T12:00:00+00:00",
    username="Alice",
    avatar=None,
)


def _mock_aiohttp_session(status, captured, text=""):
    class FakeResponse:
        def __init__(self):
            self.status = status

        async def text(self):
            return text

        async def __aenter__(self):
            return self

        async def __aexit__(self, *args):
            pass

    class FakeSession:
        def post(self, url, **kwargs):
            captured["url"] = url
            captured.update(kwargs)
            return FakeResponse()

        async def __aenter__(self):
            return self

        async def __aexit__(self, *args):
            pass

    return FakeSession


class TestFactory:
    def test_url_gives_http_sink(self):
        sink = create_webhook_sink("https://hooks.example/log")
        assert isinstance(sink, HttpWebhookSink)
        assert sink.is_enabled is True

    def test_no_url_gives_null_sink(self):
        assert isinstance(create_webhook_sink(""), NullWebhookSink)
        assert isinstance(create_webhook_sink(None), NullWebhookSink)
        assert NullWebhookSink().is_enabled is False


class TestHttpWebhookSink:
    @pytest.mark.asyncio
    async def test_posts_json_payload(self):
        captured = {}
        sink = HttpWebhookSink("https://hooks.example/log")
        with patch("gemini_bridge.adapters.webhook.sink.aiohttp.ClientSession",
                   _mock_aiohttp_session(204, captured)):
            await sink.post(RECORD)
        assert captured["url"] == "https://hooks.example/log"
        assert captured["json"] == {
            "title": "hello",
            "description": "Hi there",
            "timestamp": "2024-05-01T12:00:00+00:00",
            "username": "Alice",
            "avatar": None,
        }

    @pytest.mark.asyncio
    async def test_http_error_raises(self):
        sink = HttpWebhookSink("https://hooks.example/log")
        with patch("gemini_bridge.adapters.webhook.sink.aiohttp.ClientSession",
                   _mock_aiohttp_session(404, {}, text="Unknown Webhook")):
            with pytest.raises(RuntimeError, match="Unknown Webhook"):
                await sink.post(RECORD)


@pytest.mark.asyncio
async def test_null_sink_post_is_noop():
    assert await NullWebhookSink().post(RECORD) is None
