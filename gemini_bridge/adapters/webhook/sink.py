"""Webhook sink using aiohttp — implements WebhookSink."""

from typing import Optional

import aiohttp

from gemini_bridge.ports.outbound import WebhookRecord, WebhookSink


class HttpWebhookSink:
    """POSTs each record as JSON to a configured URL."""

    def __init__(self, url: str):
        self.url = url

    @property
    def is_enabled(self) -> bool:
        return True

    async def post(self, record: WebhookRecord) -> None:
        async with aiohttp.ClientSession() as session:
            async with session.post(self.url, json=record.to_payload()) as resp:
                if resp.status >= 400:
                    body = await resp.text()
                    raise RuntimeError(f"Webhook failed (HTTP {resp.status}): {body}")


class NullWebhookSink:
    """Used when no webhook URL is configured."""

    @property
    def is_enabled(self) -> bool:
        return False

    async def post(self, record: WebhookRecord) -> None:
        return None


def create_webhook_sink(url: Optional[str]) -> WebhookSink:
    if url:
        return HttpWebhookSink(url)
    return NullWebhookSink()
