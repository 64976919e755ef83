"""Webhook sinks for exchange logs."""

from gemini_bridge.adapters.webhook.sink import HttpWebhookSink, NullWebhookSink, create_webhook_sink

__all__ = [
    "HttpWebhookSink",
    "NullWebhookSink",
    "create_webhook_sink",
]
