"""Port interfaces (Hexagonal Architecture)."""

from gemini_bridge.ports.inbound import CommandInvocation, IncomingMessage
from gemini_bridge.ports.outbound import ChannelSender, LLMPort, WebhookRecord, WebhookSink

__all__ = [
    "CommandInvocation",
    "IncomingMessage",
    "ChannelSender",
    "LLMPort",
    "WebhookRecord",
    "WebhookSink",
]
