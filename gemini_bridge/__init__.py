"""Gemini Bridge — Discord prompt commands relayed to Gemini."""

from gemini_bridge.config import AppConfig, __version__
from gemini_bridge.domain import CommandDispatcher, RelayOutcome, ResponseRelay, parse_command
from gemini_bridge.ports import CommandInvocation, IncomingMessage, WebhookRecord

__all__ = [
    "__version__",
    "AppConfig",
    "CommandDispatcher",
    "RelayOutcome",
    "ResponseRelay",
    "parse_command",
    "CommandInvocation",
    "IncomingMessage",
    "WebhookRecord",
]
