"""Dependency wiring: one owned instance of each collaborator."""

import sys
from dataclasses import dataclass
from typing import Optional

from gemini_bridge.adapters.discord.adapter import PromptBot
from gemini_bridge.adapters.llm.gemini import GeminiClient
from gemini_bridge.adapters.webhook.sink import create_webhook_sink
from gemini_bridge.config import AppConfig
from gemini_bridge.domain.command import CommandDispatcher
from gemini_bridge.domain.relay import ResponseRelay
from gemini_bridge.ports.outbound import WebhookSink


def _log(msg: str):
    print(msg, file=sys.stderr)


@dataclass
class Container:
    config: AppConfig
    gemini: GeminiClient
    webhook: WebhookSink
    relay: ResponseRelay
    dispatcher: CommandDispatcher
    bot: Optional[PromptBot] = None


def build_container(config: AppConfig, gemini: Optional[GeminiClient] = None) -> Container:
    """Wire the Gemini client, webhook sink, relay, dispatcher and bot.

    The Discord client is only created when a bot token is configured.
    """
    if gemini is None:
        gemini = GeminiClient(config.gemini_api_key, model=config.gemini_model)
    if not gemini.is_configured:
        _log("GEMINI_API_KEY not set, Gemini calls will be rejected by the provider")

    webhook = create_webhook_sink(config.webhook_url)
    _log(f"Webhook log: {'enabled' if webhook.is_enabled else 'disabled'}")

    relay = ResponseRelay(gemini, webhook, max_length=config.max_length)
    dispatcher = CommandDispatcher(relay, prefix=config.command_prefix)
    bot = PromptBot(dispatcher) if config.discord_enabled else None

    return Container(
        config=config,
        gemini=gemini,
        webhook=webhook,
        relay=relay,
        dispatcher=dispatcher,
        bot=bot,
    )
