"""Discord adapter — bridges discord.Client to the command dispatcher."""

from gemini_bridge.adapters.discord.adapter import PromptBot, to_incoming

__all__ = [
    "PromptBot",
    "to_incoming",
]
