"""Discord adapter — converts discord.Message to IncomingMessage and
delegates to CommandDispatcher.

discord.py schedules every ``on_message`` call as its own task, so each
message is handled in isolation and concurrently with the others.
"""

import sys

import discord

from gemini_bridge.domain.command import CommandDispatcher
from gemini_bridge.ports.inbound import IncomingMessage


def _log(msg: str):
    print(msg, file=sys.stderr)


def _intents() -> discord.Intents:
    intents = discord.Intents.none()
    intents.guilds = True
    intents.guild_messages = True
    intents.message_content = True
    return intents


def to_incoming(message: discord.Message) -> IncomingMessage:
    """Convert a Discord message to platform-agnostic IncomingMessage."""
    author = message.author
    avatar = author.avatar.url if author.avatar else None
    return IncomingMessage(
        content=message.content,
        channel_id=message.channel.id,
        author_name=author.display_name,
        is_bot=author.bot,
        created_at=message.created_at,
        author_avatar_url=avatar,
    )


class PromptBot(discord.Client):
    """Thin Discord client that forwards prefix commands to the dispatcher."""

    def __init__(self, dispatcher: CommandDispatcher, **discord_kwargs):
        super().__init__(intents=_intents(), **discord_kwargs)
        self._dispatcher = dispatcher

    async def on_ready(self):
        _log(f"[discord] Logged in as {self.user}!")

    async def on_message(self, message: discord.Message):
        await self._dispatcher.dispatch(to_incoming(message), message.channel)
